from tessera.ui.components.common import element_props, global_attrs, icon
from tessera.ui.components.data.chat import ChatStatus, chat, chat_section
from tessera.ui.components.feedback.banner import banner, banner_dismiss, hide_banner, show_banner
from tessera.ui.components.feedback.tooltip import tooltip
from tessera.ui.components.indicators.keyboard import keyboard
from tessera.ui.components.layout.card import card, card_content, card_footer, card_media, card_title
from tessera.ui.components.layout.gallery import gallery, gallery_media
from tessera.ui.components.layout.modal import hide_modal, modal, show_modal
from tessera.ui.components.layout.sidebar import hide_sidebar, show_sidebar, sidebar
from tessera.ui.components.navigation.breadcrumb import BreadcrumbItem, breadcrumb

__all__ = [
    "BreadcrumbItem",
    "ChatStatus",
    "banner",
    "banner_dismiss",
    "breadcrumb",
    "card",
    "card_content",
    "card_footer",
    "card_media",
    "card_title",
    "chat",
    "chat_section",
    "element_props",
    "gallery",
    "gallery_media",
    "global_attrs",
    "hide_banner",
    "hide_modal",
    "hide_sidebar",
    "icon",
    "keyboard",
    "modal",
    "show_banner",
    "show_modal",
    "show_sidebar",
    "sidebar",
    "tooltip",
]
