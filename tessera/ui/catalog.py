"""
Tessera UI: Component catalog

Describes every component of the kit: where it lives, its sub-components, the enumerated values each style argument
accepts and the client-side commands that go with it. The playground and tooling read it; components never do.

Value sets are taken from the resolvers themselves, so the catalog cannot drift from what the components accept.
"""

from __future__ import annotations

import importlib
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from tessera.ui.tokens import CHAT_VARIANTS, COLORS, TOOLTIP_VARIANTS, VARIANTS

_COMPONENTS = "tessera.ui.components"

banner = importlib.import_module(f"{_COMPONENTS}.feedback.banner")
breadcrumb = importlib.import_module(f"{_COMPONENTS}.navigation.breadcrumb")
card = importlib.import_module(f"{_COMPONENTS}.layout.card")
chat = importlib.import_module(f"{_COMPONENTS}.data.chat")
gallery = importlib.import_module(f"{_COMPONENTS}.layout.gallery")
keyboard = importlib.import_module(f"{_COMPONENTS}.indicators.keyboard")
modal = importlib.import_module(f"{_COMPONENTS}.layout.modal")
sidebar = importlib.import_module(f"{_COMPONENTS}.layout.sidebar")
tooltip = importlib.import_module(f"{_COMPONENTS}.feedback.tooltip")


class ComponentEntry(BaseModel):
    """Catalog record for one component."""

    model_config = ConfigDict(frozen=True)

    name: str
    module: str
    render: str
    subcomponents: tuple[str, ...] = ()
    args: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    helpers: tuple[str, ...] = ()

    def load(self, attr: str | None = None) -> Callable[..., Any]:
        """Import and return `attr` (the main renderer by default) from the component's module."""
        return getattr(importlib.import_module(self.module), attr or self.render)


def _entry(module: Any, render: str, **kwargs: Any) -> ComponentEntry:
    return ComponentEntry(name=render, module=module.__name__, render=render, **kwargs)


COMPONENT_CATALOG: dict[str, ComponentEntry] = {
    entry.name: entry
    for entry in (
        _entry(
            banner,
            "banner",
            subcomponents=("banner_dismiss",),
            args={
                "variant": VARIANTS,
                "color": COLORS,
                "border": banner.border_class.first_values,
                "border_position": banner.border_class.second_values,
                "rounded": banner.rounded_size.first_values,
                "rounded_position": banner.rounded_size.second_values,
                "space": banner.space_class.values,
                "padding": banner.padding_size.values,
                "vertical_position": banner.vertical_position.second_values,
                "vertical_size": banner.vertical_position.first_values,
                "position": banner.position_class.second_values,
                "position_size": banner.position_class.first_values,
            },
            helpers=("show", "hide", "show_banner", "hide_banner"),
        ),
        _entry(
            breadcrumb,
            "breadcrumb",
            args={"color": breadcrumb.color_class.values, "size": breadcrumb.size_class.values},
        ),
        _entry(
            card,
            "card",
            subcomponents=("card_title", "card_media", "card_content", "card_footer"),
            args={
                "variant": VARIANTS,
                "color": COLORS,
                "border": card.border_class.values,
                "rounded": card.rounded_size.values,
                "space": card.space_class.values,
                "padding": card.wrapper_padding.values,
                "size": card.size_class.values,
                "position": card.content_position.values,
            },
        ),
        _entry(
            chat,
            "chat",
            subcomponents=("chat_section",),
            args={
                "variant": CHAT_VARIANTS,
                "color": COLORS,
                "border": chat.border_class.values,
                "rounded": chat.rounded_size.first_values,
                "size": chat.size_class.values,
                "space": chat.space_class.values,
                "position": chat.position_class.values,
                "padding": chat.padding_size.values,
            },
        ),
        _entry(
            gallery,
            "gallery",
            subcomponents=("gallery_media",),
            args={
                "type": gallery.GALLERY_TYPES,
                "cols": gallery.grid_cols.values,
                "gap": gallery.grid_gap.values,
                "rounded": gallery.rounded_size.values,
                "shadow": gallery.shadow_class.values,
            },
        ),
        _entry(
            keyboard,
            "keyboard",
            args={
                "variant": VARIANTS,
                "color": COLORS,
                "size": keyboard.size_class.values,
                "rounded": keyboard.rounded_size.values,
            },
        ),
        _entry(
            modal,
            "modal",
            args={
                "variant": VARIANTS,
                "color": COLORS,
                "rounded": modal.rounded_size.values,
                "padding": modal.padding_size.values,
                "size": modal.size_class.values,
            },
            helpers=("show_modal", "hide_modal"),
        ),
        _entry(
            sidebar,
            "sidebar",
            args={
                "variant": VARIANTS,
                "color": COLORS,
                "size": sidebar.size_class.values,
                "border": sidebar.border_class.first_values,
                "position": sidebar.position_class.values,
                "hide_position": sidebar.hide_position.values,
                "rounded": sidebar.rounded_size.values,
                "space": sidebar.space_class.values,
                "padding": sidebar.padding_size.values,
            },
            helpers=("show_sidebar", "hide_sidebar", "hide_on_click_away"),
        ),
        _entry(
            tooltip,
            "tooltip",
            args={
                "variant": TOOLTIP_VARIANTS,
                "color": COLORS,
                "position": tooltip.position_class.values,
                "rounded": tooltip.rounded_size.values,
                "size": tooltip.size_class.values,
                "space": tooltip.space_class.values,
                "width": tooltip.width_class.values,
                "padding": tooltip.padding_size.values,
                "text_position": tooltip.text_position.values,
            },
        ),
    )
}


def get_component(name: str) -> ComponentEntry:
    try:
        return COMPONENT_CATALOG[name]
    except KeyError:
        raise KeyError(f"Unknown component {name!r}; known: {sorted(COMPONENT_CATALOG)}") from None
