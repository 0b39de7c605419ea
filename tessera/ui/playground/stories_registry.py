from typing import Callable

import reflex as rx

from tessera.ui.catalog import COMPONENT_CATALOG
from tessera.ui.components import (
    BreadcrumbItem,
    ChatStatus,
    banner,
    breadcrumb,
    card,
    card_content,
    card_footer,
    card_title,
    chat,
    chat_section,
    gallery,
    gallery_media,
    keyboard,
    modal,
    show_banner,
    show_modal,
    show_sidebar,
    sidebar,
    tooltip,
)

Render = Callable[[str, str], rx.Component]

# ========== SHARED UI HELPERS (pure components) ==========


def _prop_select(label: str, value, options: list[str], on_change):
    return rx.vstack(
        rx.text(label, size="2", color="#64748b"),
        rx.select(options, value=value, on_change=on_change),
        spacing="1",
        width="100%",
    )


def _code_panel(title: str, code_text):
    """Render the code block. `code_text` is a str State field so it updates live."""
    return rx.box(
        rx.vstack(
            rx.hstack(
                rx.text(title, weight="bold"),
                rx.spacer(),
                rx.icon_button(rx.icon(tag="copy"), variant="ghost", title="Copy"),
                align="center",
            ),
            rx.box(
                rx.code_block(code_text, language="python", show_line_numbers=False),
                padding="0.75rem",
                background="#0b1020",
                color="#e2e8f0",
                border_radius="10px",
                width="100%",
            ),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


# ========== STORY STATE ==========


class StoryState(rx.State):
    story_id: str = "banner"
    variant: str = "default"
    color: str = "white"

    def select(self, sid: str):
        self.story_id = sid
        story = STORIES_BY_ID[sid]
        self.variant = story["variant"]
        self.color = story["color"]

    def set_variant(self, v: str):
        self.variant = v

    def set_color(self, v: str):
        self.color = v

    @rx.var
    def code_text(self) -> str:
        story = STORIES_BY_ID.get(self.story_id)
        if story is None:
            return ""
        return story["code"].format(variant=self.variant, color=self.color)


def _matrix(render: Render, entry_name: str, variant: str, color: str) -> rx.Component:
    """Pre-render every (variant, color) combination and pick the live one from `StoryState`."""
    variants, colors = _options(entry_name, variant, color)
    return rx.match(
        StoryState.variant,
        *[(v, rx.match(StoryState.color, *[(c, render(v, c)) for c in colors], render(v, color))) for v in variants],
        render(variant, color),
    )


def _options(entry_name: str, variant: str, color: str) -> tuple[list[str], list[str]]:
    args = COMPONENT_CATALOG[entry_name].args
    return list(args.get("variant", (variant,))), list(args.get("color", (color,)))


def _controls(entry_name: str, variant: str, color: str) -> Callable[[], rx.Component]:
    variants, colors = _options(entry_name, variant, color)

    def controls() -> rx.Component:
        return rx.vstack(
            _prop_select("variant", StoryState.variant, variants, StoryState.set_variant),
            _prop_select("color", StoryState.color, colors, StoryState.set_color),
            spacing="2",
            width="100%",
        )

    return controls


def _story(name: str, title: str, render: Render, code: str, variant: str = "default", color: str = "white") -> dict:
    return {
        "id": name,
        "name": title,
        "variant": variant,
        "color": color,
        "preview": lambda: rx.box(_matrix(render, name, variant, color), padding="2rem", width="100%"),
        "controls": _controls(name, variant, color),
        "code": code,
        "code_panel": lambda: _code_panel(title, StoryState.code_text),
    }


# ========== STORIES ==========


def _banner(variant: str, color: str) -> rx.Component:
    return rx.vstack(
        rx.el.button("Show banner", on_click=show_banner("story-banner").to_event()),
        banner(
            rx.text("Scheduled maintenance tonight at 22:00."),
            id="story-banner",
            variant=variant,
            color=color,
            class_name="!relative",
        ),
    )


STORY_BANNER = _story(
    "banner",
    "Banner",
    _banner,
    """from tessera.ui.components import banner

def demo():
    return banner("Scheduled maintenance tonight at 22:00.", id="maintenance", variant="{variant}", color="{color}")
""",
)


def _breadcrumb(variant: str, color: str) -> rx.Component:
    items = [
        BreadcrumbItem("Home", icon="hero-home", link="/"),
        BreadcrumbItem("Projects", link="/projects"),
        BreadcrumbItem("Tessera"),
    ]
    return breadcrumb(items=items, color=color)


STORY_BREADCRUMB = _story(
    "breadcrumb",
    "Breadcrumb",
    _breadcrumb,
    """from tessera.ui.components import BreadcrumbItem, breadcrumb

def demo():
    items = [
        BreadcrumbItem("Home", icon="hero-home", link="/"),
        BreadcrumbItem("Projects", link="/projects"),
        BreadcrumbItem("Tessera"),
    ]
    return breadcrumb(items=items, color="{color}")
""",
    color="dark",
)


def _card(variant: str, color: str) -> rx.Component:
    return card(
        card_title(title="Usage", icon="hero-chart-bar"),
        card_content(rx.text("1,204 requests in the last hour.")),
        card_footer(rx.text("Updated just now", size="1")),
        variant=variant,
        color=color,
        padding="medium",
        rounded="medium",
    )


STORY_CARD = _story(
    "card",
    "Card",
    _card,
    """from tessera.ui.components import card, card_content, card_footer, card_title

def demo():
    return card(
        card_title(title="Usage", icon="hero-chart-bar"),
        card_content("1,204 requests in the last hour."),
        card_footer("Updated just now"),
        variant="{variant}",
        color="{color}",
        padding="medium",
    )
""",
)


def _chat(variant: str, color: str) -> rx.Component:
    return chat(
        rx.el.div("TS", class_name="size-8 rounded-full bg-slate-200 flex items-center justify-center text-xs"),
        chat_section(rx.text("The build is green again."), status=[ChatStatus(time="11:46", deliver="Delivered")]),
        variant=variant,
        color=color,
    )


STORY_CHAT = _story(
    "chat",
    "Chat",
    _chat,
    """from tessera.ui.components import ChatStatus, chat, chat_section

def demo():
    return chat(
        avatar(),
        chat_section("The build is green again.", status=[ChatStatus(time="11:46", deliver="Delivered")]),
        variant="{variant}",
        color="{color}",
    )
""",
    color="light",
)


def _gallery(variant: str, color: str) -> rx.Component:
    return gallery(
        *[gallery_media(src=f"https://picsum.photos/seed/{n}/320/200", rounded="medium") for n in range(6)],
        cols="three",
        gap="small",
    )


STORY_GALLERY = _story(
    "gallery",
    "Gallery",
    _gallery,
    """from tessera.ui.components import gallery, gallery_media

def demo():
    return gallery(*[gallery_media(src=url, rounded="medium") for url in urls], cols="three", gap="small")
""",
)


def _keyboard(variant: str, color: str) -> rx.Component:
    return rx.hstack(
        keyboard("Ctrl", variant=variant, color=color),
        rx.text("+"),
        keyboard("K", variant=variant, color=color),
        align="center",
    )


STORY_KEYBOARD = _story(
    "keyboard",
    "Keyboard",
    _keyboard,
    """from tessera.ui.components import keyboard

def demo():
    return keyboard("Ctrl", variant="{variant}", color="{color}")
""",
)


def _modal(variant: str, color: str) -> rx.Component:
    return rx.fragment(
        rx.el.button("Open modal", on_click=show_modal("story-modal").to_event()),
        modal(
            rx.text("Delete this project? This cannot be undone."),
            id="story-modal",
            title="Delete project",
            variant=variant,
            color=color,
        ),
    )


STORY_MODAL = _story(
    "modal",
    "Modal",
    _modal,
    """from tessera.ui.components import modal, show_modal

def demo():
    return rx.fragment(
        rx.button("Open modal", on_click=show_modal("confirm").to_event()),
        modal("Delete this project?", id="confirm", title="Delete project", variant="{variant}", color="{color}"),
    )
""",
)


def _sidebar(variant: str, color: str) -> rx.Component:
    return rx.vstack(
        rx.el.button("Open sidebar", on_click=show_sidebar("story-sidebar", "left").to_event()),
        sidebar(
            rx.el.ul(rx.el.li("Dashboard"), rx.el.li("Settings"), class_name="p-4 space-y-2"),
            id="story-sidebar",
            hide_position="left",
            variant=variant,
            color=color,
            class_name="!relative !h-64",
        ),
    )


STORY_SIDEBAR = _story(
    "sidebar",
    "Sidebar",
    _sidebar,
    """from tessera.ui.components import sidebar

def demo():
    return sidebar(nav(), id="main-nav", hide_position="left", variant="{variant}", color="{color}")
""",
)


def _tooltip(variant: str, color: str) -> rx.Component:
    return tooltip(keyboard("?"), text="Keyboard shortcuts", variant=variant, color=color)


STORY_TOOLTIP = _story(
    "tooltip",
    "Tooltip",
    _tooltip,
    """from tessera.ui.components import tooltip

def demo():
    return tooltip(rx.text("Hover me"), text="Keyboard shortcuts", variant="{variant}", color="{color}")
""",
    variant="shadow",
    color="dark",
)


STORIES = [
    STORY_BANNER,
    STORY_BREADCRUMB,
    STORY_CARD,
    STORY_CHAT,
    STORY_GALLERY,
    STORY_KEYBOARD,
    STORY_MODAL,
    STORY_SIDEBAR,
    STORY_TOOLTIP,
]

STORIES_BY_ID = {story["id"]: story for story in STORIES}
