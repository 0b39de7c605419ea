import reflex as rx

from tessera.ui.playground.stories_registry import STORIES, StoryState

_SIDEBAR = [{"id": story["id"], "name": story["name"]} for story in STORIES]


def _sidebar_item(item):
    is_active = item["id"] == StoryState.story_id
    return rx.box(
        rx.hstack(
            rx.text(
                item["name"],
                weight="medium",
                color=rx.cond(is_active, "#0f172a", "#334155"),
            ),
            align="center",
            padding="8px 10px",
        ),
        background=rx.cond(is_active, "#eef2ff", "transparent"),
        border_radius="8px",
        cursor="pointer",
        on_click=lambda _id=item["id"]: StoryState.select(_id),
    )


def _sidebar():
    return rx.box(
        rx.vstack(
            rx.hstack(rx.text("Components", weight="bold"), align="center", padding="6px 8px"),
            rx.vstack(
                *[_sidebar_item(it) for it in _SIDEBAR],
                spacing="1",
            ),
            spacing="2",
            width="100%",
        ),
        position="sticky",
        top="0",
        padding="0.75rem",
        border_right="1px solid #e2e8f0",
        min_width="240px",
        height="100%",
    )


def _pick(slot: str):
    """Select the active story's `slot` ("preview", "controls" or "code_panel")."""
    return rx.match(
        StoryState.story_id,
        *[(story["id"], story[slot]()) for story in STORIES],
        STORIES[0][slot](),
    )


def _preview_panel():
    return rx.box(
        rx.box(
            _pick("preview"),
            padding="1rem",
            background="#ffffff",
            border="1px solid #e2e8f0",
            border_radius="12px",
            width="100%",
        ),
        padding="1rem",
        width="100%",
        max_width="900px",
        margin="0 auto",
    )


def _controls_panel():
    return rx.card(
        rx.vstack(
            rx.text("Controls", weight="bold"),
            _pick("controls"),
            spacing="2",
            width="100%",
        ),
    )


def storybook_page() -> rx.Component:
    return rx.hstack(
        _sidebar(),
        rx.box(
            rx.vstack(
                _preview_panel(),
                _controls_panel(),
                _pick("code_panel"),
                spacing="4",
                width="100%",
            ),
            padding="1rem",
            width="100%",
        ),
        align="start",
        width="100%",
        spacing="0",
    )
