from dataclasses import dataclass
from typing import Any, Iterable, Optional

import reflex as rx

from tessera.ui.components.common import element_props
from tessera.ui.styling import SIZE_STEPS, PairResolver, Resolver, by_size, class_names
from tessera.ui.theme import color_variants
from tessera.ui.theme.theme import BUBBLE

color_variant = PairResolver(color_variants("chat"), color_variants("chat")[("default", "light")], name="chat.color")

position_class = Resolver(
    {"normal": "justify-start flex-row", "flipped": "justify-start flex-row-reverse"},
    "justify-start flex-row",
    name="chat.position",
)

_RADII = ("-sm", "", "-md", "-lg", "-xl")

rounded_size = PairResolver(
    {
        **{(size, "normal"): f"{BUBBLE}rounded-e{r} {BUBBLE}rounded-es{r}" for size, r in zip(SIZE_STEPS, _RADII)},
        **{(size, "flipped"): f"{BUBBLE}rounded-s{r} {BUBBLE}rounded-ee{r}" for size, r in zip(SIZE_STEPS, _RADII)},
    },
    f"{BUBBLE}rounded-e-xl {BUBBLE}rounded-es-xl",
    name="chat.rounded",
)

space_class = Resolver(
    {size: f"{BUBBLE}space-y-{n}" for size, n in zip(SIZE_STEPS, range(2, 7))},
    f"{BUBBLE}space-y-2",
    name="chat.space",
)

padding_size = Resolver(
    {size: f"{BUBBLE}p-{n}" for size, n in zip(SIZE_STEPS, range(1, 6))},
    f"{BUBBLE}p-2",
    name="chat.padding",
)

border_class = Resolver(
    {
        **{size: f"{BUBBLE}{cls}" for size, cls in by_size("border", "border-2", "border-[3px]", "border-4", "border-[5px]").items()},
        "none": f"{BUBBLE}border-0",
    },
    f"{BUBBLE}border",
    name="chat.border",
)

size_class = Resolver(
    {
        size: f"{text} {BUBBLE}max-w-[{rem}rem]"
        for size, text, rem in zip(SIZE_STEPS, ("text-xs", "text-sm", "text-base", "text-lg", "text-xl"), (12, 14, 16, 18, 20))
    },
    f"text-base {BUBBLE}max-w-[16rem]",
    name="chat.size",
)


@dataclass(frozen=True)
class ChatStatus:
    """Footer line of a chat bubble: send time and delivery state (e.g. "Delivered")."""

    time: Optional[str] = None
    deliver: Optional[str] = None


@dataclass(frozen=True)
class ChatStyle:
    variant: Any = "default"
    color: Any = "light"
    border: Any = "extra_small"
    rounded: Any = "extra_large"
    size: Any = "medium"
    space: Any = "extra_small"
    position: Any = "normal"
    padding: Any = "small"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "flex items-start gap-3",
            position_class(self.position),
            rounded_size(self.rounded, self.position),
            border_class(self.border),
            color_variant(self.variant, self.color),
            space_class(self.space),
            padding_size(self.padding),
            size_class(self.size),
            self.class_name,
        )


def chat(
    *children: rx.Component,
    id: Optional[str] = None,
    variant: Any = "default",
    color: Any = "light",
    border: Any = "extra_small",
    rounded: Any = "extra_large",
    size: Any = "medium",
    space: Any = "extra_small",
    position: Any = "normal",
    padding: Any = "small",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render one chat message row: typically an avatar followed by a `chat_section` bubble.

    Bubble styling (color, border, rounded corners, padding) targets the ``chat-section-bubble`` child, so the
    row itself stays transparent.

    Args:
        *children: Avatar and `chat_section` elements.
        variant (str, optional): default, outline, transparent, shadow, gradient or unbordered. Defaults to "default".
        color (str, optional): Color theme. Defaults to "light".
        rounded (str, optional): Bubble radius; the corner next to the avatar stays square. Defaults to "extra_large".
        position (str, optional): "normal" (avatar first) or "flipped". Defaults to "normal".

    Returns:
        rx.Component: The chat row.
    """
    style = ChatStyle(
        variant=variant,
        color=color,
        border=border,
        rounded=rounded,
        size=size,
        space=space,
        position=position,
        padding=padding,
        class_name=class_name,
    )
    return rx.el.div(*children, class_name=style.classes(), **element_props(id=id, rest=rest))


def _status_row(status: ChatStatus) -> rx.Component:
    return rx.el.div(
        rx.el.div(status.time) if status.time else rx.fragment(),
        rx.el.div(status.deliver, class_name="font-semibold") if status.deliver else rx.fragment(),
        class_name="flex items-center justify-between gap-2 text-xs",
    )


def chat_section(
    *children: rx.Component,
    status: Iterable[ChatStatus] = (),
    meta: Iterable[Any] = (),
    id: Optional[str] = None,
    font_weight: Any = "font-normal",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """The message bubble: content, then one row per status entry, then one row per meta entry."""
    return rx.el.div(
        *children,
        *[_status_row(entry) for entry in status],
        *[rx.el.div(entry, class_name="flex items-center justify-between gap-2 text-xs") for entry in meta],
        class_name=class_names("chat-section-bubble leading-1.5", font_weight, class_name),
        **element_props(id=id, rest=rest),
    )
