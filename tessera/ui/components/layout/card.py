from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props
from tessera.ui.components.common import icon as render_icon
from tessera.ui.styling import SIZE_STEPS, PairResolver, Resolver, by_size, class_names
from tessera.ui.theme import color_variants

color_variant = PairResolver(color_variants("card"), "bg-white text-[#3E3E3E] border-[#DADADA]", name="card.color")

border_class = Resolver(
    {"none": "border-0", **by_size("border", "border-2", "border-[3px]", "border-4", "border-[5px]")},
    "border",
    name="card.border",
)

rounded_size = Resolver(
    by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"),
    "rounded-none",
    name="card.rounded",
)

size_class = Resolver(
    by_size(
        "text-xs [&_.card-title-icon]:size-3",
        "text-sm [&_.card-title-icon]:size-3.5",
        "text-base [&_.card-title-icon]:size-4",
        "text-lg [&_.card-title-icon]:size-5",
        "text-xl [&_.card-title-icon]:size-6",
    ),
    "text-lg [&_.card-title-icon]:size-5",
    name="card.size",
)

content_position = Resolver(
    {
        "start": "justify-start",
        "end": "justify-end",
        "center": "justify-center",
        "between": "justify-between",
        "around": "justify-around",
    },
    "justify-start",
    name="card.content_position",
)

wrapper_padding = Resolver(
    {
        **{
            size: f"[&:has(.card-section)>.card-section]:p-{step} [&:not(:has(.card-section))]:p-{step}"
            for step, size in enumerate(SIZE_STEPS, start=1)
        },
        "none": "p-0",
    },
    "p-0",
    name="card.wrapper_padding",
)

# Sections without padding get no padding class at all; the card's wrapper padding applies.
padding_size = Resolver(
    {**by_size("p-1", "p-2", "p-3", "p-4", "p-5"), "none": None},
    None,
    name="card.padding",
)

space_class = Resolver(
    by_size("space-y-2", "space-y-3", "space-y-4", "space-y-5", "space-y-6"),
    "space-y-0",
    name="card.space",
)


@dataclass(frozen=True)
class CardStyle:
    variant: Any = "default"
    color: Any = "white"
    border: Any = "extra_small"
    rounded: Any = None
    space: Any = None
    font_weight: Any = "font-normal"
    padding: Any = None
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "overflow-hidden",
            space_class(self.space),
            border_class(self.border),
            color_variant(self.variant, self.color),
            rounded_size(self.rounded),
            wrapper_padding(self.padding),
            self.font_weight,
            self.class_name,
        )


def card(
    *children: rx.Component,
    id: Optional[str] = None,
    variant: Any = "default",
    color: Any = "white",
    border: Any = "extra_small",
    rounded: Any = None,
    space: Any = None,
    font_weight: Any = "font-normal",
    padding: Any = None,
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render a card container.

    Compose it from `card_title`, `card_media`, `card_content` and `card_footer`. `padding` pads every
    ``card-section`` child, or the card itself when it has none.

    Args:
        *children: Card sections.
        id (str | None, optional): Element id. Defaults to None.
        variant (str, optional): default, outline, transparent, shadow or unbordered. Defaults to "default".
        color (str, optional): Color theme. Defaults to "white".
        border (str, optional): Border width. Defaults to "extra_small".
        rounded (str | None, optional): Corner radius. Defaults to None ("rounded-none").
        space (str | None, optional): Vertical spacing between sections. Defaults to None ("space-y-0").
        padding (str | None, optional): Section padding. Defaults to None ("p-0").

    Returns:
        rx.Component: The card.
    """
    style = CardStyle(
        variant=variant,
        color=color,
        border=border,
        rounded=rounded,
        space=space,
        font_weight=font_weight,
        padding=padding,
        class_name=class_name,
    )
    return rx.el.div(*children, class_name=style.classes(), **element_props(id=id, rest=rest))


def card_title(
    *children: rx.Component,
    title: Optional[str] = None,
    icon: Optional[str] = None,
    id: Optional[str] = None,
    position: Any = "start",
    font_weight: Any = "font-semibold",
    size: Any = "large",
    padding: Any = "none",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """Card header with an optional icon and ``<h3>`` title; `children` follow the title block."""
    heading = rx.fragment()
    if title is not None or icon is not None:
        heading = rx.el.div(
            render_icon(icon, class_name="card-title-icon") if icon else rx.fragment(),
            rx.el.h3(title) if title is not None else rx.fragment(),
            class_name="flex gap-2 items-center",
        )
    return rx.el.div(
        heading,
        *children,
        class_name=class_names(
            "card-section flex items-center gap-2",
            padding_size(padding),
            content_position(position),
            size_class(size),
            font_weight,
            class_name,
        ),
        **element_props(id=id, rest=rest),
    )


def card_media(
    src: str,
    alt: str = "",
    id: Optional[str] = None,
    rounded: Any = None,
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    return rx.el.div(
        rx.el.img(
            src=src,
            alt=alt,
            class_name=class_names("max-w-full", rounded_size(rounded), class_name),
            **element_props(rest=rest),
        ),
        **element_props(id=id),
    )


def card_content(
    *children: rx.Component,
    id: Optional[str] = None,
    space: Any = "extra_small",
    padding: Any = "none",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    return rx.el.div(
        *children,
        class_name=class_names("card-section", space_class(space), padding_size(padding), class_name),
        **element_props(id=id, rest=rest),
    )


def card_footer(
    *children: rx.Component,
    id: Optional[str] = None,
    padding: Any = "none",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    return rx.el.div(
        *children,
        class_name=class_names("card-section", padding_size(padding), class_name),
        **element_props(id=id, rest=rest),
    )

