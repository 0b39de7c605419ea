from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props
from tessera.ui.styling import PairResolver, Resolver, by_size, class_names
from tessera.ui.theme import color_variants
from tessera.ui.tokens import EXTENDED_SIZES

color_variant = PairResolver(color_variants("tooltip"), "bg-white text-[#3E3E3E]", name="tooltip.color")

rounded_size = Resolver(
    {**by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"), "none": "rounded-none"},
    "rounded",
    name="tooltip.rounded",
)

_POSITIONS = {
    "top": "bottom-full left-1/2 -translate-x-1/2 -translate-y-[4px] "
    "[&>.tooltip-arrow]:-bottom-[4px] [&>.tooltip-arrow]:-translate-x-1/2 [&>.tooltip-arrow]:left-1/2",
    "bottom": "top-full left-1/2 -translate-x-1/2 translate-y-[4px] "
    "[&>.tooltip-arrow]:-top-[4px] [&>.tooltip-arrow]:-translate-x-1/2 [&>.tooltip-arrow]:left-1/2",
    "left": "right-full top-1/2 -translate-y-1/2 -translate-x-[6px] "
    "[&>.tooltip-arrow]:-right-[4px] [&>.tooltip-arrow]:translate-y-1/2 [&>.tooltip-arrow]:top-1/3",
    "right": "left-full top-1/2 -translate-y-1/2 translate-x-[6px] "
    "[&>.tooltip-arrow]:-left-[4px] [&>.tooltip-arrow]:translate-y-1/2 [&>.tooltip-arrow]:top-1/3",
}

position_class = Resolver(_POSITIONS, _POSITIONS["top"], name="tooltip.position")

size_class = Resolver(
    by_size("text-xs max-w-40", "text-sm max-w-44", "text-base max-w-48", "text-lg max-w-28", "text-xl max-w-32"),
    "text-base max-w-48",
    name="tooltip.size",
)

text_position = Resolver(
    {
        "left": "text-left",
        "right": "text-right",
        "center": "text-center",
        "justify": "text-justify",
        "start": "text-start",
        "end": "text-end",
    },
    "text-center",
    name="tooltip.text_position",
)

width_class = Resolver(
    {
        **by_size(
            "min-w-28", "min-w-32", "min-w-36", "min-w-40", "min-w-44", "min-w-48", "min-w-52", "min-w-56",
            sizes=EXTENDED_SIZES,
        ),
        "fit": "min-w-fit",
    },
    "min-w-fit",
    name="tooltip.width",
)

padding_size = Resolver(
    {**by_size("p-1", "p-2", "p-3", "p-4", "p-5"), "none": "p-0"},
    "p-2",
    name="tooltip.padding",
)

space_class = Resolver(
    by_size("space-y-2", "space-y-3", "space-y-4", "space-y-5", "space-y-6"),
    "space-y-0",
    name="tooltip.space",
)


@dataclass(frozen=True)
class TooltipStyle:
    position: Any = "top"
    variant: Any = "shadow"
    color: Any = "dark"
    rounded: Any = None
    size: Any = None
    space: Any = None
    font_weight: Any = "font-normal"
    width: Any = "fit"
    padding: Any = "small"
    text_position: Any = "center"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "absolute z-10 transition-all ease-in-out delay-100 duratio-500 w-full",
            "invisible opacity-0 group-hover:visible group-hover:opacity-100",
            space_class(self.space),
            color_variant(self.variant, self.color),
            rounded_size(self.rounded),
            size_class(self.size),
            padding_size(self.padding),
            position_class(self.position),
            text_position(self.text_position),
            width_class(self.width),
            self.font_weight,
            self.class_name,
        )


def tooltip(
    *children: rx.Component,
    text: Any,
    id: Optional[str] = None,
    position: Any = "top",
    variant: Any = "shadow",
    color: Any = "dark",
    rounded: Any = None,
    size: Any = None,
    space: Any = None,
    font_weight: Any = "font-normal",
    width: Any = "fit",
    padding: Any = "small",
    text_position: Any = "center",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """
    Wrap `children` so that hovering them reveals a small text bubble.

    The bubble is shown purely with CSS (``group-hover``); no client-side commands are involved.

    Args:
        *children: The element the tooltip describes.
        text (str | rx.Component): Tooltip content.
        id (str | None, optional): Id of the tooltip bubble, for ``aria-describedby``. Defaults to None.
        position (str, optional): top, bottom, left or right. Defaults to "top".
        variant (str, optional): default or shadow. Defaults to "shadow".
        color (str, optional): Color theme. Defaults to "dark".
        rounded (str | None, optional): Corner radius. Defaults to None ("rounded").
        size (str | None, optional): Text size and max width. Defaults to None (medium).
        width (str, optional): Minimum width. Defaults to "fit".
        padding (str, optional): Inner padding. Defaults to "small".
        text_position (str, optional): Text alignment. Defaults to "center".

    Returns:
        rx.Component: The wrapped element.
    """
    style = TooltipStyle(
        position=position,
        variant=variant,
        color=color,
        rounded=rounded,
        size=size,
        space=space,
        font_weight=font_weight,
        width=width,
        padding=padding,
        text_position=text_position,
        class_name=class_name,
    )
    return rx.el.span(
        *children,
        rx.el.span(
            text,
            rx.el.span(class_name="block absolute size-[8px] bg-inherit rotate-45 tooltip-arrow"),
            class_name=style.classes(),
            **element_props(id=id, rest=rest, role="tooltip"),
        ),
        class_name="relative w-fit group",
    )
