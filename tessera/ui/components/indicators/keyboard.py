from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props
from tessera.ui.styling import PairResolver, Resolver, by_size, class_names
from tessera.ui.theme import color_variants

color_variant = PairResolver(color_variants("keyboard"), color_variants("keyboard")[("default", "white")], name="keyboard.color")

size_class = Resolver(by_size("text-xs", "text-sm", "text-base", "text-lg", "text-xl"), "text-sm", name="keyboard.size")

rounded_size = Resolver(
    {
        **by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"),
        "full": "rounded-full",
        "none": "rounded-none",
    },
    "rounded",
    name="keyboard.rounded",
)


@dataclass(frozen=True)
class KeyboardStyle:
    variant: Any = "default"
    color: Any = "white"
    size: Any = "small"
    rounded: Any = "small"
    font_weight: Any = "font-semibold"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "px-2 py-1.5",
            color_variant(self.variant, self.color),
            size_class(self.size),
            rounded_size(self.rounded),
            self.font_weight,
            self.class_name,
        )


def keyboard(
    *children: rx.Component,
    id: Optional[str] = None,
    variant: Any = "default",
    color: Any = "white",
    size: Any = "small",
    rounded: Any = "small",
    font_weight: Any = "font-semibold",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """Render a keycap (``<kbd>``), e.g. ``keyboard("Ctrl")``."""
    style = KeyboardStyle(
        variant=variant,
        color=color,
        size=size,
        rounded=rounded,
        font_weight=font_weight,
        class_name=class_name,
    )
    return rx.el.kbd(*children, class_name=style.classes(), **element_props(id=id, rest=rest))
