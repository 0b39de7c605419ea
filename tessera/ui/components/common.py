"""Helpers shared by every component: icons and global attribute passthrough."""

from typing import Any, Optional

import reflex as rx

from tessera.ui.styling import class_names


def global_attrs(rest: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Turn keyword attributes into HTML attribute names (``aria_label`` -> ``aria-label``).

    ``None`` values are dropped. Nothing is validated.
    """
    return {key.replace("_", "-"): value for key, value in (rest or {}).items() if value is not None}


def element_props(id: Optional[str] = None, rest: Optional[dict[str, Any]] = None, **attrs: Any) -> dict[str, Any]:
    """Build the keyword arguments for an `rx.el` root: `id` when given, and `custom_attrs` for the rest."""
    props: dict[str, Any] = {}
    if id is not None:
        props["id"] = id
    custom = global_attrs({**attrs, **(rest or {})})
    if custom:
        props["custom_attrs"] = custom
    return props


def icon(name: str, class_name: Optional[str] = None, **rest: Any) -> rx.Component:
    """
    Render an icon by name.

    Heroicons (names starting with ``hero-``) are rendered as a ``<span>`` carrying the name as a class, which the
    heroicons stylesheet turns into a mask image. Any other name is looked up in Reflex's Lucide set.

    Args:
        name (str): Icon name, e.g. "hero-x-mark-solid" or "chevron-right".
        class_name (str | None, optional): Extra classes for sizing and color. Defaults to None.

    Returns:
        rx.Component: The icon element.
    """
    if name.startswith("hero-"):
        return rx.el.span(class_name=class_names(name, class_name), **element_props(rest=rest))
    return rx.icon(tag=name, class_name=class_names(class_name), **element_props(rest=rest))
