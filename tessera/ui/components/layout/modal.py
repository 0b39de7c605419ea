from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props, icon
from tessera.ui.i18n import gettext
from tessera.ui.js import JS, SETTLE_HIDDEN, Document, Element, fade_in, fade_out, pop_in, pop_out
from tessera.ui.styling import PairResolver, Resolver, by_size, class_names
from tessera.ui.theme import color_variants
from tessera.ui.tokens import EXTENDED_SIZES

ROOT_CLASSES = "relative z-50 hidden"
BACKDROP_CLASSES = "bg-zinc-50/90 fixed inset-0 transition-opacity hidden"
CONTAINER_CLASSES = "relative hidden transition"
CANCEL_ATTR = "data-cancel"

color_variant = PairResolver(color_variants("modal"), color_variants("modal")[("default", "white")], name="modal.color")

rounded_size = Resolver(
    by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"),
    "rounded",
    name="modal.rounded",
)

padding_size = Resolver(
    {**by_size("p-2", "p-3", "p-4", "p-5", "p-6"), "none": "p-0"},
    "p-4",
    name="modal.padding",
)

size_class = Resolver(
    {
        **by_size(
            *(f"mx-auto max-w-{w}" for w in ("xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl")),
            sizes=EXTENDED_SIZES,
        ),
        "screen": "w-full h-screen overflow-y-scroll",
    },
    "mx-auto max-w-xl",
    name="modal.size",
)


@dataclass(frozen=True)
class ModalStyle:
    variant: Any = "default"
    color: Any = "white"
    rounded: Any = "small"
    padding: Any = "medium"
    size: Any = "extra_large"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            CONTAINER_CLASSES,
            color_variant(self.variant, self.color),
            rounded_size(self.rounded),
            padding_size(self.padding),
            size_class(self.size),
            self.class_name,
        )


# ---- JS commands ----


def show_modal(id: str, js: Optional[JS] = None) -> JS:
    """
    Reveal modal `id`.

    Displays the root, fades the backdrop in, pops the dialog in, locks page scroll (``overflow-hidden`` on
    ``body``) and moves focus into the content. Escape and clicks outside the dialog container run the modal's cancel
    chain.
    """
    return (
        (js or JS())
        .exec_on_key("Escape", CANCEL_ATTR, f"#{id}")
        .exec_on_click_away(CANCEL_ATTR, to=f"#{id}", within=f"#{id}-container")
        .show(f"#{id}")
        .show(f"#{id}-bg", transition=fade_in())
        .show(f"#{id}-container", transition=pop_in())
        .add_class("overflow-hidden", to="body")
        .focus_first(to=f"#{id}-content")
    )


def hide_modal(id: str, js: Optional[JS] = None) -> JS:
    """Conceal modal `id`, undoing `show_modal` step by step and restoring the previous focus."""
    return (
        (js or JS())
        .hide(f"#{id}-bg", transition=fade_out())
        .hide(f"#{id}-container", transition=pop_out())
        .hide(f"#{id}", transition=SETTLE_HIDDEN)
        .remove_class("overflow-hidden", to="body")
        .pop_focus()
    )


def cancel_chain(id: str, on_cancel: Optional[JS] = None) -> JS:
    """The chain stored on the root's ``data-cancel``: the caller's `on_cancel`, then `hide_modal`."""
    return hide_modal(id, on_cancel)


def modal_document(id: str, style: Optional[ModalStyle] = None, on_cancel: Optional[JS] = None) -> Document:
    """Model of a rendered, hidden modal: root, backdrop, dialog container and content."""
    style = style or ModalStyle()
    return Document(
        Element.parse(f"#{id}", ROOT_CLASSES, attrs={CANCEL_ATTR: cancel_chain(id, on_cancel).to_attr()}),
        Element.parse(f"#{id}-bg", BACKDROP_CLASSES),
        Element.parse(
            f"#{id}-container",
            style.classes(),
            focusables=[f"#{id}-close"],
            descendants=[f"#{id}-close", f"#{id}-content"],
        ),
        Element.parse(f"#{id}-content", "", visible=True),
    )


# ---- Components ----


def modal(
    *children: rx.Component,
    id: str,
    title: Optional[str] = None,
    variant: Any = "default",
    color: Any = "white",
    rounded: Any = "small",
    padding: Any = "medium",
    size: Any = "extra_large",
    class_name: Optional[str] = None,
    show: bool = False,
    on_cancel: Optional[JS] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render a modal dialog, hidden until `show_modal` runs.

    Args:
        *children: Dialog content.
        id (str): Element id. Backdrop, container and content use ``{id}-bg``, ``{id}-container`` and
            ``{id}-content``.
        title (str | None, optional): Dialog title. Defaults to None.
        variant (str, optional): default, outline, transparent, shadow or unbordered. Defaults to "default".
        color (str, optional): Color theme. Defaults to "white".
        rounded (str, optional): Corner radius. Defaults to "small".
        padding (str, optional): Inner padding. Defaults to "medium".
        size (str, optional): Maximum width, "extra_small" to "quadruple_large", or "screen". Defaults to
            "extra_large".
        class_name (str | None, optional): Extra container classes. Defaults to None.
        show (bool, optional): Reveal the modal as soon as it mounts. Defaults to False.
        on_cancel (JS | None, optional): Chain run before the modal hides on close, Escape or a
            click outside the dialog. Defaults to None.

    Returns:
        rx.Component: The modal.
    """
    style = ModalStyle(variant=variant, color=color, rounded=rounded, padding=padding, size=size, class_name=class_name)
    cancel = JS().exec(CANCEL_ATTR, to=f"#{id}")

    header = rx.el.div(
        (
            rx.el.div(title, id=f"{id}-title", class_name="font-semibold text-base md:text-lg xl:text-2xl")
            if title
            else rx.fragment()
        ),
        rx.el.button(
            icon("hero-x-mark-solid", class_name="size-5"),
            id=f"{id}-close",
            type="button",
            class_name="p-2 hover:opacity-60",
            custom_attrs={"aria-label": gettext("close")},
            on_click=cancel.to_event(),
        ),
        class_name="flex items-center justify-between mb-4",
    )

    dialog = rx.el.div(
        rx.el.div(
            rx.el.div(
                rx.el.div(
                    header,
                    rx.el.div(*children, id=f"{id}-content"),
                    id=f"{id}-container",
                    class_name=style.classes(),
                ),
                class_name="w-full",
            ),
            class_name="flex min-h-full items-center justify-center",
        ),
        class_name="fixed inset-0 overflow-y-auto",
        custom_attrs={
            "role": "dialog",
            "tabindex": "0",
            "aria-labelledby": f"{id}-title",
            "aria-describedby": f"{id}-description",
            "aria-modal": "true",
        },
    )

    mount = {"on_mount": show_modal(id).to_event()} if show else {}
    return rx.el.div(
        rx.el.div(id=f"{id}-bg", class_name=BACKDROP_CLASSES, custom_attrs={"aria-hidden": "true"}),
        dialog,
        class_name=ROOT_CLASSES,
        **element_props(id=id, rest=rest, **{CANCEL_ATTR: cancel_chain(id, on_cancel).to_attr()}),
        **mount,
    )
