"""In-memory model of the DOM nodes a `JS` chain touches.

The model follows the same rules as the browser runtime: ``show`` / ``hide`` are skipped when the element is already
in the target state, a transition only removes the classes it added itself, and ``focus_first`` / ``pop_focus`` share
one focus stack. Each transition phase is recorded in ``Document.trace``.

Elements do not nest; an element lists the selectors it encloses in ``descendants`` so that ``Document.click`` can
tell a click inside it from a click away.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tessera.core.logging.logger import get_logger
from tessera.ui.js.commands import JS

logger = get_logger("ui.js")


@dataclass
class Element:
    selector: str
    classes: set[str] = field(default_factory=set)
    visible: bool = False
    attrs: dict[str, str] = field(default_factory=dict)
    focusables: list[str] = field(default_factory=list)
    descendants: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, selector: str, class_name: str = "", **kwargs: Any) -> "Element":
        """Build an element from a space-separated class string, e.g. ``Element.parse("#m", "relative hidden")``."""
        return cls(selector, set(class_name.split()), **kwargs)

    @property
    def class_name(self) -> str:
        return " ".join(sorted(self.classes))

    def encloses(self, selector: str) -> bool:
        return selector == self.selector or selector in self.descendants


@dataclass(frozen=True)
class TraceEntry:
    selector: str
    phase: str
    classes: frozenset[str]


class Document:
    """A set of elements addressed by selector, plus focus, key and click-away binding and event bookkeeping.

    A ``body`` element is always present and visible.
    """

    def __init__(self, *elements: Element):
        self.elements: dict[str, Element] = {}
        self.add(Element("body", visible=True))
        for element in elements:
            self.add(element)
        self.active: Optional[str] = None
        self.focus_stack: list[Optional[str]] = []
        self.trace: list[TraceEntry] = []
        self.key_bindings: list[tuple[str, str, str]] = []
        self.click_away_bindings: list[tuple[str, str, str]] = []
        self.events: list[tuple[str, Optional[str], dict[str, Any]]] = []

    def add(self, element: Element) -> Element:
        self.elements[element.selector] = element
        return element

    def __getitem__(self, selector: str) -> Element:
        return self.elements[selector]

    def __contains__(self, selector: str) -> bool:
        return selector in self.elements

    def query(self, to: Optional[str]) -> list[Element]:
        if to in self.elements:
            return [self.elements[to]]
        logger.debug("No element matches %r", to)
        return []

    def snapshot(self) -> dict[str, tuple[frozenset[str], bool]]:
        """Return ``{selector: (classes, visible)}`` for comparing document states."""
        return {sel: (frozenset(el.classes), el.visible) for sel, el in self.elements.items()}

    def run(self, js: JS) -> None:
        for op, args in js.ops:
            handler = getattr(self, f"_op_{op}", None)
            if handler is None:
                raise ValueError(f"Unknown command: {op}")
            handler(**args)

    def press(self, key: str) -> None:
        """Simulate a keydown on the window."""
        for bound_key, attr, to in list(self.key_bindings):
            if bound_key.lower() != key.lower():
                continue
            if any(el.visible for el in self.query(to)):
                self._op_exec(attr=attr, to=to)

    def click(self, selector: str) -> None:
        """Simulate a click on `selector`; click-away bindings see it before the element does."""
        for attr, to, within in list(self.click_away_bindings):
            if any(el.visible and not el.encloses(selector) for el in self.query(within)):
                self._op_exec(attr=attr, to=to)

    # ---- transitions ----

    def _transition(self, el: Element, transition: Optional[list[list[str]]], on_start, on_end) -> None:
        if not transition:
            on_start()
            on_end()
            return

        base, start, end = transition
        added: list[str] = []

        def add(names: list[str]) -> None:
            for name in names:
                if name not in el.classes:
                    el.classes.add(name)
                    added.append(name)

        add(base + start)
        on_start()
        self.trace.append(TraceEntry(el.selector, "start", frozenset(el.classes)))

        for name in list(added):
            if name in start and name not in base and name not in end:
                el.classes.discard(name)
                added.remove(name)
        add(end)
        self.trace.append(TraceEntry(el.selector, "swap", frozenset(el.classes)))

        for name in added:
            el.classes.discard(name)
        on_end()
        self.trace.append(TraceEntry(el.selector, "end", frozenset(el.classes)))

    # ---- commands ----

    def _op_show(self, to: str, display: str = "block", transition=None, time=None) -> None:
        for el in self.query(to):
            if el.visible:
                continue

            def reveal(el=el):
                el.visible = True

            self._transition(el, transition, reveal, lambda: None)

    def _op_hide(self, to: str, transition=None, time=None) -> None:
        for el in self.query(to):
            if not el.visible:
                continue

            def conceal(el=el):
                el.visible = False

            self._transition(el, transition, lambda: None, conceal)

    def _op_add_class(self, names: list[str], to: str) -> None:
        for el in self.query(to):
            el.classes.update(names)

    def _op_remove_class(self, names: list[str], to: str) -> None:
        for el in self.query(to):
            el.classes.difference_update(names)

    def _op_focus_first(self, to: str) -> None:
        self.focus_stack.append(self.active)
        for el in self.query(to):
            self.active = el.focusables[0] if el.focusables else el.selector
            break

    def _op_pop_focus(self) -> None:
        if self.focus_stack:
            self.active = self.focus_stack.pop()

    def _op_dispatch(self, event: str, to: Optional[str] = None, detail: Optional[dict[str, Any]] = None) -> None:
        self.events.append((event, to, dict(detail or {})))

    def _op_exec(self, attr: str, to: str) -> None:
        for el in self.query(to):
            raw = el.attrs.get(attr)
            if raw:
                self.run(JS.from_json(raw))

    def _op_exec_on_key(self, key: str, attr: str, to: str) -> None:
        binding = (key, attr, to)
        if binding not in self.key_bindings:
            self.key_bindings.append(binding)

    def _op_exec_on_click_away(self, attr: str, to: str, within: str) -> None:
        binding = (attr, to, within)
        if binding not in self.click_away_bindings:
            self.click_away_bindings.append(binding)


__all__ = ["Document", "Element", "TraceEntry"]
