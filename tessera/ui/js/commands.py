"""
Tessera UI: Client-side commands

Owns:
- `Transition`, the (transition, start, end, time) value object
- `JS`, an immutable chain of DOM commands (show, hide, add/remove class, focus, dispatch, exec) and of key and
  click-away bindings
- `RUNTIME`, the small browser-side interpreter the chain serializes for

A chain is declared on the server and shipped to the browser through `rx.call_script`. The same chain can be
applied to an in-memory `Document` (see `tessera.ui.js.dom`) to inspect what it does without a browser.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

import reflex as rx
from reflex.event import EventSpec

if TYPE_CHECKING:
    from tessera.ui.js.dom import Document

DEFAULT_TRANSITION_MS = 200

ClassNames = Union[str, Iterable[str]]


def split_classes(names: Optional[ClassNames]) -> list[str]:
    """Normalize ``"a b"`` or ``["a", "b c"]`` into ``["a", "b", "c"]``."""
    if not names:
        return []
    if isinstance(names, str):
        return names.split()
    out: list[str] = []
    for name in names:
        out.extend(split_classes(name))
    return out


@dataclass(frozen=True)
class Transition:
    """A three-phase class transition.

    Args:
        transition: Classes present for the whole transition (easing, duration).
        start: Classes applied on the first frame.
        end: Classes swapped in on the next frame.
        time: Milliseconds before the transition classes are cleaned up.
    """

    transition: str
    start: str
    end: str
    time: int = DEFAULT_TRANSITION_MS

    def to_json(self) -> list[list[str]]:
        return [split_classes(self.transition), split_classes(self.start), split_classes(self.end)]

    @classmethod
    def from_json(cls, data: list[list[str]], time: int = DEFAULT_TRANSITION_MS) -> "Transition":
        transition, start, end = data
        return cls(" ".join(transition), " ".join(start), " ".join(end), time)

    def reverse(self, time: Optional[int] = None) -> "Transition":
        return Transition(self.transition, self.end, self.start, self.time if time is None else time)


class JS:
    """Immutable, composable chain of client-side DOM commands.

    Every method returns a new chain, so chains can be shared and extended freely::

        js = JS().show("#notice", transition=Transition("ease-out duration-300", "opacity-0", "opacity-100", 300))
        js = js.add_class("overflow-hidden", to="body")
        rx.el.button("Open", on_click=js.to_event())
    """

    __slots__ = ("_ops",)

    def __init__(self, ops: Iterable[tuple[str, dict[str, Any]]] = ()):
        self._ops: tuple[tuple[str, dict[str, Any]], ...] = tuple((op, dict(args)) for op, args in ops)

    def _push(self, op: str, **args: Any) -> "JS":
        clean = {k: v for k, v in args.items() if v is not None}
        return JS(self._ops + ((op, clean),))

    @property
    def ops(self) -> tuple[tuple[str, dict[str, Any]], ...]:
        return tuple((op, dict(args)) for op, args in self._ops)

    # ---- commands ----

    def show(self, to: str, transition: Optional[Transition] = None, time: Optional[int] = None, display: str = "block") -> "JS":
        return self._push("show", to=to, display=display, **_transition_args(transition, time))

    def hide(self, to: str, transition: Optional[Transition] = None, time: Optional[int] = None) -> "JS":
        return self._push("hide", to=to, **_transition_args(transition, time))

    def add_class(self, names: ClassNames, to: str) -> "JS":
        return self._push("add_class", names=split_classes(names), to=to)

    def remove_class(self, names: ClassNames, to: str) -> "JS":
        return self._push("remove_class", names=split_classes(names), to=to)

    def focus_first(self, to: str) -> "JS":
        """Remember the focused element, then focus the first focusable element inside `to`."""
        return self._push("focus_first", to=to)

    def pop_focus(self) -> "JS":
        """Restore the element remembered by the most recent `focus_first`."""
        return self._push("pop_focus")

    def dispatch(self, event: str, to: Optional[str] = None, detail: Optional[dict[str, Any]] = None) -> "JS":
        return self._push("dispatch", event=event, to=to, detail=detail)

    def exec(self, attr: str, to: str) -> "JS":
        """Run the chain stored (as JSON) in attribute `attr` of the element `to`."""
        return self._push("exec", attr=attr, to=to)

    def exec_on_key(self, key: str, attr: str, to: str) -> "JS":
        """Bind `key` so that, while `to` is visible, pressing it runs the chain stored in `attr`."""
        return self._push("exec_on_key", key=key, attr=attr, to=to)

    def exec_on_click_away(self, attr: str, to: str, within: Optional[str] = None) -> "JS":
        """While `within` (default `to`) is visible, a click outside it runs the chain stored in `attr` of `to`."""
        return self._push("exec_on_click_away", attr=attr, to=to, within=within or to)

    def concat(self, other: Optional["JS"]) -> "JS":
        if other is None:
            return self
        return JS(self._ops + other._ops)

    __add__ = concat

    # ---- serialization ----

    def to_json(self) -> list[list[Any]]:
        return [[op, dict(args)] for op, args in self._ops]

    def to_attr(self) -> str:
        """Encode the chain for storage in a ``data-*`` attribute."""
        return json.dumps(self.to_json(), separators=(",", ":"))

    @classmethod
    def from_json(cls, data: Union[str, list[list[Any]]]) -> "JS":
        if isinstance(data, str):
            data = json.loads(data)
        return cls((op, args) for op, args in data)

    def to_script(self) -> str:
        """Render a self-contained script: the runtime (installed once per page) and a call running this chain."""
        return f"{RUNTIME}\nwindow.__tessera.run({self.to_attr()});"

    def to_event(self) -> EventSpec:
        return rx.call_script(self.to_script())

    def apply(self, document: "Document") -> "Document":
        """Run the chain against an in-memory document and return it."""
        document.run(self)
        return document

    # ---- dunder ----

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self):
        return iter(self.ops)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JS) and self.to_json() == other.to_json()

    def __hash__(self) -> int:
        return hash(self.to_attr())

    def __repr__(self) -> str:
        return f"JS({[op for op, _ in self._ops]!r})"


def _transition_args(transition: Optional[Transition], time: Optional[int]) -> dict[str, Any]:
    if transition is None:
        return {}
    return {"transition": transition.to_json(), "time": time if time is not None else transition.time}


RUNTIME = r"""
(function () {
  if (window.__tessera) { return; }
  var FOCUSABLE = 'a[href], area[href], button:not([disabled]), input:not([disabled]):not([type="hidden"]), ' +
    'select:not([disabled]), textarea:not([disabled]), iframe, [contenteditable], [tabindex]:not([tabindex="-1"])';
  var focusStack = [];
  var bindings = {};

  function nodes(to) {
    return to ? Array.prototype.slice.call(document.querySelectorAll(to)) : [];
  }

  function isVisible(el) {
    return !!(el.offsetWidth || el.offsetHeight || el.getClientRects().length > 0);
  }

  function contains(list, name) { return list.indexOf(name) >= 0; }

  function transition(el, t, time, onStart, onEnd) {
    if (!t) { onStart(); onEnd(); return; }
    var added = [];
    function add(names) {
      names.forEach(function (n) {
        if (!el.classList.contains(n)) { el.classList.add(n); added.push(n); }
      });
    }
    add(t[0].concat(t[1]));
    onStart();
    window.requestAnimationFrame(function () {
      added = added.filter(function (n) {
        if (contains(t[1], n) && !contains(t[0], n) && !contains(t[2], n)) {
          el.classList.remove(n);
          return false;
        }
        return true;
      });
      add(t[2]);
      window.setTimeout(function () {
        added.forEach(function (n) { el.classList.remove(n); });
        onEnd();
      }, time || 0);
    });
  }

  var commands = {
    show: function (a) {
      nodes(a.to).forEach(function (el) {
        if (isVisible(el)) { return; }
        transition(el, a.transition, a.time,
          function () { el.style.display = a.display || "block"; },
          function () {});
      });
    },
    hide: function (a) {
      nodes(a.to).forEach(function (el) {
        if (!isVisible(el)) { return; }
        transition(el, a.transition, a.time,
          function () {},
          function () { el.style.display = "none"; });
      });
    },
    add_class: function (a) {
      nodes(a.to).forEach(function (el) { a.names.forEach(function (n) { el.classList.add(n); }); });
    },
    remove_class: function (a) {
      nodes(a.to).forEach(function (el) { a.names.forEach(function (n) { el.classList.remove(n); }); });
    },
    focus_first: function (a) {
      focusStack.push(document.activeElement);
      var el = nodes(a.to)[0];
      if (!el) { return; }
      var target = el.querySelector(FOCUSABLE) || el;
      window.requestAnimationFrame(function () { target.focus && target.focus(); });
    },
    pop_focus: function () {
      var prev = focusStack.pop();
      if (prev && prev.focus) { prev.focus(); }
    },
    dispatch: function (a) {
      var targets = a.to ? nodes(a.to) : [window];
      targets.forEach(function (el) {
        el.dispatchEvent(new CustomEvent(a.event, { bubbles: true, detail: a.detail || {} }));
      });
    },
    exec: function (a) {
      nodes(a.to).forEach(function (el) {
        var raw = el.getAttribute(a.attr);
        if (raw) { run(JSON.parse(raw)); }
      });
    },
    exec_on_key: function (a) {
      var id = [a.key, a.attr, a.to].join("|");
      if (bindings[id]) { return; }
      bindings[id] = true;
      window.addEventListener("keydown", function (e) {
        if (!e.key || e.key.toLowerCase() !== a.key.toLowerCase()) { return; }
        nodes(a.to).forEach(function (el) {
          if (isVisible(el)) { commands.exec({ attr: a.attr, to: a.to }); }
        });
      });
    },
    exec_on_click_away: function (a) {
      var id = ["click", a.attr, a.to, a.within].join("|");
      if (bindings[id]) { return; }
      bindings[id] = true;
      // capture phase, so the click that reveals `within` is not seen as a click away from it
      window.addEventListener("click", function (e) {
        nodes(a.within).forEach(function (el) {
          if (isVisible(el) && !el.contains(e.target)) { commands.exec({ attr: a.attr, to: a.to }); }
        });
      }, true);
    }
  };

  function run(ops) {
    ops.forEach(function (op) {
      var fn = commands[op[0]];
      if (fn) { fn(op[1] || {}); }
    });
  }

  window.__tessera = { run: run, isVisible: isVisible };
})();
""".strip()
