from tessera.ui.js.commands import JS, RUNTIME, Transition, split_classes
from tessera.ui.js.dom import Document, Element, TraceEntry
from tessera.ui.js.motion import SETTLE_HIDDEN, fade_in, fade_out, pop_in, pop_out
from tessera.ui.js.visibility import Visibility, VisibilityMachine, VisibilityState

__all__ = [
    "Document",
    "Element",
    "JS",
    "RUNTIME",
    "SETTLE_HIDDEN",
    "TraceEntry",
    "Transition",
    "Visibility",
    "VisibilityMachine",
    "VisibilityState",
    "fade_in",
    "fade_out",
    "pop_in",
    "pop_out",
    "split_classes",
]
