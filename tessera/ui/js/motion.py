"""Standard reveal/conceal transitions built from the motion tokens."""

from tessera.ui.js.commands import Transition
from tessera.ui.tokens import M


def pop_in() -> Transition:
    return Transition(M.ease_out, M.pop_hidden, M.pop_visible, M.reveal_ms)


def pop_out() -> Transition:
    return Transition(M.ease_in, M.pop_visible, M.pop_hidden, M.conceal_ms)


def fade_in() -> Transition:
    return Transition(M.ease_out, M.fade_hidden, M.fade_visible, M.reveal_ms)


def fade_out() -> Transition:
    return Transition(M.ease_in, M.fade_visible, M.fade_hidden, M.conceal_ms)


# Keeps the element displayed until the end of the chain, then settles on `hidden`.
SETTLE_HIDDEN = Transition("block", "block", "hidden")
