"""Reveal/conceal state shared by banner, modal and sidebar."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import reflex as rx

from tessera.core.base import Tessera
from tessera.ui.js.commands import JS
from tessera.ui.js.dom import Document


class Visibility(str, Enum):
    HIDDEN = "hidden"
    REVEALING = "revealing"
    VISIBLE = "visible"
    CONCEALING = "concealing"


class VisibilityMachine(Tessera):
    """Two-state (hidden / visible) machine driving a component's reveal and conceal command chains.

    The transient `REVEALING` / `CONCEALING` phases are recorded in `history`. Asking for the state the machine is
    already in is a no-op and returns None.

    Example::

        from tessera.ui.components.layout.modal import hide_modal, modal_document, show_modal

        machine = VisibilityMachine("confirm", reveal=show_modal, conceal=hide_modal)
        doc = modal_document("confirm")
        machine.reveal(doc)   # JS chain, applied to doc
        machine.reveal(doc)   # None
        machine.conceal(doc)
    """

    def __init__(
        self,
        cid: str,
        *,
        reveal: Callable[[str], JS],
        conceal: Callable[[str], JS],
        visible: bool = False,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.cid = cid
        self._reveal = reveal
        self._conceal = conceal
        self.state = Visibility.VISIBLE if visible else Visibility.HIDDEN
        self.history: list[Visibility] = [self.state]

    @property
    def visible(self) -> bool:
        return self.state is Visibility.VISIBLE

    def reveal(self, document: Optional[Document] = None) -> Optional[JS]:
        if self.state is Visibility.VISIBLE:
            self.logger.debug(f"{self.cid} already visible; reveal ignored.")
            return None
        return self._move(Visibility.REVEALING, Visibility.VISIBLE, self._reveal(self.cid), document)

    def conceal(self, document: Optional[Document] = None) -> Optional[JS]:
        if self.state is Visibility.HIDDEN:
            self.logger.debug(f"{self.cid} already hidden; conceal ignored.")
            return None
        return self._move(Visibility.CONCEALING, Visibility.HIDDEN, self._conceal(self.cid), document)

    def toggle(self, document: Optional[Document] = None) -> Optional[JS]:
        return self.conceal(document) if self.visible else self.reveal(document)

    def _move(self, phase: Visibility, target: Visibility, js: JS, document: Optional[Document]) -> JS:
        self.state = phase
        self.history.append(phase)
        if document is not None:
            js.apply(document)
        self.state = target
        self.history.append(target)
        self.logger.debug(f"{self.cid}: {phase.value} -> {target.value} ({len(js)} commands)")
        return js


class VisibilityState(rx.State):
    """
    Server-side mirror of component visibility.

    Attributes:
        visible (dict[str, bool]): Mapping of component ids to their visible state.
        dismissed (dict[str, bool]): Ids of components the user dismissed (e.g. banners).
    """

    visible: dict[str, bool] = {}
    dismissed: dict[str, bool] = {}

    def reveal(self, cid: str) -> None:
        self.visible[cid] = True
        self.dismissed.pop(cid, None)

    def conceal(self, cid: str) -> None:
        self.visible[cid] = False

    def toggle(self, cid: str) -> None:
        self.visible[cid] = not self.visible.get(cid, False)

    def dismiss(self, cid: str) -> None:
        """Mark a component as dismissed; it stays hidden until revealed again."""
        self.dismissed[cid] = True
        self.visible[cid] = False
