import logging
from types import SimpleNamespace

from reflex.event import EventHandler, EventSpec

from tessera.ui.components.layout.modal import hide_modal, modal_document, show_modal
from tessera.ui.js import JS, Visibility, VisibilityMachine, VisibilityState


def _machine(**kwargs):
    return VisibilityMachine("confirm", reveal=show_modal, conceal=hide_modal, **kwargs)


class TestVisibilityMachine:
    def test_starts_hidden(self):
        machine = _machine()
        assert machine.state is Visibility.HIDDEN
        assert machine.history == [Visibility.HIDDEN]
        assert not machine.visible

    def test_reveal_then_conceal_records_transient_phases(self):
        machine = _machine()
        assert isinstance(machine.reveal(), JS)
        assert machine.visible
        assert isinstance(machine.conceal(), JS)
        assert machine.history == [
            Visibility.HIDDEN,
            Visibility.REVEALING,
            Visibility.VISIBLE,
            Visibility.CONCEALING,
            Visibility.HIDDEN,
        ]

    def test_repeated_target_state_is_a_no_op(self, caplog):
        machine = _machine()
        assert machine.conceal() is None
        machine.reveal()
        with caplog.at_level(logging.DEBUG):
            assert machine.reveal() is None
        assert "already visible" in caplog.text
        assert machine.history.count(Visibility.VISIBLE) == 1

    def test_initially_visible(self):
        machine = _machine(visible=True)
        assert machine.reveal() is None
        assert machine.conceal() == hide_modal("confirm")

    def test_toggle(self):
        machine = _machine()
        assert machine.toggle() == show_modal("confirm")
        assert machine.toggle() == hide_modal("confirm")
        assert machine.state is Visibility.HIDDEN

    def test_applies_chain_to_document(self):
        machine = _machine()
        doc = modal_document("confirm")
        machine.reveal(doc)
        assert doc["#confirm"].visible
        assert "overflow-hidden" in doc["body"].classes

    def test_logger_name(self):
        assert _machine().logger.name == "tessera.ui.js.visibility.VisibilityMachine"


class TestVisibilityState:
    def test_handlers_are_event_handlers(self):
        for name in ("reveal", "conceal", "toggle", "dismiss"):
            assert isinstance(getattr(VisibilityState, name), EventHandler)

    def test_handler_call_builds_event(self):
        assert isinstance(VisibilityState.dismiss("banner-1"), EventSpec)

    def test_reveal_clears_dismissal(self):
        state = SimpleNamespace(visible={}, dismissed={})
        VisibilityState.dismiss.fn(state, "banner-1")
        assert state.dismissed == {"banner-1": True}
        assert state.visible == {"banner-1": False}

        VisibilityState.reveal.fn(state, "banner-1")
        assert state.dismissed == {}
        assert state.visible == {"banner-1": True}

    def test_toggle_and_conceal_keep_dismissal(self):
        state = SimpleNamespace(visible={}, dismissed={"banner-1": True})
        VisibilityState.toggle.fn(state, "banner-1")
        VisibilityState.conceal.fn(state, "banner-1")
        assert state.dismissed == {"banner-1": True}
        assert state.visible == {"banner-1": False}
