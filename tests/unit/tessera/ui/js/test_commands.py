import json

import pytest

from tessera.ui.js import JS, RUNTIME, Transition, pop_in, pop_out, split_classes
from tessera.ui.js.commands import DEFAULT_TRANSITION_MS


def test_split_classes():
    assert split_classes(None) == []
    assert split_classes("") == []
    assert split_classes("a  b") == ["a", "b"]
    assert split_classes(["a", "b c", ""]) == ["a", "b", "c"]


class TestTransition:
    def test_to_json(self):
        t = Transition("ease-out duration-300", "opacity-0", "opacity-100", 300)
        assert t.to_json() == [["ease-out", "duration-300"], ["opacity-0"], ["opacity-100"]]

    def test_from_json(self):
        t = Transition.from_json([["ease-in"], ["a", "b"], ["c"]], time=150)
        assert t == Transition("ease-in", "a b", "c", 150)

    def test_default_time(self):
        assert Transition("a", "b", "c").time == DEFAULT_TRANSITION_MS

    def test_reverse(self):
        assert pop_in().reverse(200) == Transition(pop_in().transition, pop_in().end, pop_in().start, 200)
        assert pop_in().reverse().time == pop_in().time


class TestMotion:
    def test_pop_durations(self):
        assert pop_in().time == 300
        assert pop_out().time == 200
        assert "duration-300" in pop_in().transition
        assert "duration-200" in pop_out().transition

    def test_pop_out_mirrors_pop_in(self):
        assert pop_out().start == pop_in().end
        assert pop_out().end == pop_in().start


class TestJS:
    def test_chain_is_immutable(self):
        base = JS().show("#a")
        extended = base.hide("#b")
        assert len(base) == 1
        assert len(extended) == 2

    def test_none_arguments_are_dropped(self):
        js = JS().dispatch("tessera:dismiss")
        assert js.to_json() == [["dispatch", {"event": "tessera:dismiss"}]]

    def test_show_with_transition(self):
        js = JS().show("#m", transition=Transition("t", "s", "e", 300))
        assert js.to_json() == [
            ["show", {"to": "#m", "display": "block", "transition": [["t"], ["s"], ["e"]], "time": 300}]
        ]

    def test_explicit_time_overrides_transition_time(self):
        js = JS().hide("#m", transition=Transition("t", "s", "e", 300), time=50)
        assert js.to_json()[0][1]["time"] == 50

    def test_class_names_are_split(self):
        js = JS().add_class("a b", to="body").remove_class(["c", "d e"], to="body")
        assert js.to_json() == [
            ["add_class", {"names": ["a", "b"], "to": "body"}],
            ["remove_class", {"names": ["c", "d", "e"], "to": "body"}],
        ]

    def test_concat(self):
        a = JS().show("#a")
        b = JS().hide("#b")
        assert [op for op, _ in (a + b)] == ["show", "hide"]
        assert a.concat(None) is a

    def test_json_round_trip_and_equality(self):
        js = JS().show("#a").focus_first(to="#a-content").pop_focus().exec("data-cancel", to="#a")
        assert JS.from_json(js.to_attr()) == js
        assert JS.from_json(js.to_json()) == js
        assert hash(JS.from_json(js.to_attr())) == hash(js)

    def test_to_attr_is_compact_json(self):
        attr = JS().show("#a").to_attr()
        assert " " not in attr
        assert json.loads(attr) == [["show", {"to": "#a", "display": "block"}]]

    def test_to_script_embeds_runtime(self):
        script = JS().show("#a").to_script()
        assert script.startswith(RUNTIME)
        assert script.endswith('window.__tessera.run([["show",{"to":"#a","display":"block"}]]);')

    def test_click_away_defaults_to_target(self):
        assert JS().exec_on_click_away("data-hide", to="#nav").to_json() == [
            ["exec_on_click_away", {"attr": "data-hide", "to": "#nav", "within": "#nav"}]
        ]
        js = JS().exec_on_click_away("data-cancel", to="#m", within="#m-container")
        assert js.to_json()[0][1]["within"] == "#m-container"

    def test_ops_are_copies(self):
        js = JS().show("#a")
        js.ops[0][1]["to"] = "#b"
        assert js.to_json()[0][1]["to"] == "#a"

    def test_repr(self):
        assert repr(JS().show("#a").pop_focus()) == "JS(['show', 'pop_focus'])"

    def test_to_event(self):
        from reflex.event import EventSpec

        assert isinstance(JS().show("#a").to_event(), EventSpec)


@pytest.mark.parametrize(
    "op",
    [
        "show",
        "hide",
        "add_class",
        "remove_class",
        "focus_first",
        "pop_focus",
        "dispatch",
        "exec",
        "exec_on_key",
        "exec_on_click_away",
    ],
)
def test_runtime_implements_every_command(op):
    assert f"{op}: function" in RUNTIME
