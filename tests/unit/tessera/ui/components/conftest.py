import pytest


def _walk(component):
    yield component
    for child in getattr(component, "children", None) or []:
        yield from _walk(child)


class Tree:
    """Helpers for asserting on rendered Reflex component trees."""

    walk = staticmethod(_walk)

    @staticmethod
    def tags(component, tag):
        return [node for node in _walk(component) if getattr(node, "tag", None) == tag]

    @staticmethod
    def classes(node) -> str:
        return str(getattr(node, "class_name", None) or "")

    @classmethod
    def with_class(cls, component, name):
        return [node for node in _walk(component) if name in cls.classes(node).replace('"', " ").split()]

    @staticmethod
    def attr(node, name) -> str:
        return str((getattr(node, "custom_attrs", None) or {}).get(name, ""))


@pytest.fixture
def tree():
    return Tree
