"""
Tessera UI: Style resolution

Owns:
- The `Enumerated | Raw` token union used for stringly typed style attributes
- `Resolver` (single-key) and `PairResolver` (two-key) lookup tables
- `class_names`, the fragment joiner every component uses for its root class

Resolution is total: a recognized value maps to its table entry, any other
string passes through verbatim as a raw class override, and everything else
(``None``, booleans, numbers) falls back to the documented default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from tessera.core.logging.logger import get_logger

logger = get_logger("ui.styling")


@dataclass(frozen=True)
class Enumerated:
    """A style value naming an entry of a resolver table (e.g. ``"small"``)."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Raw:
    """A free-form class string passed through untouched (e.g. ``"p-[7px]"``)."""

    value: str

    def __str__(self) -> str:
        return self.value


StyleToken = Union[Enumerated, Raw]


def classify(value: Any, known: Iterable[str]) -> Optional[StyleToken]:
    """Classify a boundary value against the names a table knows.

    Args:
        value: A bare string, an explicit `Enumerated` / `Raw` token, or anything else.
        known: The names the table recognizes.

    Returns:
        `Enumerated` when the string is a known name, `Raw` for any other string, the token itself when one is
        given, and None for non-string values.
    """
    if isinstance(value, (Enumerated, Raw)):
        return value
    if isinstance(value, str):
        return Enumerated(value) if value in known else Raw(value)
    return None


class Resolver:
    """Single-key lookup from an enumerated style value to a class string.

    Example::

        padding = Resolver({"small": "p-3", "medium": "p-4"}, default="p-3", name="banner.padding")
        padding("medium")   # "p-4"
        padding("p-[7px]")  # "p-[7px]"
        padding(None)       # "p-3"
    """

    def __init__(
        self,
        table: Mapping[str, Optional[str]],
        default: Optional[str] = None,
        *,
        name: str = "style",
        pass_through: bool = True,
    ):
        self.table = dict(table)
        self.default = default
        self.name = name
        self.pass_through = pass_through

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(self.table)

    def __call__(self, value: Any) -> Optional[str]:
        token = classify(value, self.table)
        if isinstance(token, Raw) and self.pass_through:
            logger.debug("%s: pass-through %r", self.name, token.value)
            return token.value
        if isinstance(token, Enumerated) and token.value in self.table:
            return self.table[token.value]
        logger.debug("%s: default for %r", self.name, value)
        return self.default

    def __repr__(self) -> str:
        return f"Resolver(name={self.name!r}, values={len(self.table)}, default={self.default!r})"


class PairResolver:
    """Two-key lookup keyed by ``(first, second)`` tuples, e.g. ``(variant, color)`` or ``(size, position)``.

    Lookup order:
        1. the exact ``(first, second)`` entry;
        2. a wildcard row for ``second`` (any first value, e.g. "any size, position center");
        3. a wildcard row for ``first`` (any second value, e.g. "rounded none, any position");
        4. an unrecognized first string is passed through verbatim;
        5. with `keep_first`, a recognized first value is returned verbatim as well;
        6. the default entry.

    Without `keep_first`, a recognized first value paired with an unrecognized second value resolves to the default
    entry. Tables that mirror a "use the first value as is" rule (offsets, borders) set `keep_first`, so
    ``border_class("extra_small", "none")`` gives ``"extra_small"`` rather than the default border.
    """

    def __init__(
        self,
        table: Mapping[tuple[str, str], Optional[str]],
        default: Optional[str] = None,
        *,
        name: str = "style",
        first_wildcards: Optional[Mapping[str, str]] = None,
        second_wildcards: Optional[Mapping[str, str]] = None,
        keep_first: bool = False,
    ):
        self.table = dict(table)
        self.default = default
        self.name = name
        self.keep_first = keep_first
        self.first_wildcards = dict(first_wildcards or {})
        self.second_wildcards = dict(second_wildcards or {})
        self._firsts = {first for first, _ in self.table} | set(self.first_wildcards)
        self._seconds = {second for _, second in self.table} | set(self.second_wildcards)

    @property
    def first_values(self) -> tuple[str, ...]:
        return tuple(sorted(self._firsts))

    @property
    def second_values(self) -> tuple[str, ...]:
        return tuple(sorted(self._seconds))

    def __call__(self, first: Any, second: Any) -> Optional[str]:
        f = classify(first, self._firsts)
        s = classify(second, self._seconds)

        if isinstance(f, Enumerated) and isinstance(s, Enumerated) and (f.value, s.value) in self.table:
            return self.table[(f.value, s.value)]
        if isinstance(s, Enumerated) and s.value in self.second_wildcards:
            return self.second_wildcards[s.value]
        if isinstance(f, Enumerated) and f.value in self.first_wildcards:
            return self.first_wildcards[f.value]
        if isinstance(f, Raw) or (self.keep_first and isinstance(f, Enumerated)):
            logger.debug("%s: pass-through %r", self.name, f.value)
            return f.value

        logger.debug("%s: default for (%r, %r)", self.name, first, second)
        return self.default

    def __repr__(self) -> str:
        return f"PairResolver(name={self.name!r}, entries={len(self.table)}, default={self.default!r})"


def class_names(*parts: Any) -> str:
    """Join class fragments into one space-separated string.

    Lists and tuples are flattened, ``None`` / ``False`` / empty fragments are dropped, and runs of whitespace
    inside a fragment collapse to a single space. Order is preserved.
    """
    out: list[str] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            nested = class_names(*part)
            if nested:
                out.append(nested)
        elif part is None or part is False:
            continue
        else:
            text = " ".join(str(part).split())
            if text:
                out.append(text)
    return " ".join(out)


SIZE_STEPS: tuple[str, ...] = ("extra_small", "small", "medium", "large", "extra_large")


def by_size(*classes: str, sizes: tuple[str, ...] = SIZE_STEPS) -> dict[str, str]:
    """Map size names to classes positionally: ``by_size("p-1", "p-2")`` -> ``{"extra_small": "p-1", "small": "p-2"}``."""
    return dict(zip(sizes, classes))


def on(second: str, table: Mapping[str, str]) -> dict[tuple[str, str], str]:
    """Key a single-size table by ``(size, second)`` for use in a `PairResolver`."""
    return {(first, second): cls for first, cls in table.items()}
