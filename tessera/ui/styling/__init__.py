from tessera.ui.styling.resolve import (
    SIZE_STEPS,
    Enumerated,
    PairResolver,
    Raw,
    Resolver,
    StyleToken,
    by_size,
    class_names,
    classify,
    on,
)

__all__ = [
    "Enumerated",
    "PairResolver",
    "Raw",
    "Resolver",
    "SIZE_STEPS",
    "StyleToken",
    "by_size",
    "class_names",
    "classify",
    "on",
]
