"""
Tessera UI: Tokens

Owns:
- Enumerated value sets shared by the components (colors, variants, sizes)
- Motion token dataclass and the MOTION instance (reveal/conceal transitions)
- Shorthands (M)

No component variants here.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------- Value sets ----------

COLORS: tuple[str, ...] = (
    "white",
    "primary",
    "secondary",
    "dark",
    "success",
    "warning",
    "danger",
    "info",
    "light",
    "misc",
    "dawn",
)

VARIANTS: tuple[str, ...] = ("default", "outline", "transparent", "shadow", "unbordered")
CHAT_VARIANTS: tuple[str, ...] = ("default", "outline", "transparent", "shadow", "gradient", "unbordered")
TOOLTIP_VARIANTS: tuple[str, ...] = ("default", "shadow")

SIZES: tuple[str, ...] = ("extra_small", "small", "medium", "large", "extra_large")
EXTENDED_SIZES: tuple[str, ...] = SIZES + ("double_large", "triple_large", "quadruple_large")

COLUMNS: tuple[str, ...] = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
)


# ---------- Motion ----------


@dataclass(frozen=True)
class MotionTokens:
    reveal_ms: int
    conceal_ms: int
    ease_out: str
    ease_in: str
    fade_hidden: str
    fade_visible: str
    pop_hidden: str
    pop_visible: str


MOTION = MotionTokens(
    reveal_ms=300,
    conceal_ms=200,
    ease_out="transition-all transform ease-out duration-300",
    ease_in="transition-all transform ease-in duration-200",
    fade_hidden="opacity-0",
    fade_visible="opacity-100",
    pop_hidden="opacity-0 translate-y-4 sm:translate-y-0 sm:scale-95",
    pop_visible="opacity-100 translate-y-0 sm:scale-100",
)

# ---------- Shorthands ----------
M = MOTION
