from tessera.ui.tokens.tokens import (
    CHAT_VARIANTS,
    COLORS,
    COLUMNS,
    EXTENDED_SIZES,
    MOTION,
    SIZES,
    TOOLTIP_VARIANTS,
    VARIANTS,
    M,
    MotionTokens,
)

__all__ = [
    "CHAT_VARIANTS",
    "COLORS",
    "COLUMNS",
    "EXTENDED_SIZES",
    "M",
    "MOTION",
    "MotionTokens",
    "SIZES",
    "TOOLTIP_VARIANTS",
    "VARIANTS",
]
