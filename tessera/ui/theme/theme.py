"""
Tessera UI: Theme

Owns:
- Color palettes per variant family (FILL, OUTLINE, SHADOW, TRANSPARENT_TEXT)
- Component-level (variant, color) maps (COMPONENT_VARIANTS)

Depends on tokens via absolute import: tessera.ui.tokens
"""

from __future__ import annotations

from tessera.ui.tokens import COLORS

# ---- Palettes ----
# Each entry holds the utility fragments for one color: (background, text, border).

FILL: dict[str, tuple[str, str, str]] = {
    "white": ("bg-white", "text-[#3E3E3E]", "border-[#DADADA]"),
    "primary": ("bg-[#4363EC]", "text-white", "border-[#2441de]"),
    "secondary": ("bg-[#6B6E7C]", "text-white", "border-[#877C7C]"),
    "success": ("bg-[#ECFEF3]", "text-[#047857]", "border-[#6EE7B7]"),
    "warning": ("bg-[#FFF8E6]", "text-[#FF8B08]", "border-[#FF8B08]"),
    "danger": ("bg-[#FFE6E6]", "text-[#E73B3B]", "border-[#E73B3B]"),
    "info": ("bg-[#E5F0FF]", "text-[#004FC4]", "border-[#004FC4]"),
    "misc": ("bg-[#FFE6FF]", "text-[#52059C]", "border-[#52059C]"),
    "dawn": ("bg-[#FFECDA]", "text-[#4D4137]", "border-[#4D4137]"),
    "light": ("bg-[#E3E7F1]", "text-[#707483]", "border-[#707483]"),
    "dark": ("bg-[#1E1E1E]", "text-white", "border-[#050404]"),
}

OUTLINE: dict[str, tuple[str, str, str]] = {
    "white": ("bg-transparent", "text-white", "border-white"),
    "primary": ("bg-transparent", "text-[#4363EC]", "border-[#4363EC]"),
    "secondary": ("bg-transparent", "text-[#6B6E7C]", "border-[#6B6E7C]"),
    "success": ("bg-transparent", "text-[#227A52]", "border-[#6EE7B7]"),
    "warning": ("bg-transparent", "text-[#FF8B08]", "border-[#FF8B08]"),
    "danger": ("bg-transparent", "text-[#E73B3B]", "border-[#E73B3B]"),
    "info": ("bg-transparent", "text-[#004FC4]", "border-[#004FC4]"),
    "misc": ("bg-transparent", "text-[#52059C]", "border-[#52059C]"),
    "dawn": ("bg-transparent", "text-[#4D4137]", "border-[#4D4137]"),
    "light": ("bg-transparent", "text-[#707483]", "border-[#707483]"),
    "dark": ("bg-transparent", "text-[#1E1E1E]", "border-[#1E1E1E]"),
}

SHADOW: dict[str, tuple[str, str, str]] = {
    "white": ("bg-white", "text-[#3E3E3E]", "border-[#DADADA]"),
    "primary": ("bg-[#4363EC]", "text-white", "border-[#4363EC]"),
    "secondary": ("bg-[#6B6E7C]", "text-white", "border-[#6B6E7C]"),
    "success": ("bg-[#AFEAD0]", "text-[#227A52]", "border-[#AFEAD0]"),
    "warning": ("bg-[#FFF8E6]", "text-[#FF8B08]", "border-[#FFF8E6]"),
    "danger": ("bg-[#FFE6E6]", "text-[#E73B3B]", "border-[#FFE6E6]"),
    "info": ("bg-[#E5F0FF]", "text-[#004FC4]", "border-[#E5F0FF]"),
    "misc": ("bg-[#FFE6FF]", "text-[#52059C]", "border-[#FFE6FF]"),
    "dawn": ("bg-[#FFECDA]", "text-[#4D4137]", "border-[#FFECDA]"),
    "light": ("bg-[#E3E7F1]", "text-[#707483]", "border-[#E3E7F1]"),
    "dark": ("bg-[#1E1E1E]", "text-white", "border-[#1E1E1E]"),
}

# Transparent surfaces reuse the outline text colors, except info.
TRANSPARENT_TEXT: dict[str, str] = {
    color: ("text-[#6663FD]" if color == "info" else OUTLINE[color][1]) for color in COLORS
}

GRADIENT: dict[str, tuple[str, str, str]] = {
    # (from, to, text)
    "white": ("from-[#e9ecef]", "to-[#F6F6FA]", "text-[#3E3E3E]"),
    "primary": ("from-[#4363ec94]", "to-[#F6F6FA]", "text-[#1E1E1E]"),
    "secondary": ("from-[#6B6E7C]", "to-[#F6F6FA]", "text-[#1E1E1E]"),
    "success": ("from-[#ECFEF3]", "to-[#F6F6FA]", "text-[#047857]"),
    "warning": ("from-[#FFF8E6]", "to-[#F6F6FA]", "text-[#FF8B08]"),
    "danger": ("from-[#FFE6E6]", "to-[#F6F6FA]", "text-[#E73B3B]"),
    "info": ("from-[#E5F0FF]", "to-[#F6F6FA]", "text-[#6663FD]"),
    "misc": ("from-[#FFE6FF]", "to-[#F6F6FA]", "text-[#52059C]"),
    "dawn": ("from-[#FFECDA]", "to-[#F6F6FA]", "text-[#4D4137]"),
    "light": ("from-[#E3E7F1]", "to-[#F6F6FA]", "text-[#707483]"),
    "dark": ("from-[#000]", "to-[#777777]", "text-white"),
}


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


# ---- Surface family (banner, card, sidebar) ----


def _surface() -> dict[tuple[str, str], str]:
    table: dict[tuple[str, str], str] = {}
    for color in COLORS:
        bg, fg, bd = FILL[color]
        table[("default", color)] = _join(bg, fg, bd)
        table[("outline", color)] = _join(*OUTLINE[color])
        table[("unbordered", color)] = _join(bg, fg, "border-transparent")
        table[("shadow", color)] = _join(*SHADOW[color], "shadow-md")
        table[("transparent", color)] = _join("bg-transparent", TRANSPARENT_TEXT[color], "border-transparent")
    return table


# ---- Keycap family (keyboard) ----


def _keycap() -> dict[tuple[str, str], str]:
    table = _surface()
    for color in COLORS:
        bg, fg, bd = FILL[color]
        table[("default", color)] = _join(bg, fg, "border", bd)
        if color != "white":
            o_bg, o_fg, o_bd = OUTLINE[color]
            table[("outline", color)] = _join(o_bg, o_fg, "border", o_bd)
        s_bg, s_fg, s_bd = SHADOW[color]
        table[("shadow", color)] = _join(s_bg, s_fg, "border", s_bd, "shadow-md")
    return table


# ---- Dialog family (modal) ----


def _dialog() -> dict[tuple[str, str], str]:
    table = _keycap()
    for color in COLORS:
        bg, fg, _ = FILL[color]
        table[("unbordered", color)] = _join(bg, fg)
        table[("transparent", color)] = _join("bg-transparent", TRANSPARENT_TEXT[color])
        s_bg, s_fg, s_bd = SHADOW[color]
        table[("shadow", color)] = _join(s_bg, s_fg, "border", s_bd, "shadow")
    return table


# ---- Tooltip family ----


def _tooltip() -> dict[tuple[str, str], str]:
    table: dict[tuple[str, str], str] = {}
    for color in COLORS:
        bg, fg, _ = FILL[color]
        s_bg, s_fg, _ = SHADOW[color]
        table[("default", color)] = _join(bg, fg)
        table[("shadow", color)] = _join(s_bg, s_fg, "shadow-md")
    return table


# ---- Bubble family (chat) ----

BUBBLE = "[&>.chat-section-bubble]:"


def _bubble() -> dict[tuple[str, str], str]:
    table: dict[tuple[str, str], str] = {}
    for color in COLORS:
        bg, fg, bd = FILL[color]
        if color == "primary":
            bd = "border-[#F6F6FA]"
        table[("default", color)] = _join(BUBBLE + bg, fg, BUBBLE + bd)

        o_bg, o_fg, o_bd = OUTLINE[color]
        table[("outline", color)] = _join(BUBBLE + o_bg, o_fg, BUBBLE + o_bd)

        table[("unbordered", color)] = _join(BUBBLE + FILL[color][0], FILL[color][1], BUBBLE + "border-transparent")

        s_bg, s_fg, s_bd = SHADOW[color]
        table[("shadow", color)] = _join(BUBBLE + s_bg, s_fg, BUBBLE + s_bd, BUBBLE + "shadow-md")

        table[("transparent", color)] = _join(
            BUBBLE + "bg-transparent", TRANSPARENT_TEXT[color], BUBBLE + "border-transparent"
        )

        g_from, g_to, g_fg = GRADIENT[color]
        table[("gradient", color)] = _join(
            BUBBLE + "bg-gradient-to-b", BUBBLE + g_from, BUBBLE + g_to, g_fg
        )
    return table


# ---- Component variants ----
COMPONENT_VARIANTS: dict[str, dict[tuple[str, str], str]] = {
    "surface": _surface(),
    "keycap": _keycap(),
    "dialog": _dialog(),
    "tooltip": _tooltip(),
    "bubble": _bubble(),
}

# Components sharing a family read the same map.
COMPONENT_FAMILY: dict[str, str] = {
    "banner": "surface",
    "card": "surface",
    "sidebar": "surface",
    "keyboard": "keycap",
    "modal": "dialog",
    "tooltip": "tooltip",
    "chat": "bubble",
}


def color_variants(component: str) -> dict[tuple[str, str], str]:
    """Return the (variant, color) map used by a component, e.g. `color_variants("banner")`."""
    return COMPONENT_VARIANTS[COMPONENT_FAMILY[component]]
