from tessera.ui.theme.theme import COMPONENT_FAMILY, COMPONENT_VARIANTS, color_variants

__all__ = ["COMPONENT_FAMILY", "COMPONENT_VARIANTS", "color_variants"]
