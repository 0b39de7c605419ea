"""
Tessera UI: the component kit.

Components are plain functions returning Reflex components styled with Tailwind classes, e.g.::

    from tessera.ui.components import banner, modal, show_modal
"""
