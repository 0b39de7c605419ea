"""Tessera: Tailwind-styled presentation components for Reflex apps."""

__version__ = "0.1.0"
