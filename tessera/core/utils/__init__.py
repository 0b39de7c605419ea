"""
Utility functions for the Tessera core package.
"""

from tessera.core.utils.checks import ifnone

__all__ = ["ifnone"]
