from tessera.core.base.tessera_base import Tessera, TesseraMeta

__all__ = ["Tessera", "TesseraMeta"]
