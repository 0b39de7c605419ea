from tessera.core.utils.checks import ifnone
from tessera.core.config import Config, CoreConfig, get_config
from tessera.core.base import Tessera, TesseraMeta
from tessera.core.logging.logger import get_logger, setup_logger

setup_logger()  # Initialize the default logger

__all__ = [
    "Config",
    "CoreConfig",
    "get_config",
    "get_logger",
    "ifnone",
    "setup_logger",
    "Tessera",
    "TesseraMeta",
]
