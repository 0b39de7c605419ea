"""Loggers for the Tessera kit.

Every logger is a child of ``tessera``. Only that root logger carries a handler; children hand their records up
through propagation, so ``get_logger("ui.styling")`` logs as ``tessera.ui.styling`` without further setup.

With ``TESSERA_LOGGER.USE_STRUCTLOG`` enabled, `get_logger` returns a structlog logger bound to the same stdlib
logger and each record is rendered as one JSON line.
"""

import logging
from typing import Optional

import structlog

from tessera.core.config import CoreSettings
from tessera.core.utils import ifnone

ROOT_LOGGER = "tessera"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"


def logger_name(name: Optional[str]) -> str:
    """Root `name` under ``tessera``: ``"ui.js"`` -> ``"tessera.ui.js"``; empty names give ``"tessera"``."""
    if not name or name == ROOT_LOGGER:
        return ROOT_LOGGER
    return name if name.startswith(f"{ROOT_LOGGER}.") else f"{ROOT_LOGGER}.{name}"


def setup_logger(stream_level: Optional[str | int] = None, use_structlog: Optional[bool] = None) -> logging.Logger:
    """Configure the root ``tessera`` logger.

    Replaces its handlers with a single stream handler at `stream_level` (``TESSERA_LOGGER.STREAM_LEVEL`` by
    default). When structlog is enabled the handler prints the rendered JSON line as is.

    Args:
        stream_level: Level of the stream handler, as a name ("ERROR") or a number.
        use_structlog: Render records through structlog. Defaults to ``TESSERA_LOGGER.USE_STRUCTLOG``.

    Returns:
        logging.Logger: The root ``tessera`` logger.
    """
    settings = CoreSettings().TESSERA_LOGGER
    use_structlog = ifnone(use_structlog, settings.USE_STRUCTLOG)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    handler = logging.StreamHandler()
    handler.setLevel(ifnone(stream_level, settings.STREAM_LEVEL))
    handler.setFormatter(logging.Formatter("%(message)s" if use_structlog else LOG_FORMAT))
    logger.addHandler(handler)

    if use_structlog:
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(sort_keys=True),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
    return logger


def get_logger(name: Optional[str] = ROOT_LOGGER, use_structlog: Optional[bool] = None):
    """
    Return the logger for `name`, rooted at ``tessera``.

    Args:
        name (str): Logger name, with or without the ``tessera.`` prefix. Defaults to "tessera".
        use_structlog (bool): Return a structlog logger. If None, uses ``TESSERA_LOGGER.USE_STRUCTLOG``.

    Returns:
        logging.Logger | structlog.stdlib.BoundLogger: The logger.

    Example:
        .. code-block:: python

            from tessera.core.logging.logger import get_logger

            logger = get_logger("ui.components.modal")
            logger.debug("Rendering modal %s", "confirm-delete")
    """
    full_name = logger_name(name)
    if not logging.getLogger(ROOT_LOGGER).handlers:
        setup_logger()
    if ifnone(use_structlog, CoreSettings().TESSERA_LOGGER.USE_STRUCTLOG):
        return structlog.get_logger(full_name)
    return logging.getLogger(full_name)
