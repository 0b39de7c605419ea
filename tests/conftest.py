import logging

import pytest


def by_slow_marker(item):
    # Sort key: (is_integration, is_slow), so fast unit tests run first
    is_slow = 0 if item.get_closest_marker("slow") is None else 1
    is_integration = 1 if "integration" in str(item.fspath) else 0
    return (is_integration, is_slow)


def pytest_addoption(parser):
    parser.addoption("--slow-last", action="store_true", default=False)


def pytest_collection_modifyitems(items, config):
    if config.getoption("--slow-last"):
        items.sort(key=by_slow_marker)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Configure logging to work properly with caplog fixture.

    This fixture ensures that all Tessera loggers propagate their messages to the root logger so that caplog can
    capture them properly.
    """
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    tessera_logger = logging.getLogger("tessera")
    original_propagate = tessera_logger.propagate
    tessera_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    tessera_logger.propagate = original_propagate

