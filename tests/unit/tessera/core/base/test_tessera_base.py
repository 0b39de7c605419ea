"""Tests for the Tessera base classes."""

import logging
from unittest.mock import Mock

from tessera.core.base.tessera_base import Tessera, TesseraMeta
from tessera.core.config import CoreConfig


class TestTesseraMeta:
    """Tests for the TesseraMeta metaclass."""

    def test_unique_name_property(self):
        class TestClass(metaclass=TesseraMeta):
            pass

        assert TestClass.unique_name == f"{TestClass.__module__}.TestClass"

    def test_logger_property(self):
        class TestClass(metaclass=TesseraMeta):
            pass

        assert isinstance(TestClass.logger, logging.Logger)
        assert TestClass.logger.name == f"tessera.{TestClass.unique_name}"

    def test_logger_setter_and_regeneration(self):
        class TestClass(metaclass=TesseraMeta):
            pass

        new_logger = Mock(spec=logging.Logger)
        new_logger.name = "test.custom.logger"
        TestClass.logger = new_logger
        assert TestClass.logger is new_logger
        assert TestClass._logger is new_logger

        TestClass.logger = None
        assert TestClass._logger is None
        regenerated = TestClass.logger
        assert isinstance(regenerated, logging.Logger)
        assert TestClass._logger is regenerated

    def test_logger_is_per_class(self):
        class First(metaclass=TesseraMeta):
            pass

        class Second(metaclass=TesseraMeta):
            pass

        First.logger = logging.getLogger("first.only")
        assert Second.logger is not First.logger

    def test_class_config_is_core_config(self):
        class TestClass(metaclass=TesseraMeta):
            pass

        assert isinstance(TestClass.config, CoreConfig)
        assert "TESSERA_UI" in TestClass.config


class TestTessera:
    """Tests for the Tessera base class."""

    def test_instance_logger_and_name(self):
        class Helper(Tessera):
            pass

        helper = Helper()
        assert helper.name == "Helper"
        assert helper.unique_name.endswith(".Helper")
        assert helper.logger.name == f"tessera.{helper.unique_name}"

    def test_config_overrides(self):
        class Helper(Tessera):
            pass

        helper = Helper(config_overrides={"TESSERA_UI": {"LOCALE": "fa"}})
        assert helper.config.TESSERA_UI.LOCALE == "fa"
        # The rest of the section still comes from CoreSettings
        assert helper.config.TESSERA_UI.GETTEXT_DOMAIN == "tessera"

    def test_instance_logs_are_captured(self, caplog):
        class Helper(Tessera):
            def work(self):
                self.logger.debug("working")

        Helper().work()
        assert "working" in caplog.text
