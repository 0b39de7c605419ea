"""Tessera class. Provides unified configuration and logging for stateful helpers."""

from tessera.core.config import CoreConfig, SettingsLike
from tessera.core.logging.logger import get_logger


class TesseraMeta(type):
    """Metaclass for Tessera class.

    The TesseraMeta metaclass enables classes deriving from Tessera to automatically use the same default logger within
    class methods as it does within instance methods. I.e. consider the following class:

    Example, logging in both class methods and instance methods::

        from tessera.core import Tessera

        class MyClass(Tessera):
            def __init__(self):
                super().__init__()

            def instance_method(self):
                self.logger.info(f"Using logger: {self.logger.name}")  # Using logger: tessera.my_module.MyClass

            @classmethod
            def class_method(cls):
                cls.logger.info(f"Using logger: {cls.logger.name}")  # Using logger: tessera.my_module.MyClass
    """

    def __init__(cls, name, bases, attr_dict):
        super().__init__(name, bases, attr_dict)
        cls._logger = None
        cls._config = None

    @property
    def logger(cls):
        if cls._logger is None:
            cls._logger = get_logger(cls.unique_name)
        return cls._logger

    @logger.setter
    def logger(cls, new_logger):
        cls._logger = new_logger

    @property
    def unique_name(self) -> str:
        return self.__module__ + "." + self.__name__

    @property
    def config(cls):
        if cls._config is None:
            cls._config = CoreConfig()
        return cls._config

    @config.setter
    def config(cls, new_config):
        cls._config = new_config


class Tessera(metaclass=TesseraMeta):
    """Base class for Tessera helpers that carry state or configuration.

    Render functions are plain functions; classes such as the visibility machine derive from `Tessera` to share the
    `tessera.<module>.<Class>` logger naming and the layered `CoreConfig`.
    """

    def __init__(self, *, config_overrides: SettingsLike | None = None, **kwargs):
        super().__init__(**kwargs)
        self.config = CoreConfig(config_overrides)
        self.logger = get_logger(self.unique_name)

    @property
    def unique_name(self) -> str:
        return self.__module__ + "." + type(self).__name__

    @property
    def name(self) -> str:
        return type(self).__name__
