"""CommentDeck base class. Provides unified configuration and logging."""

from commentdeck.core.config import CoreConfig, SettingsLike
from commentdeck.core.logging.logger import get_logger

LOGGER_PARAM_NAMES = {
    "log_dir",
    "logger_level",
    "stream_level",
    "file_level",
    "propagate",
    "use_structlog",
    "add_stream_handler",
    "add_file_handler",
}


class CommentDeckMeta(type):
    """Metaclass for the CommentDeck class.

    Lets classes deriving from CommentDeck use the same default logger within class methods as within instance
    methods::

        from commentdeck.core import CommentDeck

        class MyClass(CommentDeck):
            def instance_method(self):
                self.logger.info(f"Using logger: {self.logger.name}")  # commentdeck.my_module.MyClass

            @classmethod
            def class_method(cls):
                cls.logger.info(f"Using logger: {cls.logger.name}")  # commentdeck.my_module.MyClass
    """

    def __init__(cls, name, bases, attr_dict):
        super().__init__(name, bases, attr_dict)
        cls._logger = None
        cls._config = None
        cls._logger_kwargs = None

    @property
    def logger(cls):
        if cls._logger is None:
            cls._logger = get_logger(cls.unique_name, **(cls._logger_kwargs or {}))
        return cls._logger

    @logger.setter
    def logger(cls, new_logger):
        cls._logger = new_logger

    @property
    def unique_name(cls) -> str:
        return cls.__module__ + "." + cls.__name__

    @property
    def config(cls):
        if cls._config is None:
            cls._config = CoreConfig()
        return cls._config

    @config.setter
    def config(cls, new_config):
        cls._config = new_config


class CommentDeck(metaclass=CommentDeckMeta):
    """Base class for all commentdeck core classes.

    Every subclass gets a `logger` named after its module and class and a `config` built from `CoreSettings` plus
    any overrides. Instances created without logger kwargs or config overrides share the class-level logger and
    config, so constructing one does not re-read settings or reopen log files.
    """

    def __init__(self, *, config_overrides: SettingsLike | None = None, **kwargs):
        """
        Initialize the CommentDeck object.

        Args:
            config_overrides: Additional settings to override the default config.
            **kwargs: Logger-related kwargs passed to `get_logger`. Valid keys: log_dir, logger_level, stream_level,
                file_level, propagate, use_structlog, add_stream_handler, add_file_handler.
        """
        unknown = set(kwargs) - LOGGER_PARAM_NAMES
        if unknown:
            raise TypeError(f"Unexpected keyword arguments: {', '.join(sorted(unknown))}")

        self.config = type(self).config if config_overrides is None else CoreConfig(config_overrides)

        if kwargs:
            type(self)._logger_kwargs = dict(kwargs)
            self.logger = get_logger(self.unique_name, **kwargs)
        else:
            self.logger = type(self).logger

    @property
    def unique_name(self) -> str:
        return self.__module__ + "." + type(self).__name__

    @property
    def name(self) -> str:
        return type(self).__name__
