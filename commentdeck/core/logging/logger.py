import logging
import os
from collections import OrderedDict
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from commentdeck.core.config import CoreSettings
from commentdeck.core.utils import ifnone

ROOT_LOGGER_NAME = "commentdeck"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
STRUCTLOG_KEY_ORDER = ["timestamp", "event", "level", "logger"]


def default_formatter(fmt: Optional[str] = None) -> logging.Formatter:
    """Returns a logging formatter with a default format if none is specified."""
    default_fmt = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"
    return logging.Formatter(fmt or default_fmt)


def log_file_path(name: str, log_dir: Optional[Path] = None, use_structlog: bool = False) -> str:
    """Where the logger called ``name`` writes: the root logger at the top level, others under ``modules/``."""
    relative = f"{name}.log" if name == ROOT_LOGGER_NAME else os.path.join("modules", f"{name}.log")
    if log_dir is None:
        dir_paths = CoreSettings().COMMENTDECK_DIR_PATHS
        log_dir = dir_paths.STRUCT_LOGGER_DIR if use_structlog else dir_paths.LOGGER_DIR
    return os.path.join(log_dir, relative)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    log_dir: Optional[Path] = None,
    logger_level: int = logging.DEBUG,
    stream_level: int = logging.ERROR,
    add_stream_handler: bool = True,
    file_level: int = logging.DEBUG,
    add_file_handler: bool = True,
    propagate: bool = False,
    use_structlog: Optional[bool] = None,
) -> Logger | structlog.BoundLogger:
    """Configure and initialize logging for commentdeck components programmatically.

    Replaces the handlers of the named logger with a console handler and a rotating file handler. The log file
    defaults to ~/.cache/commentdeck/logs/{name}.log.

    Args:
        name: Logger name, defaults to "commentdeck".
        log_dir: Custom directory for log file.
        logger_level: Overall logger level.
        stream_level: StreamHandler level (e.g., ERROR).
        add_stream_handler: Whether to add a stream handler.
        file_level: FileHandler level (e.g., DEBUG).
        add_file_handler: Whether to add a file handler.
        propagate: Whether the logger should propagate messages to ancestor loggers.
        use_structlog: If True, configure structlog to render JSON lines and return a structlog BoundLogger. If
            None, uses ``COMMENTDECK_LOGGER.USE_STRUCTLOG``.

    Returns:
        Logger | structlog.BoundLogger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logger_level)
    logger.propagate = propagate

    use_structlog = ifnone(use_structlog, CoreSettings().COMMENTDECK_LOGGER.USE_STRUCTLOG)

    # Structlog renders the full line, so the stdlib handlers only pass the message through
    formatter = logging.Formatter("%(message)s") if use_structlog else default_formatter()

    if add_stream_handler:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(stream_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if add_file_handler:
        path = log_file_path(name, log_dir, use_structlog)
        os.makedirs(Path(path).parent, exist_ok=True)
        file_handler = RotatingFileHandler(filename=path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not use_structlog:
        return logger

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _enforce_key_order_processor(STRUCTLOG_KEY_ORDER),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def _enforce_key_order_processor(key_order: list[str]):
    def _processor(_logger, _method_name, event_dict):
        ordered = OrderedDict()
        for key in key_order:
            if key in event_dict:
                ordered[key] = event_dict.pop(key)
        for k in sorted(event_dict.keys()):
            ordered[k] = event_dict[k]
        return ordered

    return _processor


def get_logger(
    name: str | None = ROOT_LOGGER_NAME, use_structlog: bool | None = None, **kwargs
) -> logging.Logger | structlog.BoundLogger:
    """
    Create or retrieve a named logger instance.

    Names are placed under the ``commentdeck`` hierarchy, so ``get_logger("ui.dashboard")``
    configures ``commentdeck.ui.dashboard``. Child loggers propagate to the root
    ``commentdeck`` logger by default.

    Args:
        name (str): The name of the logger. Defaults to "commentdeck".
        use_structlog (bool): Whether to use structured logging. If None, uses config default.
        **kwargs: Additional keyword arguments to be passed to `setup_logger`.

    Returns:
        logging.Logger | structlog.BoundLogger: A configured logger instance.

    Example:
        .. code-block:: python

            from commentdeck.core.logging.logger import get_logger

            logger = get_logger("comments.store")
            logger.info("Restored filter state")
    """
    if not name:
        name = ROOT_LOGGER_NAME

    full_name = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"
    kwargs.setdefault("propagate", True)
    return setup_logger(full_name, use_structlog=use_structlog, **kwargs)
