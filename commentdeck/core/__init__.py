from commentdeck.core.utils.checks import ifnone
from commentdeck.core.config import Config, CoreConfig, CoreSettings
from commentdeck.core.base import CommentDeck, CommentDeckMeta
from commentdeck.core.logging.logger import get_logger, setup_logger

setup_logger()  # Initialize the default logger

__all__ = [
    "CommentDeck",
    "CommentDeckMeta",
    "Config",
    "CoreConfig",
    "CoreSettings",
    "get_logger",
    "ifnone",
    "setup_logger",
]
