import logging
import sys
from typing import Any, Protocol

from .constants import LOGGER_NAME

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


class Logger(Protocol):
    def debug(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


def setup_logging(should_debug: bool = False) -> None:
    """Attach a stderr handler to the ``simple_client`` logger.

    Calling it more than once only updates the level.
    """
    if not any(getattr(h, "_simple_client", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._simple_client = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)


def default_logger_factory(scope: str, owner: object) -> Logger:
    return logging.LoggerAdapter(
        logger.getChild(scope), {"owner": type(owner).__name__}
    )
