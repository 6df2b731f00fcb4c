import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Create a console logger for scripts.

    The library itself only ever calls ``logging.getLogger(__name__)``; this
    helper is for applications that want readable output without configuring
    logging themselves.

    Args:
        name: Logger name
        level: Logging level name (DEBUG, INFO, ...). Defaults to INFO.

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or "INFO").upper()))

    if not any(getattr(h, "_vendor_clients_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._vendor_clients_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
