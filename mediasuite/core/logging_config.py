import logging
import sys
from typing import Optional, Union

from mediasuite.config import LOG_LEVEL


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for the application.

    - Logs go to stdout
    - Level defaults to MEDIASUITE_LOG_LEVEL (INFO)
    - Calling it again only updates the level
    """
    level = level if level is not None else LOG_LEVEL
    root = logging.getLogger()

    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root.addHandler(handler)
    root.setLevel(level)
