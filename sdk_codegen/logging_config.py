"""Logging setup shared by the CLI and the generators.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "sdk_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``sdk_codegen`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        The named logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING, rich_output: bool = True) -> None:
    """Configure the package root logger.

    Repeated calls only adjust the level.

    Args:
        level: Logging level name or number.
        rich_output: Use a RichHandler writing to stderr; plain stream handler otherwise.
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _configured:
        return

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    root.propagate = False
    _configured = True
