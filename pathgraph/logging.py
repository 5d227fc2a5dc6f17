"""Logger setup for pathgraph.

Modules log through ``get_logger(__name__)``. Records reach the ``pathgraph``
logger, which prints them to stdout at INFO and also propagates them, so
applications and pytest's ``caplog`` see the same records. Cache activity and
graph invalidation are logged at DEBUG; ``enable_debug_logging`` shows them.
"""

import logging
import sys

ROOT_LOGGER_NAME = "pathgraph"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _StdoutHandler(logging.StreamHandler):
    """The single console handler attached to the ``pathgraph`` logger."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def _package_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, _StdoutHandler) for h in root.handlers):
        root.addHandler(_StdoutHandler())
    if root.level == logging.NOTSET:
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pathgraph module.

    Args:
        name: Dotted module name under ``pathgraph`` (usually ``__name__``).

    Raises:
        ValueError: If ``name`` is outside the ``pathgraph`` namespace.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        raise ValueError(f"Logger '{name}' is not under '{ROOT_LOGGER_NAME}'.")
    _package_logger()
    return logging.getLogger(name)


def enable_debug_logging() -> None:
    """Show cache hits/misses and invalidation messages."""
    _package_logger().setLevel(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to INFO: only warnings such as large path counts are shown."""
    _package_logger().setLevel(logging.INFO)
