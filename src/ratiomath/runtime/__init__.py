"""Runtime subpackage public exports."""

from .logging_utils import ensure_console_handler, get_logger

__all__ = [
    "get_logger",
    "ensure_console_handler",
]
