"""
Logging package for ``gedcom_importer``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import get_logger, list_active_loggers, set_console_level

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_console_level",
]
