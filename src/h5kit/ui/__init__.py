"""UI and terminal output styling for h5kit.

Submodules:
- console: Theme and console instance
- logging: Logger configuration
- branding: Version display
- messages: Status messages (success, error, info)
- tables: Table display utilities
"""

from h5kit.ui.branding import show_version
from h5kit.ui.console import H5KIT_THEME, VERSION, console, icon
from h5kit.ui.logging import close_logging, setup_logging
from h5kit.ui.messages import error, info, print_next_steps, success
from h5kit.ui.tables import create_table, print_summary

__all__ = [
    "H5KIT_THEME",
    "VERSION",
    "close_logging",
    "console",
    "create_table",
    "error",
    "icon",
    "info",
    "print_next_steps",
    "print_summary",
    "setup_logging",
    "show_version",
    "success",
]
