"""Console configuration and theme for h5kit UI.

This module provides the central console instance and theme used throughout
the command-line interface.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

try:
    from h5kit import __version__ as _PKG_VERSION
except ImportError:
    _PKG_VERSION = "dev"

H5KIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
    }
)

# Single console instance for entire application
console = Console(theme=H5KIT_THEME)

VERSION = _PKG_VERSION
LOGO_EMOJI = "🗄"

_EMOJI_DISABLED = os.getenv("H5KIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    """Best-effort detection if the terminal can print Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet
    """
    use_unicode = _supports_unicode()
    mapping = {
        "check": "✓" if use_unicode else "+",
        "warn": "⚠" if use_unicode else "!",
        "error": "✗" if use_unicode else "x",
        "info": "▸" if use_unicode else ">",
        "bullet": "•" if use_unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = ["H5KIT_THEME", "LOGO_EMOJI", "VERSION", "console", "icon"]
