"""Version display for h5kit UI."""

from h5kit.ui.console import LOGO_EMOJI, VERSION, console


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"\n{LOGO_EMOJI} [header]h5kit[/header] [dim]v{VERSION}[/dim]\n")
