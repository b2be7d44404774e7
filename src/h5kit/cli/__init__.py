"""Command-line interface for h5kit."""

from h5kit.cli.app import app

__all__ = ["app"]
