"""Command-line interface for create-dojo."""

from create_dojo.cli.app import app

__all__ = ["app"]
