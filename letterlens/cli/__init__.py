"""Command-line interface."""

from letterlens.cli.parser import create_parser

__all__ = ["create_parser"]
