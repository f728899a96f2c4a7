"""Utilities for the command-line tool."""

from .color_formatter import ColoredFormatter, setup_logging

__all__ = ["ColoredFormatter", "setup_logging"]
