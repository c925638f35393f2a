"""Render a static text resource through an external line-art command."""

__version__ = "0.1.0"
