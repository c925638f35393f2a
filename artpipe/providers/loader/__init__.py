"""File loader implementations and interfaces."""

from artpipe.providers.loader.base import FileLoader
from artpipe.providers.loader.local import LocalFileLoader

__all__ = ["FileLoader", "LocalFileLoader"]
