"""Provider package for file loading and external command integrations."""

from artpipe.providers.loader import FileLoader, LocalFileLoader
from artpipe.providers.process import LocalProcessInvoker, ProcessInvoker

__all__ = [
    "FileLoader",
    "LocalFileLoader",
    "LocalProcessInvoker",
    "ProcessInvoker",
]
