"""Shared data models for the artpipe application."""

from artpipe.models.content import FileContent
from artpipe.models.process import ProcessResult

__all__ = [
    "FileContent",
    "ProcessResult",
]
