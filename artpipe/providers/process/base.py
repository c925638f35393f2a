"""Process invoker interface."""

from __future__ import annotations

from typing import Protocol, Sequence

from artpipe.models.process import ProcessResult


class ProcessInvoker(Protocol):
    def execute(self, command_name: str, arguments: Sequence[str]) -> ProcessResult:
        ...
