"""Exception types raised by the artpipe pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artpipe.models.process import ProcessResult


class ArtpipeError(Exception):
    """Base class for every error raised by artpipe."""


class ConfigError(ArtpipeError):
    pass


class ArenaError(ArtpipeError):
    pass


class ReadError(ArtpipeError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class SpawnError(ArtpipeError):
    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Cannot launch {command}: {reason}")
        self.command = command
        self.reason = reason


class ExternalCommandError(ArtpipeError):
    def __init__(self, result: ProcessResult) -> None:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        message = f"Command {result.args[0]} exited with status {result.exit_code}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)
        self.result = result
