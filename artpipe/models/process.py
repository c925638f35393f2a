"""Data model for external command results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    args: tuple[str, ...]
    exit_code: int
    stdout: bytes
    stderr: bytes
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
