"""Data model for loaded file content."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileContent:
    path: Path
    data: memoryview

    def __post_init__(self) -> None:
        if not self.data.readonly:
            object.__setattr__(self, "data", self.data.toreadonly())

    def __len__(self) -> int:
        return self.data.nbytes

    def __bytes__(self) -> bytes:
        return self.data.tobytes()

    def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.data.tobytes().decode(encoding, errors)
