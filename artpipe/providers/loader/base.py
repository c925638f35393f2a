"""File loader interface."""

from __future__ import annotations

import os
from typing import Protocol

from artpipe.memory.arena import Arena
from artpipe.models.content import FileContent


class FileLoader(Protocol):
    def load(self, path: str | os.PathLike[str], arena: Arena) -> FileContent:
        ...
