"""Local filesystem loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from artpipe.errors import ReadError
from artpipe.memory.arena import Arena
from artpipe.models.content import FileContent
from artpipe.providers.loader.base import FileLoader

logger = logging.getLogger(__name__)


class LocalFileLoader(FileLoader):
    def load(self, path: str | os.PathLike[str], arena: Arena) -> FileContent:
        target = Path(path)
        try:
            with target.open("rb") as handle:
                size = os.fstat(handle.fileno()).st_size
                buffer = arena.allocate(size)
                count = handle.readinto(buffer) or 0
                trailing = handle.read(1)
        except OSError as exc:
            raise ReadError(str(target), exc.strerror or str(exc)) from exc
        # The file changed size between fstat and the read.
        if count != size or trailing:
            raise ReadError(str(target), "file changed while it was being read")
        logger.debug("Read %d bytes from %s", size, target)
        return FileContent(path=target, data=buffer)
