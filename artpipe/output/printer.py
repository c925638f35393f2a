"""Pass-through printer for captured command output."""

from __future__ import annotations

import sys
from typing import BinaryIO

LINE_TERMINATOR = b"\n"


class OutputPrinter:
    """Writes raw bytes to a binary sink, each write ending with one newline.

    When no sink is given the current ``sys.stdout`` buffer is looked up on
    every write.
    """

    def __init__(self, sink: BinaryIO | None = None, encoding: str = "utf-8") -> None:
        self._sink = sink
        self._encoding = encoding

    def print(self, data: bytes) -> None:
        sink = self._resolve_sink()
        sink.write(data)
        sink.write(LINE_TERMINATOR)
        sink.flush()

    def print_line(self, text: str) -> None:
        self.print(text.encode(self._encoding))

    def _resolve_sink(self) -> BinaryIO:
        if self._sink is not None:
            return self._sink
        return sys.stdout.buffer
