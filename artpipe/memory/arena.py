"""Growable bump arena handing out stable byte buffers."""

from __future__ import annotations

from types import TracebackType

from artpipe.errors import ArenaError

DEFAULT_REGION_SIZE = 64 * 1024


class Arena:
    """Sequential allocator over a list of fixed-size ``bytearray`` regions.

    Buffers are writable ``memoryview`` slices of a region. Regions are never
    resized once created, so a buffer stays valid until the arena is released.
    Individual buffers cannot be freed.
    """

    def __init__(self, region_size: int = DEFAULT_REGION_SIZE) -> None:
        if region_size <= 0:
            raise ValueError(f"region_size must be positive, got {region_size}")
        self._region_size = region_size
        self._regions: list[bytearray] = []
        self._offset = 0
        self._used = 0
        self._released = False

    def __enter__(self) -> Arena:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()

    @property
    def capacity(self) -> int:
        return sum(len(region) for region in self._regions)

    @property
    def used(self) -> int:
        return self._used

    @property
    def region_count(self) -> int:
        return len(self._regions)

    def allocate(self, size: int) -> memoryview:
        if self._released:
            raise ArenaError("Arena has been released")
        if size < 0:
            raise ValueError(f"Cannot allocate a negative size: {size}")
        if size == 0:
            return memoryview(bytearray())
        if not self._regions or self._offset + size > len(self._regions[-1]):
            self._grow(size)
        start = self._offset
        self._offset += size
        self._used += size
        return memoryview(self._regions[-1])[start : start + size]

    def release(self) -> None:
        self._regions.clear()
        self._offset = 0
        self._used = 0
        self._released = True

    def _grow(self, size: int) -> None:
        length = max(self._region_size, size)
        try:
            region = bytearray(length)
        except MemoryError as exc:
            raise ArenaError(f"Cannot reserve a {length} byte region") from exc
        self._regions.append(region)
        self._offset = 0
