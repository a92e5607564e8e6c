"""Heap allocation accounting, container allocators and raw buffer helpers."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_INDEX_SIZE = 32
DEFAULT_INDEX_SIZE_64 = 64

_SIZE_TYPE_BOUNDS = {
    8: (-(2 ** 7), 2 ** 7 - 1),
    16: (-(2 ** 15), 2 ** 15 - 1),
    32: (-(2 ** 31), 2 ** 31 - 1),
    64: (-(2 ** 63), 2 ** 63 - 1),
}


class AllocationType(enum.Enum):
    """What an allocation is used for."""

    OBJECT = "object"
    CONTAINER = "container"


@dataclass
class _Stats:
    bytes: int = 0
    count: int = 0


class MemoryTracker:
    """Hands out zeroed byte blocks and tracks live bytes and blocks per type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stats = {kind: _Stats() for kind in AllocationType}

    def _adjust(self, alloc_type, size: int, sign: int) -> None:
        stats = self._stats[AllocationType(alloc_type)]
        with self._lock:
            stats.bytes += sign * size
            stats.count += sign

    def malloc(self, alloc_type, size: int) -> bytearray:
        """Allocate ``size`` bytes and record the allocation."""
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        block = bytearray(size)
        self._adjust(alloc_type, size, 1)
        return block

    def aligned_malloc(self, alloc_type, size: int, alignment: int) -> bytearray:
        """Allocate like :meth:`malloc`; ``alignment`` must be a power of two."""
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError(f"alignment must be a power of two, got {alignment}")
        return self.malloc(alloc_type, size)

    def free(self, alloc_type, block: Optional[bytearray]) -> None:
        """Release a block; ``None`` is ignored."""
        if block is None:
            return
        self._adjust(alloc_type, len(block), -1)

    def aligned_free(self, alloc_type, block: Optional[bytearray]) -> None:
        self.free(alloc_type, block)

    def allocation_bytes(self, alloc_type) -> int:
        with self._lock:
            return self._stats[AllocationType(alloc_type)].bytes

    def allocation_count(self, alloc_type) -> int:
        with self._lock:
            return self._stats[AllocationType(alloc_type)].count


platform_memory = MemoryTracker()


def size_type_bounds(index_size: int) -> Tuple[int, int]:
    """Return the (min, max) of the signed index type with ``index_size`` bits."""
    try:
        return _SIZE_TYPE_BOUNDS[index_size]
    except KeyError:
        raise ValueError(f"unsupported allocator index size: {index_size}") from None


class ContainerAllocator:
    """Allocates storage for ``count`` elements of ``element_size`` bytes each."""

    def __init__(
        self,
        element_size: int,
        index_size: int = DEFAULT_INDEX_SIZE,
        tracker: Optional[MemoryTracker] = None,
    ) -> None:
        if element_size <= 0:
            raise ValueError(f"element size must be positive, got {element_size}")
        size_type_bounds(index_size)
        self.element_size = element_size
        self.index_size = index_size
        self.tracker = tracker if tracker is not None else platform_memory

    @property
    def max_count(self) -> int:
        """Largest element count the unsigned size type can express."""
        return 2 ** self.index_size - 1

    def allocate(self, count: int) -> bytearray:
        if not 0 <= count <= self.max_count:
            raise OverflowError(
                f"count {count} does not fit a {self.index_size}-bit size type"
            )
        return self.tracker.malloc(AllocationType.CONTAINER, self.element_size * count)

    def deallocate(self, block: Optional[bytearray], count: int) -> None:
        if block is None:
            return
        expected = self.element_size * count
        if len(block) != expected:
            raise ValueError(
                f"block holds {len(block)} bytes, expected {expected} for {count} elements"
            )
        self.tracker.free(AllocationType.CONTAINER, block)


def _bytes_view(buffer) -> memoryview:
    return memoryview(buffer).cast("B")


def _check_count(count: int, *views: memoryview) -> None:
    if count < 0 or any(count > len(view) for view in views):
        raise ValueError(f"count {count} exceeds a buffer's size")


def _writable(dest, count: int) -> memoryview:
    view = _bytes_view(dest)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    _check_count(count, view)
    return view


def memmove(dest, src, count: int):
    """Copy ``count`` bytes from ``src`` into ``dest``; overlapping buffers are safe."""
    view = _writable(dest, count)
    source = _bytes_view(src)
    _check_count(count, source)
    view[:count] = bytes(source[:count])
    return dest


def memcpy(dest, src, count: int):
    """Copy ``count`` bytes from ``src`` into ``dest``."""
    return memmove(dest, src, count)


def memcmp(a, b, count: int) -> int:
    """Compare the first ``count`` bytes; negative, zero or positive like C."""
    left, right = _bytes_view(a), _bytes_view(b)
    _check_count(count, left, right)
    return next((x - y for x, y in zip(left[:count], right[:count]) if x != y), 0)


def memset(dest, value: int, count: int):
    """Fill the first ``count`` bytes of ``dest`` with ``value`` truncated to a byte."""
    view = _writable(dest, count)
    view[:count] = bytes([value & 0xFF]) * count
    return dest


def memzero(dest, count: int):
    return memset(dest, 0, count)