"""Bump allocator handing out views into large pre-allocated blocks."""

from __future__ import annotations

from miku.common import round_up

_WORD = 8
_MIN_BLOCK = 4096


class _Block:
    __slots__ = ("buffer", "used")

    def __init__(self, size: int) -> None:
        self.buffer = bytearray(size)
        self.used = 0

    def take(self, size: int) -> int | None:
        """Reserve ``size`` bytes (word rounded); return the offset or None."""
        rounded = round_up(size, _WORD)
        if self.used + rounded > len(self.buffer):
            return None
        offset = self.used
        self.used += rounded
        return offset


class Arena:
    """Region allocator: memory is released all at once with :meth:`reset`.

    Blocks are at least 4096 bytes. Each allocation is rounded up to a
    word boundary inside its block; when the current block is full a new
    one is added and becomes current.
    """

    def __init__(self, initial_size: int = _MIN_BLOCK) -> None:
        initial_size = max(initial_size, _MIN_BLOCK)
        self._default_block_size = initial_size
        first = _Block(initial_size)
        self._blocks = [first]  # newest block first
        self._current = first
        self._used = 0
        self._capacity = initial_size

    def _reserve(self, size: int) -> tuple[_Block, int]:
        if size <= 0:
            raise ValueError("allocation size must be positive")
        offset = self._current.take(size)
        if offset is None:
            block_size = self._default_block_size
            if size > block_size:
                block_size = round_up(size, _MIN_BLOCK)
            block = _Block(block_size)
            self._blocks.insert(0, block)
            self._current = block
            self._capacity += block_size
            offset = block.take(size)
            if offset is None:
                raise MemoryError(f"cannot fit {size} bytes in a new block")
        self._used += size
        return self._current, offset

    def alloc(self, size: int) -> memoryview:
        """Return a writable view of ``size`` fresh bytes."""
        block, offset = self._reserve(size)
        return memoryview(block.buffer)[offset:offset + size]

    def alloc_aligned(self, size: int, alignment: int = 0) -> memoryview:
        """Return ``size`` bytes starting at a multiple of ``alignment`` within its block."""
        if size <= 0:
            raise ValueError("allocation size must be positive")
        if alignment == 0:
            alignment = _WORD
        round_up(0, alignment)  # validates that alignment is a power of two
        block, offset = self._reserve(size + alignment - 1)
        start = round_up(offset, alignment)
        return memoryview(block.buffer)[start:start + size]

    def reset(self) -> None:
        """Forget every allocation while keeping the blocks for reuse."""
        for block in self._blocks:
            block.used = 0
        self._current = self._blocks[0]
        self._used = 0

    def used(self) -> int:
        """Bytes requested since creation or the last reset."""
        return self._used

    def capacity(self) -> int:
        """Total bytes held in all blocks."""
        return self._capacity