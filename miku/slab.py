"""Fixed-size object slab with a LIFO free list."""

from __future__ import annotations

from miku.common import round_up

_WORD = 8


class SlabObject:
    """One fixed-size slot of a :class:`Slab`; ``data`` is its writable memory."""

    __slots__ = ("slab", "index", "data")

    def __init__(self, slab: "Slab", index: int, data: memoryview) -> None:
        self.slab = slab
        self.index = index
        self.data = data

    def __repr__(self) -> str:
        return f"SlabObject(index={self.index}, size={len(self.data)})"


class Slab:
    """Pool of ``capacity`` equal slots, each at least one word long."""

    def __init__(self, obj_size: int, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        obj_size = round_up(max(obj_size, _WORD), _WORD)
        self.obj_size = obj_size
        self.total_count = capacity
        self._memory = bytearray(obj_size * capacity)
        view = memoryview(self._memory)
        self._objects = [
            SlabObject(self, i, view[i * obj_size:(i + 1) * obj_size])
            for i in range(capacity)
        ]
        self._free = list(self._objects)
        self._free_indices = set(range(capacity))

    def alloc(self) -> SlabObject:
        """Take a free slot; raise MemoryError when none is left."""
        if not self._free:
            raise MemoryError("slab exhausted")
        obj = self._free.pop()
        self._free_indices.discard(obj.index)
        return obj

    def free(self, obj: SlabObject) -> None:
        """Return a slot to the slab; objects of other slabs are ignored."""
        if not self.contains(obj):
            return
        if obj.index in self._free_indices:
            raise ValueError("object already freed")
        self._free.append(obj)
        self._free_indices.add(obj.index)

    def available(self) -> int:
        """Number of free slots."""
        return len(self._free)

    def contains(self, obj) -> bool:
        """True if ``obj`` is a slot of this slab."""
        return isinstance(obj, SlabObject) and obj.slab is self