"""Memory pool pairing an arena with an optional object slab."""

from __future__ import annotations

from miku.arena import Arena
from miku.slab import Slab, SlabObject


class Pool:
    """Arena for variable-size data plus a slab for fixed-size objects."""

    def __init__(self, arena_size: int = 4096, slab_obj_size: int = 0, slab_cap: int = 0) -> None:
        self.arena = Arena(arena_size)
        self.slab: Slab | None = None
        if slab_obj_size > 0 and slab_cap > 0:
            self.slab = Slab(slab_obj_size, slab_cap)

    def alloc(self, size: int) -> memoryview:
        """Allocate ``size`` bytes from the arena."""
        return self.arena.alloc(size)

    def alloc_obj(self) -> SlabObject:
        """Take one fixed-size object from the slab."""
        if self.slab is None:
            raise RuntimeError("pool has no object slab")
        return self.slab.alloc()

    def free_obj(self, obj: SlabObject) -> None:
        """Give an object back to the slab."""
        if self.slab is not None:
            self.slab.free(obj)

    def reset(self) -> None:
        """Release every arena allocation; slab objects stay as they are."""
        self.arena.reset()