# world_state.py
import threading
from typing import Any, List, NamedTuple, Optional


class BlockChange(NamedTuple):
    face: int
    layer: int
    block: Any

    def to_data(self):
        return {"face": self.face, "layer": self.layer, "block": self.block}


class WorldDeltaStore:
    """Block overrides on top of the procedurally generated world.

    Keyed by (face, layer); a later write to the same key replaces the block.
    Entries are never removed, so the store only grows while the process runs.
    """

    def __init__(self, warn_size: Optional[int] = None):
        self._changes = {}  # (face, layer) -> block
        self._lock = threading.Lock()
        self.warn_size = warn_size
        self._warned = False

    def apply(self, face: int, layer: int, block: Any) -> BlockChange:
        with self._lock:
            self._changes[(face, layer)] = block
            size = len(self._changes)
            crossed = self._check_size(size)
        if crossed:
            print(f"[WARN] World delta store reached {size} entries; it is never pruned")
        return BlockChange(face, layer, block)

    def _check_size(self, size):
        if self.warn_size is None or self._warned or size < self.warn_size:
            return False
        self._warned = True
        return True

    def snapshot_all(self) -> List[BlockChange]:
        with self._lock:
            return [BlockChange(face, layer, block) for (face, layer), block in self._changes.items()]

    def get(self, face: int, layer: int, default=None):
        with self._lock:
            return self._changes.get((face, layer), default)

    def __len__(self):
        with self._lock:
            return len(self._changes)
