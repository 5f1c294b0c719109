# player_registry.py
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from identity import Color, new_color, new_identity
from protocol import SPAWN_FORWARD, SPAWN_PITCH, SPAWN_POSITION

Vector = Tuple[float, float, float]


@dataclass
class PlayerRecord:
    """Last known state of one connected player.

    ``id`` and ``color`` are fixed for the life of the connection; the motion
    fields are overwritten by that player's own ``position`` messages.
    """
    id: str
    color: Color
    position: Vector = SPAWN_POSITION
    forward: Vector = SPAWN_FORWARD
    pitch: float = SPAWN_PITCH

    def to_join_data(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "color": self.color.to_data(),
            "position": list(self.position),
            "forward": list(self.forward),
            "pitch": self.pitch,
        }


class PlayerRegistry:
    """Maps each live connection to its PlayerRecord.

    This mapping is the single source of truth for who is connected. Every
    method takes the lock and returns copies, so callers never hold a record
    that the registry may still mutate.
    """

    def __init__(self):
        self._players = {}  # connection -> PlayerRecord
        self._lock = threading.Lock()

    def register(self, conn) -> PlayerRecord:
        player = PlayerRecord(id=new_identity(), color=new_color())
        with self._lock:
            self._players[conn] = player
            return replace(player)

    def update_motion(self, conn, position: Vector, forward: Vector, pitch: float) -> Optional[PlayerRecord]:
        # Late messages can race the close of their connection; those are dropped.
        with self._lock:
            player = self._players.get(conn)
            if player is None:
                return None
            player.position = tuple(position)
            player.forward = tuple(forward)
            player.pitch = pitch
            return replace(player)

    def unregister(self, conn) -> Optional[PlayerRecord]:
        with self._lock:
            return self._players.pop(conn, None)

    def get(self, conn) -> Optional[PlayerRecord]:
        with self._lock:
            player = self._players.get(conn)
            return replace(player) if player else None

    def snapshot(self) -> List[PlayerRecord]:
        with self._lock:
            return [replace(p) for p in self._players.values()]

    def connections(self) -> List[Tuple[Any, PlayerRecord]]:
        with self._lock:
            return [(conn, replace(p)) for conn, p in self._players.items()]

    def __len__(self):
        with self._lock:
            return len(self._players)

    def __contains__(self, conn):
        with self._lock:
            return conn in self._players
