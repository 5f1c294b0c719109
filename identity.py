import random
import uuid
from typing import NamedTuple

from protocol import COLOR_MIN


class Color(NamedTuple):
    r: float
    g: float
    b: float

    def to_data(self):
        return {"r": self.r, "g": self.g, "b": self.b}


def new_identity() -> str:
    """Return a fresh 128-bit player id (UUID4 string; 122 of its bits are random)."""
    return str(uuid.uuid4())


def _channel() -> float:
    return COLOR_MIN + random.random() * (1.0 - COLOR_MIN)


def new_color() -> Color:
    return Color(_channel(), _channel(), _channel())
