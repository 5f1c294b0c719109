import math
import numbers
from typing import Any, Dict, Optional, Tuple

from .registry import register_packet, _registry


class PacketError(ValueError):
    """Raised when an inbound message does not match its packet shape."""


class BasePacket:
    packet_id: str = None
    # keys that must be present in the raw message
    fields: Tuple[str, ...] = ()

    def __init__(self, **kwargs):
        self._data = dict(kwargs)

    @classmethod
    def from_data(cls, data: Dict[str, Any]):
        missing = [name for name in cls.fields if name not in data]
        if missing:
            raise PacketError(f"{cls.packet_id} is missing {', '.join(missing)}")
        return cls(**{name: data[name] for name in cls.fields})

    def to_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def to_message(self) -> Dict[str, Any]:
        # wire shape: the type tag sits beside the fields
        message = {"type": self.packet_id}
        message.update(self._data)
        return message

    def __getattr__(self, item):
        # __getattr__ can fire before _data exists (copy/pickle)
        data = self.__dict__.get("_data", {})
        if item in data:
            return data[item]
        raise AttributeError(item)

    def __eq__(self, other):
        return type(self) is type(other) and self._data == other._data

    def __repr__(self):
        return f"{type(self).__name__}({self._data!r})"


def parse_raw_packet(raw: Any) -> Optional[BasePacket]:
    """Decode a raw message dict into its packet class.

    Returns None for a ``type`` that is not registered; raises PacketError when
    the message is not an object or a known packet is missing/has bad fields.
    """
    if not isinstance(raw, dict):
        raise PacketError(f"expected a JSON object, got {type(raw).__name__}")
    cls = _registry.get(raw.get("type"))
    if cls is None:
        return None
    return cls.from_data(raw)


# Field validators shared by packet modules

def require_number(value, name) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise PacketError(f"{name} must be a number")
    try:
        value = float(value)
    except OverflowError:
        raise PacketError(f"{name} is out of range") from None
    if not math.isfinite(value):
        raise PacketError(f"{name} must be finite")
    return value


def require_int(value, name) -> int:
    if isinstance(value, bool):
        raise PacketError(f"{name} must be an integer")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise PacketError(f"{name} must be an integer")


def require_vector(value, name) -> Tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise PacketError(f"{name} must be a list of 3 numbers")
    return tuple(require_number(v, name) for v in value)


__all__ = [
    "BasePacket",
    "PacketError",
    "parse_raw_packet",
    "register_packet",
    "require_int",
    "require_number",
    "require_vector",
]

# Import concrete packet modules so they register themselves on package import.
# A new packet module has to be added here to become decodable.
from . import player_join  # noqa: F401,E402
from . import player_move  # noqa: F401,E402
from . import world_update as world_packets  # noqa: F401,E402
from . import other as other_packets  # noqa: F401,E402
