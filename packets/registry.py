from typing import Dict, Type


_registry: Dict[str, Type] = {}


def register_packet(cls: Type):
    pid = getattr(cls, "packet_id", None)
    if pid is None:
        raise ValueError("packet class must define packet_id")
    if pid in _registry and _registry[pid] is not cls:
        raise ValueError(f"packet type {pid!r} registered twice")
    _registry[pid] = cls
    return cls
