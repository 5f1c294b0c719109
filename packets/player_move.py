from protocol import PacketType
from . import BasePacket, PacketError, require_number, require_vector
from .registry import register_packet


@register_packet
class PositionPacket(BasePacket):
    packet_id = PacketType.POSITION
    fields = ("position", "forward")

    @classmethod
    def from_data(cls, data):
        missing = [name for name in cls.fields if name not in data]
        if missing:
            raise PacketError(f"{cls.packet_id} is missing {', '.join(missing)}")
        # absent, null and 0 all mean 0
        pitch = data.get("pitch") or 0
        return cls(
            position=require_vector(data["position"], "position"),
            forward=require_vector(data["forward"], "forward"),
            pitch=require_number(pitch, "pitch"),
        )


@register_packet
class PlayerMovePacket(BasePacket):
    packet_id = PacketType.PLAYER_MOVE
    fields = ("id", "position", "forward", "pitch")

    @classmethod
    def for_player(cls, player):
        return cls(
            id=player.id,
            position=list(player.position),
            forward=list(player.forward),
            pitch=player.pitch,
        )
