from protocol import PacketType
from . import BasePacket
from .registry import register_packet


@register_packet
class InitPacket(BasePacket):
    """Handshake sent only to the connection that was just accepted."""
    packet_id = PacketType.INIT
    fields = ("id", "color")

    @classmethod
    def for_player(cls, player):
        return cls(id=player.id, color=player.color.to_data())


@register_packet
class PlayerJoinPacket(BasePacket):
    packet_id = PacketType.PLAYER_JOIN
    fields = ("id", "color", "position", "forward", "pitch")

    @classmethod
    def for_player(cls, player):
        return cls(**player.to_join_data())
