from protocol import PacketType
from . import BasePacket
from .registry import register_packet


@register_packet
class PlayerLeavePacket(BasePacket):
    packet_id = PacketType.PLAYER_LEAVE
    fields = ("id",)
