from protocol import PacketType
from . import BasePacket, PacketError, require_int
from .registry import register_packet


@register_packet
class BlockChangePacket(BasePacket):
    packet_id = PacketType.BLOCK_CHANGE
    fields = ("face", "layer", "block")

    @classmethod
    def from_data(cls, data):
        missing = [name for name in cls.fields if name not in data]
        if missing:
            raise PacketError(f"{cls.packet_id} is missing {', '.join(missing)}")
        # block is opaque: any JSON value is relayed untouched
        return cls(
            face=require_int(data["face"], "face"),
            layer=require_int(data["layer"], "layer"),
            block=data["block"],
        )

    @classmethod
    def for_change(cls, change):
        return cls(**change.to_data())


@register_packet
class WorldStatePacket(BasePacket):
    packet_id = PacketType.WORLD_STATE
    fields = ("changes",)

    @classmethod
    def for_changes(cls, changes):
        return cls(changes=[change.to_data() for change in changes])
