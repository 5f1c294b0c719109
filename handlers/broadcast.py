from websockets.asyncio.server import broadcast

from packet_factory import PacketFactory


class Broadcaster:
    """Serializes packets once and pushes them to registered connections.

    Writes go through websockets' broadcast(), which queues the frame on each
    connection synchronously: a client that stops reading grows its own write
    buffer but never stalls the caller. Connections that are not open are
    skipped and write failures are ignored; each connection's own handler
    does the teardown.
    """

    def __init__(self, registry):
        self.registry = registry

    def push(self, conn, packet):
        broadcast([conn], PacketFactory.build(packet))

    async def send_to(self, conn, packet):
        self.push(conn, packet)

    def targets_except(self, exclude_id):
        return [conn for conn, player in self.registry.connections() if player.id != exclude_id]

    def targets_all(self):
        return [conn for conn, _ in self.registry.connections()]

    async def fan_out(self, targets, packet):
        if targets:
            broadcast(targets, PacketFactory.build(packet))

    async def broadcast_except(self, packet, exclude_id):
        await self.fan_out(self.targets_except(exclude_id), packet)

    async def broadcast_all(self, packet):
        await self.fan_out(self.targets_all(), packet)
