# master_server.py
import asyncio

from websockets.asyncio.server import serve
from websockets.exceptions import ConnectionClosedError

from config import ServerConfig, config_from_args
from handlers import player as player_handlers
from handlers import world as world_handlers
from handlers.broadcast import Broadcaster
from packet_factory import PacketFactory
from packets import PacketError
from player_registry import PlayerRegistry
from protocol import PacketType
from static_files import start_static_server
from world_state import WorldDeltaStore

# Client -> server packets; every other decoded type is ignored
HANDLERS = {
    PacketType.BLOCK_CHANGE: world_handlers.handle_block_change,
    PacketType.POSITION: player_handlers.handle_player_move,
}


class MasterServer:
    def __init__(self, config=None, players=None, world=None):
        self.config = config or ServerConfig()
        self.players = players if players is not None else PlayerRegistry()
        self.world = world if world is not None else WorldDeltaStore(self.config.world_warn_size)
        self.broadcaster = Broadcaster(self.players)

    async def handle_client(self, websocket):
        """Run one connection from handshake to teardown."""
        addr = websocket.remote_address
        print(f"[CONNECT] {addr}")
        player = None
        try:
            player = await player_handlers.handle_player_join(self, websocket)
            async for message in websocket:
                await self.handle_message(websocket, message)
        except ConnectionClosedError as e:
            player_id = player.id if player else "unknown"
            print(f"[ERROR] WebSocket error for {player_id}: {e}")
        finally:
            # Runs on clean close, transport error and cancellation alike
            await player_handlers.handle_player_leave(self, websocket)
            print(f"[DISCONNECT] {addr}")

    async def handle_message(self, websocket, message):
        try:
            packet = PacketFactory.parse(message)
        except PacketError as e:
            print(f"[ERROR] Failed to process packet from {websocket.remote_address}: {e}")
            return

        if packet is None:
            if self.config.verbose:
                print(f"[WARN] Unknown packet type from {websocket.remote_address}")
            return

        handler = HANDLERS.get(packet.packet_id)
        if handler is None:
            if self.config.verbose:
                print(f"[WARN] Ignoring server-only packet {packet.packet_id} from {websocket.remote_address}")
            return
        await handler(self, websocket, packet)


async def main(argv=None):
    config = config_from_args(argv)
    server = MasterServer(config)

    if config.static_dir:
        start_static_server(config.static_dir, config.host, config.http_port)

    async with serve(server.handle_client, config.host, config.port):
        print(f"[SERVER] Running on ws://{config.host}:{config.port}")
        await asyncio.Future()  # Run forever


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n[SERVER] Stopped.")


if __name__ == "__main__":
    run()
