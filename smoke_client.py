import asyncio
import json
import sys

from websockets.asyncio.client import connect

from protocol import DEFAULT_PORT, PacketType


async def send_packet(ws, p):
    await ws.send(json.dumps(p))
    await asyncio.sleep(0.05)


async def main(uri):
    async with connect(uri) as ws:
        print("CLIENT RECV:", await ws.recv())
        # Small move
        await send_packet(ws, {"type": PacketType.POSITION, "position": [1, 102, 1], "forward": [0, 0, -1]})
        # Dig a block
        await send_packet(ws, {"type": PacketType.BLOCK_CHANGE, "face": 0, "layer": 3, "block": "air"})
        # Unknown and broken messages must not drop the connection
        await send_packet(ws, {"type": "dance"})
        await ws.send("not json")

        try:
            while True:
                msg = await asyncio.wait_for(ws.recv(), timeout=1.0)
                print("CLIENT RECV:", msg)
        except asyncio.TimeoutError:
            pass
    print("client done")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else f"ws://127.0.0.1:{DEFAULT_PORT}"))
