"""Handlers package for packet logic.
Each module exposes async handler functions with signature:
    async def handle_xxx(server, websocket, packet)
except the connection lifecycle hooks in ``player``, which take no packet.
"""

__all__ = ["broadcast", "player", "world"]
