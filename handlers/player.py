from packets.other import PlayerLeavePacket
from packets.player_join import InitPacket, PlayerJoinPacket
from packets.player_move import PlayerMovePacket
from .world import world_state_packet


async def handle_player_join(server, websocket):
    """Register a new connection and bring it up to date.

    The new connection gets ``init``, one ``playerJoin`` per existing player
    and, if any block was edited, one ``worldState``. Everyone else is told
    about the new player.
    """
    broadcaster = server.broadcaster

    # Nothing below awaits until the replay and the announcement are queued, so
    # no broadcast can reach the new connection ahead of its handshake, and a
    # peer joining at the same moment is announced exactly once.
    player = server.players.register(websocket)
    peers = [p for p in server.players.snapshot() if p.id != player.id]
    world_packet = world_state_packet(server.world)

    print(f"[JOIN] Player {player.id} joined ({len(peers)} already online)")

    broadcaster.push(websocket, InitPacket.for_player(player))
    for peer in peers:
        broadcaster.push(websocket, PlayerJoinPacket.for_player(peer))
    if world_packet is not None:
        broadcaster.push(websocket, world_packet)

    await broadcaster.broadcast_except(PlayerJoinPacket.for_player(player), player.id)
    return player


async def handle_player_move(server, websocket, packet):
    player = server.players.update_motion(websocket, packet.position, packet.forward, packet.pitch)
    if player is None:
        if server.config.verbose:
            print("[WARN] Move packet from unregistered client")
        return

    if server.config.verbose:
        x, y, z = player.position
        print(f"[MOVE] Player {player.id} -> ({x:.2f}, {y:.2f}, {z:.2f}) pitch {player.pitch:.2f}")
    await server.broadcaster.broadcast_except(PlayerMovePacket.for_player(player), player.id)


async def handle_player_leave(server, websocket):
    """Drop the connection's player and tell everyone left.

    Safe to call more than once; only the call that actually removes the
    player sends ``playerLeave``.
    """
    player = server.players.unregister(websocket)
    if player is None:
        return None
    print(f"[LEAVE] Player {player.id} disconnected ({len(server.players)} online)")
    await server.broadcaster.broadcast_all(PlayerLeavePacket(id=player.id))
    return player
