from packets.world_update import BlockChangePacket, WorldStatePacket


def world_state_packet(world):
    """Full replay of the block edits, or None while the world is untouched."""
    changes = world.snapshot_all()
    if not changes:
        return None
    return WorldStatePacket.for_changes(changes)


async def handle_block_change(server, websocket, packet):
    player = server.players.get(websocket)
    if player is None:
        if server.config.verbose:
            print("[WARN] Block change from unregistered client")
        return

    change = server.world.apply(packet.face, packet.layer, packet.block)
    print(f"[BLOCK] Player {player.id} set face {change.face} layer {change.layer} -> {change.block!r}")
    await server.broadcaster.broadcast_except(BlockChangePacket.for_change(change), player.id)
