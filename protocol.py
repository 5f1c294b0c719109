class PacketType:
    # server -> client
    INIT = "init"
    PLAYER_JOIN = "playerJoin"
    WORLD_STATE = "worldState"
    PLAYER_MOVE = "playerMove"
    PLAYER_LEAVE = "playerLeave"
    # client -> server (BLOCK_CHANGE is also relayed back out)
    BLOCK_CHANGE = "blockChange"
    POSITION = "position"


DEFAULT_PORT = 8080

# Spawn state for every new player
SPAWN_POSITION = (0.0, 102.0, 0.0)
SPAWN_FORWARD = (0.0, 0.0, -1.0)
SPAWN_PITCH = 0.0

# Avatar color channels are drawn from [COLOR_MIN, 1.0) so avatars never come out near-black
COLOR_MIN = 0.3
