# constants.py - Static game data for the hex board simulation

RESOURCES = ["wood", "brick", "sheep", "wheat", "ore"]

TERRAIN_RESOURCE = {
    "forest": "wood",
    "hills": "brick",
    "pasture": "sheep",
    "fields": "wheat",
    "mountains": "ore",
    "desert": None,
}

# Fixed beginner layout, indexed by tile id (centre, ring 1, ring 2).
TILE_TERRAINS = [
    "forest", "fields", "hills", "mountains", "pasture", "pasture", "pasture",
    "fields", "mountains", "forest", "mountains", "fields", "forest", "hills",
    "hills", "fields", "desert", "forest", "pasture",
]

TILE_NUMBERS = [
    10, 11, 8, 3, 11, 5, 12,
    3, 6, 4, 6, 9, 5, 9,
    8, 4, None, 2, 10,
]

BANK_START_COUNT = 19

ROAD_COST       = {"wood": 1, "brick": 1}
SETTLEMENT_COST = {"wood": 1, "brick": 1, "sheep": 1, "wheat": 1}
CITY_COST       = {"wheat": 2, "ore": 3}

PLAYER_COLORS = ["orange", "white", "red", "blue"]

ROBBER_ROLL = 7
HAND_LIMIT = 7
VICTORY_POINTS_TO_WIN = 10

DEFAULT_MAX_ROUNDS = 25
MAX_ROUNDS_LIMIT = 8192
DEFAULT_SEED = 42

BOARD_RADIUS = 2
HEX_SIZE = 10.0
TILE_COUNT = 19
NODE_COUNT = 54
EDGE_COUNT = 72
