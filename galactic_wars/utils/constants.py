"""Game configuration constants."""

# Grid dimensions (valid coordinates are 1..20 inclusive)
GRID_SIZE = 20

# Lobby capacity
MAX_PLAYERS = 4
MIN_PLAYERS = 2

# Spawn corners, indexed by player id - 1
START_POSITIONS = [
    (1, 1),
    (20, 20),
    (20, 1),
    (1, 20),
]
FALLBACK_START_POSITION = (1, 1)

# Ship catalog: type name -> stats
SHIP_STATS = {
    "Scout": {"health": 1, "attack": 0, "range": 0, "speed": 3, "cost": 3, "ammo": 0, "fuel": 0},
    "Fighter": {"health": 2, "attack": 1, "range": 1, "speed": 2, "cost": 5, "ammo": 1, "fuel": 1},
    "Stinger": {"health": 1, "attack": 2, "range": 1, "speed": 3, "cost": 5, "ammo": 1, "fuel": 2},
    "Warrior": {"health": 3, "attack": 2, "range": 1, "speed": 2, "cost": 7, "ammo": 2, "fuel": 1},
    "Bulk": {"health": 5, "attack": 3, "range": 1, "speed": 1, "cost": 10, "ammo": 3, "fuel": 2},
    "BigBoss": {"health": 10, "attack": 5, "range": 2, "speed": 1, "cost": 20, "ammo": 5, "fuel": 3},
    "Mothership": {"health": 20, "attack": 10, "range": 3, "speed": 1, "cost": 30, "ammo": 10, "fuel": 5},
    "TITAN": {"health": 30, "attack": 15, "range": 5, "speed": 1, "cost": 50, "ammo": 15, "fuel": 15},
}

# Ship type that never burns fuel
FUEL_EXEMPT_TYPE = "Scout"

# Central planet (multi-square territory)
PLANET_NAME = "Planet Alpha"
PLANET_RANGE = (9, 12)  # Rows and columns, inclusive
PLANET_RESOURCES = {"materials": 5, "ammo": 5, "fuel": 5}

# Randomized sites
NUM_RECRUIT_SITES = 5
RECRUIT_SHIP_TYPE = "Warrior"
NUM_PICKUP_SITES = 5
PICKUP_RESOURCES = {"materials": 2, "ammo": 0, "fuel": 0}

# Recruit adjacency (Chebyshev distance)
RECRUIT_RADIUS = 1

# Combat
HIT_PROBABILITY = 0.5  # Coin flip
