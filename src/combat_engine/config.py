# Character point budget
POINT_BUDGET = 30
HEALTH_POINT_COST = 1  # 1 point = 1 HP
DAMAGE_POINT_COST = 3  # 3 points = 1 damage

# Abilities unlock only when more than this many points are left unspent
ABILITY_LEFTOVER_THRESHOLD = 10
ABILITY_BONUS = 0.10  # DamageDealer: +10% HP, Evolution: +10% damage

# Dodge roll: one draw in [0, DODGE_SIDES); a hit on the sentinel dodges
DODGE_SIDES = 9
DODGE_SENTINEL = 0

# Difficulty level -> number of enemies spawned in one encounter
ENEMIES_BY_DIFFICULTY = {
    1: 3,
    2: 5,
    3: 7,
    4: 10,
}

DIFFICULTY_LABELS = {
    1: "Easy",
    2: "Medium",
    3: "Hard",
    4: "Impossible",
}

# Enemy stats: (base_health, base_damage)
ENEMY_STATS = {
    "Zombie": (10.0, 3.0),     # fast, fragile
    "Vampire": (14.0, 5.0),    # hits hardest
    "BigSlime": (25.0, 2.0),   # soaks damage
}
