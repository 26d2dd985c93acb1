"""Combat simulator - one stochastic encounter against a wave of enemies.

Each enemy in the wave gets a hidden pre-attack, a dodge roll, and then a
melee exchange in which the player always strikes first and the enemy strikes
back in the same tick unless the encounter was dodged.

Per enemy the random stream is consumed in a fixed order: one boolean draw
(pre-attack), then one integer draw (dodge). Changing that order changes
every downstream result for a given seed.
"""

import random

from src.combat_engine.config import (
    DIFFICULTY_LABELS,
    DODGE_SENTINEL,
    DODGE_SIDES,
    ENEMIES_BY_DIFFICULTY,
)
from src.combat_engine.enemies import Enemy
from src.combat_engine.models import SimulationResult

_LOSS = SimulationResult(survived=False, remaining_health=0.0)


def enemies_for_difficulty(difficulty: int) -> int:
    """Number of enemies spawned at *difficulty* (1-4)."""
    try:
        return ENEMIES_BY_DIFFICULTY[difficulty]
    except KeyError:
        raise ValueError(
            f"difficulty must be one of {sorted(ENEMIES_BY_DIFFICULTY)}, got {difficulty!r}"
        ) from None


def difficulty_label(difficulty: int) -> str:
    """Human-readable name for *difficulty*, e.g. ``"Hard"``."""
    enemies_for_difficulty(difficulty)
    return DIFFICULTY_LABELS[difficulty]


def simulate_fight(
    rng: random.Random,
    player_health: float,
    player_damage: float,
    enemy: Enemy,
    difficulty: int,
) -> SimulationResult:
    """Run one encounter and report whether the player survived.

    Args:
        rng: Random stream shared with the caller; draws are consumed in
            place.
        player_health: Effective starting health.
        player_damage: Effective damage per tick.
        enemy: Stats of every enemy in the wave.
        difficulty: Difficulty level (1-4), selects the wave size.

    Returns:
        :class:`SimulationResult`. A player that cannot deal damage loses
        immediately without touching *rng*.

    Raises:
        ValueError: If *difficulty* is not 1-4.
    """
    enemy_count = enemies_for_difficulty(difficulty)

    # Enemy health could never drop, so the melee loop would never end.
    if player_damage <= 0:
        return _LOSS

    health = player_health
    enemy_damage = enemy.base_damage

    for _ in range(enemy_count):
        # Hidden attack before the encounter starts
        if rng.random() < 0.5:
            health -= enemy_damage
            if health <= 0:
                return _LOSS

        # A dodge only cancels the enemy's blows; the player still attacks
        dodged = rng.randrange(DODGE_SIDES) == DODGE_SENTINEL

        enemy_health = enemy.base_health
        while enemy_health > 0 and health > 0:
            enemy_health -= player_damage
            # Simultaneous strike: the killing tick still hurts
            if not dodged:
                health -= enemy_damage
            if health <= 0:
                return _LOSS

    return SimulationResult(survived=True, remaining_health=health)
