"""Random build generation under the 30-point rule."""

import random

from src.combat_engine.config import (
    ABILITY_LEFTOVER_THRESHOLD,
    DAMAGE_POINT_COST,
    HEALTH_POINT_COST,
    POINT_BUDGET,
)
from src.combat_engine.models import Build


def random_build(rng: random.Random) -> Build:
    """Draw a random valid build from *rng*.

    Health is allocated first (uniform 1-30), damage takes as many of the
    remaining points as a uniform draw allows (at least 1 whenever the
    remainder covers one damage point), and both abilities are rolled only
    when more than 10 points are still unspent.
    """
    health = rng.randint(1, POINT_BUDGET // HEALTH_POINT_COST)
    remaining = POINT_BUDGET - health * HEALTH_POINT_COST

    max_damage = remaining // DAMAGE_POINT_COST
    if max_damage <= 0:
        damage = 0
    else:
        damage = rng.randint(1, max_damage)

    leftover = remaining - damage * DAMAGE_POINT_COST
    if leftover > ABILITY_LEFTOVER_THRESHOLD:
        damage_dealer = rng.random() < 0.5
        evolution = rng.random() < 0.5
    else:
        damage_dealer = False
        evolution = False

    return Build(
        health=health,
        damage=damage,
        damage_dealer=damage_dealer,
        evolution=evolution,
    )


def is_degenerate(build: Build) -> bool:
    """A build without damage can never finish a fight."""
    return build.damage <= 0
