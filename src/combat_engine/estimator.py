"""Survival-rate estimation by repeated simulation."""

import math
import random
import statistics

from src.combat_engine.enemies import Enemy
from src.combat_engine.models import Build
from src.combat_engine.simulator import simulate_fight


def survival_rate(
    rng: random.Random,
    build: Build,
    enemy: Enemy,
    difficulty: int,
    trials: int,
    abilities_enabled: bool,
) -> float:
    """Fraction of *trials* simulated fights the build survives.

    Effective stats are derived from *build* on every call, so the same build
    can be measured with abilities on and off against one stream.

    Returns:
        Survivals divided by *trials*, always a multiple of ``1 / trials``.

    Raises:
        ValueError: If *trials* is less than 1.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    health = build.effective_health(abilities_enabled)
    damage = build.effective_damage(abilities_enabled)

    survived = 0
    for _ in range(trials):
        if simulate_fight(rng, health, damage, enemy, difficulty).survived:
            survived += 1

    return survived / trials


def margin_of_error(rate: float, trials: int, confidence: float = 0.95) -> float:
    """Half-width of the normal-approximation CI for a binomial *rate*."""
    if trials <= 0:
        raise ValueError("trials must be positive.")
    if not 0 < confidence < 1:
        raise ValueError("confidence must be between 0 and 1.")
    rate = min(max(rate, 0.0), 1.0)
    z = statistics.NormalDist().inv_cdf(1 - (1 - confidence) / 2)
    return z * math.sqrt(rate * (1 - rate) / trials)
