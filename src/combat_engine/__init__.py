from src.combat_engine.build_generator import is_degenerate, random_build
from src.combat_engine.enemies import Enemy, EnemyVariant, catalog, lookup
from src.combat_engine.estimator import margin_of_error, survival_rate
from src.combat_engine.models import Build, SimulationResult
from src.combat_engine.simulator import (
    difficulty_label,
    enemies_for_difficulty,
    simulate_fight,
)

__all__ = [
    "Build",
    "Enemy",
    "EnemyVariant",
    "SimulationResult",
    "catalog",
    "difficulty_label",
    "enemies_for_difficulty",
    "is_degenerate",
    "lookup",
    "margin_of_error",
    "random_build",
    "simulate_fight",
    "survival_rate",
]
