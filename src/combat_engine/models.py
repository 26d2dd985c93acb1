"""Data models for the combat engine."""

from dataclasses import dataclass

from src.combat_engine.config import (
    ABILITY_BONUS,
    ABILITY_LEFTOVER_THRESHOLD,
    DAMAGE_POINT_COST,
    HEALTH_POINT_COST,
    POINT_BUDGET,
)


@dataclass(frozen=True)
class Build:
    """A character build allocated under the 30-point system."""

    health: int
    damage: int
    damage_dealer: bool = False  # +10% HP when abilities are enabled
    evolution: bool = False  # +10% damage when abilities are enabled

    def __post_init__(self):
        for name in ("health", "damage"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not 1 <= self.health <= POINT_BUDGET:
            raise ValueError(
                f"health must be between 1 and {POINT_BUDGET}, got {self.health}"
            )
        if self.damage < 0:
            raise ValueError(f"damage cannot be negative, got {self.damage}")
        if self.points_spent > POINT_BUDGET:
            raise ValueError(
                f"Build H={self.health}, D={self.damage} spends "
                f"{self.points_spent} points (budget {POINT_BUDGET})"
            )
        if (self.damage_dealer or self.evolution) and not self.abilities_unlocked:
            raise ValueError(
                f"Abilities need more than {ABILITY_LEFTOVER_THRESHOLD} leftover "
                f"points, build has {self.leftover_points}"
            )

    @property
    def points_spent(self) -> int:
        return self.health * HEALTH_POINT_COST + self.damage * DAMAGE_POINT_COST

    @property
    def leftover_points(self) -> int:
        return POINT_BUDGET - self.points_spent

    @property
    def abilities_unlocked(self) -> bool:
        return self.leftover_points > ABILITY_LEFTOVER_THRESHOLD

    def effective_health(self, abilities_enabled: bool) -> float:
        """Health after the DamageDealer bonus, if it applies."""
        health = float(self.health)
        if abilities_enabled and self.damage_dealer:
            health += health * ABILITY_BONUS
        return health

    def effective_damage(self, abilities_enabled: bool) -> float:
        """Damage after the Evolution bonus, if it applies."""
        damage = float(self.damage)
        if abilities_enabled and self.evolution:
            damage += damage * ABILITY_BONUS
        return damage

    def to_dict(self) -> dict:
        return {
            "health": self.health,
            "damage": self.damage,
            "damage_dealer": self.damage_dealer,
            "evolution": self.evolution,
        }

    def __str__(self) -> str:
        return (
            f"H={self.health}, D={self.damage}, "
            f"DD={self.damage_dealer}, EVO={self.evolution}"
        )


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulated encounter."""

    survived: bool
    remaining_health: float  # 0 when the player did not survive
