"""Enemy catalog - fixed, read-only stat records for every enemy variant."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from src.combat_engine.config import ENEMY_STATS


@dataclass(frozen=True)
class Enemy:
    """Stat record for one enemy variant."""

    name: str
    base_health: float
    base_damage: float

    def __post_init__(self):
        if self.base_health <= 0:
            raise ValueError(
                f"Enemy {self.name!r} must have positive health, got {self.base_health}"
            )
        if self.base_damage < 0:
            raise ValueError(
                f"Enemy {self.name!r} cannot have negative damage, got {self.base_damage}"
            )


class EnemyVariant(Enum):
    """Closed set of enemy variants, in declaration order."""

    ZOMBIE = "Zombie"
    VAMPIRE = "Vampire"
    BIG_SLIME = "BigSlime"


_CATALOG = {
    variant: Enemy(variant.value, *ENEMY_STATS[variant.value])
    for variant in EnemyVariant
}


def lookup(variant: Union[EnemyVariant, str]) -> Enemy:
    """Return the enemy for *variant* (enum member or its name string).

    Raises:
        ValueError: If the variant is not part of the catalog.
    """
    if not isinstance(variant, EnemyVariant):
        try:
            variant = EnemyVariant(variant)
        except ValueError:
            valid = [v.value for v in EnemyVariant]
            raise ValueError(
                f"Unknown enemy variant {variant!r}. Must be one of: {valid}"
            ) from None
    return _CATALOG[variant]


def catalog() -> List[Enemy]:
    """All enemies in declaration order."""
    return [_CATALOG[variant] for variant in EnemyVariant]
