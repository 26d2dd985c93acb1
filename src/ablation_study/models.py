"""Data models for the ablation study."""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from src.ablation_study.config import (
    DEFAULT_BUILD_SAMPLES,
    DEFAULT_SEED,
    DEFAULT_TRIALS_PER_BUILD,
    DEFAULT_WORKERS,
    STUDY_DIFFICULTIES,
)
from src.combat_engine.config import ENEMIES_BY_DIFFICULTY
from src.combat_engine.enemies import Enemy, catalog
from src.combat_engine.models import Build


class ConfigurationError(ValueError):
    """Raised when study parameters are invalid. Nothing has been simulated."""

    pass


@dataclass(frozen=True)
class StudyConfig:
    """Parameters for one ablation study run."""

    build_samples: int = DEFAULT_BUILD_SAMPLES
    trials_per_build: int = DEFAULT_TRIALS_PER_BUILD
    seed: int = DEFAULT_SEED
    difficulties: Tuple[int, ...] = STUDY_DIFFICULTIES
    enemies: Tuple[Enemy, ...] = field(default_factory=lambda: tuple(catalog()))
    workers: int = DEFAULT_WORKERS

    def validate(self) -> "StudyConfig":
        """Check every parameter; return self so calls can be chained.

        Raises:
            ConfigurationError: On the first invalid parameter.
        """
        for name in ("build_samples", "trials_per_build", "seed", "workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.build_samples < 1:
            raise ConfigurationError(
                f"build_samples must be at least 1, got {self.build_samples}"
            )
        if self.trials_per_build < 1:
            raise ConfigurationError(
                f"trials_per_build must be at least 1, got {self.trials_per_build}"
            )
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if not self.difficulties:
            raise ConfigurationError("At least one difficulty is required")
        invalid = [d for d in self.difficulties if d not in ENEMIES_BY_DIFFICULTY]
        if invalid:
            raise ConfigurationError(
                f"Invalid difficulty {invalid}. "
                f"Must be one of: {sorted(ENEMIES_BY_DIFFICULTY)}"
            )
        if len(set(self.difficulties)) != len(self.difficulties):
            raise ConfigurationError(
                f"Difficulties must be unique, got {list(self.difficulties)}"
            )
        if not self.enemies:
            raise ConfigurationError("At least one enemy is required")
        names = [enemy.name for enemy in self.enemies]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"Enemy names must be unique, got {names}")
        return self

    @classmethod
    def from_values(
        cls,
        build_samples: int,
        trials_per_build: int,
        seed: int,
        difficulties: Sequence[int] = STUDY_DIFFICULTIES,
        enemies: Optional[Sequence[Enemy]] = None,
        workers: int = DEFAULT_WORKERS,
    ) -> "StudyConfig":
        return cls(
            build_samples=build_samples,
            trials_per_build=trials_per_build,
            seed=seed,
            difficulties=tuple(difficulties),
            enemies=tuple(catalog() if enemies is None else enemies),
            workers=workers,
        )


@dataclass(frozen=True)
class BestSoFar:
    """Running maxima of a scenario search.

    Rates start below any real rate so the first retained build always wins,
    and only a strictly greater rate replaces the current best.
    """

    rate_off: float = -1.0
    rate_on: float = -1.0
    build_off: Optional[Build] = None
    build_on: Optional[Build] = None
    evaluated: int = 0

    def update(self, build: Build, rate_off: float, rate_on: float) -> "BestSoFar":
        off_wins = rate_off > self.rate_off
        on_wins = rate_on > self.rate_on
        return BestSoFar(
            rate_off=rate_off if off_wins else self.rate_off,
            rate_on=rate_on if on_wins else self.rate_on,
            build_off=build if off_wins else self.build_off,
            build_on=build if on_wins else self.build_on,
            evaluated=self.evaluated + 1,
        )


@dataclass(frozen=True)
class ScenarioResult:
    """Best survival rates found for one (enemy, difficulty) scenario."""

    enemy: Enemy
    difficulty: int
    best_rate_off: float
    best_rate_on: float
    best_build_off: Optional[Build]
    best_build_on: Optional[Build]
    trials_per_build: int
    builds_evaluated: int
    builds_skipped: int

    @property
    def delta(self) -> float:
        """Gain from enabling abilities (on minus off, unrounded)."""
        return self.best_rate_on - self.best_rate_off
