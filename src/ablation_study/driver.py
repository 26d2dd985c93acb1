"""Ablation search driver.

For every (difficulty, enemy) scenario, a random search over valid builds
finds the best survival rate with abilities disabled and the best with
abilities enabled. Each scenario owns one random stream seeded from the study
seed, the difficulty and the enemy name, so scenarios are independent of each
other and of the order (or process) they run in.

Within a scenario the stream is consumed strictly as: build draw, OFF trials,
ON trials, then the next build.
"""

import concurrent.futures
import logging
import random
from functools import reduce
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from src.ablation_study.config import SCENARIO_SEED_DIFFICULTY_STRIDE
from src.ablation_study.models import BestSoFar, ScenarioResult, StudyConfig
from src.combat_engine.build_generator import is_degenerate, random_build
from src.combat_engine.enemies import Enemy
from src.combat_engine.estimator import survival_rate
from src.combat_engine.models import Build
from src.combat_engine.simulator import difficulty_label

logger = logging.getLogger(__name__)


def stable_name_hash(name: str) -> int:
    """32-bit signed polynomial string hash (``h = 31*h + c``).

    Unlike :func:`hash`, the value does not change between interpreter runs.
    """
    h = 0
    for char in name:
        h = (31 * h + ord(char)) & 0xFFFFFFFF
    return h - (1 << 32) if h & 0x80000000 else h


def scenario_seed(seed_base: int, difficulty: int, enemy: Enemy) -> int:
    """Seed for the random stream of one scenario."""
    return (
        seed_base
        + difficulty * SCENARIO_SEED_DIFFICULTY_STRIDE
        + stable_name_hash(enemy.name)
    )


def stream_seed(seed: int) -> int:
    """Fold *seed* to an unsigned 64-bit value.

    ``random.Random`` seeds from ``abs(seed)``, so seeds that differ only in
    sign would otherwise share a stream.
    """
    return seed & 0xFFFFFFFFFFFFFFFF


def _evaluate_builds(
    rng: random.Random,
    enemy: Enemy,
    difficulty: int,
    build_samples: int,
    trials_per_build: int,
    skipped: List[Build],
) -> Iterator[Tuple[Build, float, float]]:
    """Yield ``(build, rate_off, rate_on)`` lazily, in stream order."""
    for _ in range(build_samples):
        build = random_build(rng)
        if is_degenerate(build):
            logger.debug("Skipping degenerate build (%s)", build)
            skipped.append(build)
            continue

        rate_off = survival_rate(
            rng, build, enemy, difficulty, trials_per_build, abilities_enabled=False
        )
        rate_on = survival_rate(
            rng, build, enemy, difficulty, trials_per_build, abilities_enabled=True
        )
        yield build, rate_off, rate_on


def evaluate_scenario(
    enemy: Enemy,
    difficulty: int,
    build_samples: int,
    trials_per_build: int,
    seed_base: int,
) -> ScenarioResult:
    """Search *build_samples* random builds for one scenario.

    Returns:
        :class:`ScenarioResult` with the best OFF/ON rates and the first
        builds that reached them. When every sampled build was degenerate
        the rates are 0.0 and no builds are recorded.
    """
    rng = random.Random(stream_seed(scenario_seed(seed_base, difficulty, enemy)))
    skipped: List[Build] = []

    best = reduce(
        lambda acc, item: acc.update(*item),
        _evaluate_builds(
            rng, enemy, difficulty, build_samples, trials_per_build, skipped
        ),
        BestSoFar(),
    )

    if best.evaluated == 0:
        logger.warning(
            "No usable build among %d samples for %s at difficulty %d",
            build_samples, enemy.name, difficulty,
        )

    result = ScenarioResult(
        enemy=enemy,
        difficulty=difficulty,
        best_rate_off=max(best.rate_off, 0.0),
        best_rate_on=max(best.rate_on, 0.0),
        best_build_off=best.build_off,
        best_build_on=best.build_on,
        trials_per_build=trials_per_build,
        builds_evaluated=best.evaluated,
        builds_skipped=len(skipped),
    )

    logger.info(
        "Scenario %s/%s: OFF=%.4f ON=%.4f (%d builds, %d skipped)",
        enemy.name, difficulty_label(difficulty),
        result.best_rate_off, result.best_rate_on,
        result.builds_evaluated, result.builds_skipped,
    )
    return result


def run_ablation_study(
    enemies: Sequence[Enemy],
    difficulties: Sequence[int],
    build_samples: int,
    trials_per_build: int,
    seed_base: int,
    workers: int = 1,
) -> List[ScenarioResult]:
    """Evaluate every (difficulty, enemy) scenario.

    Args:
        enemies: Enemies in declaration order.
        difficulties: Difficulty levels, evaluated in ascending order.
        build_samples: Random builds drawn per scenario.
        trials_per_build: Simulated fights per build and ability state.
        seed_base: Study seed every scenario seed is derived from.
        workers: Worker processes; ``1`` runs everything in-process.

    Returns:
        One :class:`ScenarioResult` per scenario, difficulty ascending then
        enemy declaration order, regardless of *workers*.

    Raises:
        ConfigurationError: If any parameter is invalid. Raised before any
            simulation runs.
    """
    config = StudyConfig.from_values(
        build_samples=build_samples,
        trials_per_build=trials_per_build,
        seed=seed_base,
        difficulties=difficulties,
        enemies=enemies,
        workers=workers,
    )
    return run_study(config)


def run_study(config: StudyConfig) -> List[ScenarioResult]:
    """Validate *config* and evaluate all of its scenarios."""
    config.validate()

    scenarios = [
        (enemy, difficulty)
        for difficulty in sorted(config.difficulties)
        for enemy in config.enemies
    ]
    logger.info(
        "Running %d scenarios (build_samples=%d, trials_per_build=%d, seed=%d, workers=%d)",
        len(scenarios), config.build_samples, config.trials_per_build,
        config.seed, config.workers,
    )

    if config.workers < 2 or len(scenarios) < 2:
        return [
            evaluate_scenario(
                enemy, difficulty,
                config.build_samples, config.trials_per_build, config.seed,
            )
            for enemy, difficulty in scenarios
        ]

    return _run_parallel(scenarios, config)


def _run_parallel(
    scenarios: List[Tuple[Enemy, int]],
    config: StudyConfig,
) -> List[ScenarioResult]:
    results: List[Optional[ScenarioResult]] = [None] * len(scenarios)
    workers = min(config.workers, len(scenarios))

    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        futures: Dict[concurrent.futures.Future, int] = {}
        for idx, (enemy, difficulty) in enumerate(scenarios):
            future = executor.submit(
                evaluate_scenario,
                enemy, difficulty,
                config.build_samples, config.trials_per_build, config.seed,
            )
            futures[future] = idx

        for completed, future in enumerate(
            concurrent.futures.as_completed(futures), start=1
        ):
            results[futures[future]] = future.result()
            logger.debug("Finished %d/%d scenarios", completed, len(scenarios))

    return results
