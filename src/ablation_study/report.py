"""Reporting for ablation study results: console lines, DataFrame and export."""

import json
import logging
from datetime import datetime, timezone
from itertools import groupby
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from src.ablation_study.config import EXPORT_VERSION, MARGIN_CONFIDENCE, RESULTS_DIR
from src.ablation_study.models import ScenarioResult, StudyConfig
from src.combat_engine.estimator import margin_of_error
from src.combat_engine.simulator import difficulty_label

logger = logging.getLogger(__name__)

SEPARATOR = "---"


def format_scenario_line(result: ScenarioResult) -> str:
    """One human-readable line: enemy stats, difficulty, OFF/ON and delta."""
    return (
        f"Enemy={result.enemy.name} "
        f"(H={result.enemy.base_health:.0f} D={result.enemy.base_damage:.0f}) | "
        f"Difficulty={difficulty_label(result.difficulty)} | "
        f"OFF={result.best_rate_off * 100.0:.2f}% | "
        f"ON={result.best_rate_on * 100.0:.2f}% | "
        f"Δ={result.delta * 100.0:.2f}%"
    )


def format_report(results: Sequence[ScenarioResult]) -> List[str]:
    """Scenario lines with a separator after each difficulty group."""
    lines: List[str] = []
    for _, group in groupby(results, key=lambda r: r.difficulty):
        lines.extend(format_scenario_line(result) for result in group)
        lines.append(SEPARATOR)
    return lines


def format_config_header(config: StudyConfig) -> str:
    return (
        f"Config: buildSamples={config.build_samples}, "
        f"trialsPerBuild={config.trials_per_build}, seed={config.seed}"
    )


def results_to_frame(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """One row per scenario, in report order."""
    rows = []
    for r in results:
        rows.append({
            "enemy": r.enemy.name,
            "enemy_health": r.enemy.base_health,
            "enemy_damage": r.enemy.base_damage,
            "difficulty": r.difficulty,
            "difficulty_label": difficulty_label(r.difficulty),
            "best_rate_off": r.best_rate_off,
            "best_rate_on": r.best_rate_on,
            "delta": r.delta,
            "margin_off": margin_of_error(
                r.best_rate_off, r.trials_per_build, MARGIN_CONFIDENCE
            ),
            "margin_on": margin_of_error(
                r.best_rate_on, r.trials_per_build, MARGIN_CONFIDENCE
            ),
            "best_build_off": str(r.best_build_off) if r.best_build_off else None,
            "best_build_on": str(r.best_build_on) if r.best_build_on else None,
            "builds_evaluated": r.builds_evaluated,
            "builds_skipped": r.builds_skipped,
        })
    return pd.DataFrame(rows)


def summarize_by_difficulty(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """Mean and max ability gain per difficulty level."""
    df = results_to_frame(results)
    if df.empty:
        return pd.DataFrame(columns=["difficulty", "mean_delta", "max_delta", "scenarios"])
    return (
        df.groupby("difficulty", sort=True)
        .agg(
            mean_delta=("delta", "mean"),
            max_delta=("delta", "max"),
            scenarios=("enemy", "count"),
        )
        .reset_index()
    )


def _scenario_to_dict(result: ScenarioResult) -> dict:
    return {
        "enemy": {
            "name": result.enemy.name,
            "base_health": result.enemy.base_health,
            "base_damage": result.enemy.base_damage,
        },
        "difficulty": result.difficulty,
        "difficulty_label": difficulty_label(result.difficulty),
        "best_rate_off": result.best_rate_off,
        "best_rate_on": result.best_rate_on,
        "delta": result.delta,
        "best_build_off": result.best_build_off.to_dict() if result.best_build_off else None,
        "best_build_on": result.best_build_on.to_dict() if result.best_build_on else None,
        "builds_evaluated": result.builds_evaluated,
        "builds_skipped": result.builds_skipped,
    }


def write_results(
    results: Sequence[ScenarioResult],
    config: StudyConfig,
    output_dir: Optional[Path] = None,
) -> Path:
    """Write results as JSON (plus a CSV table) and refresh the latest link.

    Args:
        results: Scenario results in report order.
        config: The configuration that produced *results*.
        output_dir: Target directory. Defaults to ``data/results/``.

    Returns:
        Path to the JSON file.
    """
    if output_dir is None:
        output_dir = RESULTS_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    output_data = {
        "metadata": {
            "version": EXPORT_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "build_samples": config.build_samples,
            "trials_per_build": config.trials_per_build,
            "seed": config.seed,
            "difficulties": sorted(config.difficulties),
            "enemies": [enemy.name for enemy in config.enemies],
            "total_scenarios": len(results),
        },
        "scenarios": [_scenario_to_dict(r) for r in results],
    }

    output_file = output_dir / f"ablation_seed{config.seed}.json"
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2, ensure_ascii=False)

    csv_file = output_file.with_suffix(".csv")
    results_to_frame(results).to_csv(csv_file, index=False)

    latest_link = output_dir / "ablation_latest.json"
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    logger.info("Wrote %d scenario results to %s", len(results), output_file)
    return output_file
