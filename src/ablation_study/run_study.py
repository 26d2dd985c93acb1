"""Run the full ability ablation study.

Usage:
    python -m src.ablation_study.run_study [build_samples] [trials_per_build] [seed] [output_dir]

Examples:
    python -m src.ablation_study.run_study
    python -m src.ablation_study.run_study 500 100 7
    python -m src.ablation_study.run_study 2000 200 42 data/results
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from src.ablation_study.config import (
    DEFAULT_BUILD_SAMPLES,
    DEFAULT_SEED,
    DEFAULT_TRIALS_PER_BUILD,
)
from src.ablation_study.driver import run_study
from src.ablation_study.models import ConfigurationError, ScenarioResult, StudyConfig
from src.ablation_study.report import (
    format_config_header,
    format_report,
    write_results,
)
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def parse_args(argv: Sequence[str]) -> Tuple[StudyConfig, Optional[Path]]:
    """Build a validated :class:`StudyConfig` from positional arguments."""
    if len(argv) > 4:
        raise ConfigurationError(
            "Usage: run_study [build_samples] [trials_per_build] [seed] [output_dir]"
        )

    build_samples = _parse_int(argv[0], "build_samples") if len(argv) > 0 else DEFAULT_BUILD_SAMPLES
    trials = _parse_int(argv[1], "trials_per_build") if len(argv) > 1 else DEFAULT_TRIALS_PER_BUILD
    seed = _parse_int(argv[2], "seed") if len(argv) > 2 else DEFAULT_SEED
    output_dir = Path(argv[3]) if len(argv) > 3 else None

    config = StudyConfig(
        build_samples=build_samples,
        trials_per_build=trials,
        seed=seed,
    )
    return config.validate(), output_dir


def run(
    config: StudyConfig,
    output_dir: Optional[Path] = None,
) -> List[ScenarioResult]:
    """Run the study, print the report and optionally export it."""
    print("Analysis Started")
    print(format_config_header(config))
    print()

    results = run_study(config)

    for line in format_report(results):
        print(line)

    if output_dir is not None:
        output = write_results(results, config, output_dir)
        print(f"Results written: {output}")

    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config, output_dir = parse_args(argv)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        run(config, output_dir)
    except Exception:
        logger.exception("Ablation study failed")
        return 1
    return 0


def cli() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    cli()
