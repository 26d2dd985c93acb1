from src.ablation_study.driver import (
    evaluate_scenario,
    run_ablation_study,
    run_study,
    scenario_seed,
    stable_name_hash,
    stream_seed,
)
from src.ablation_study.models import (
    BestSoFar,
    ConfigurationError,
    ScenarioResult,
    StudyConfig,
)

__all__ = [
    "BestSoFar",
    "ConfigurationError",
    "ScenarioResult",
    "StudyConfig",
    "evaluate_scenario",
    "run_ablation_study",
    "run_study",
    "scenario_seed",
    "stable_name_hash",
    "stream_seed",
]
