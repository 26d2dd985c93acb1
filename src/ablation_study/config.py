from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Output directory for exported study results
RESULTS_DIR = PROJECT_ROOT / "data" / "results"
EXPORT_VERSION = "1.0"

# Random build search defaults
DEFAULT_BUILD_SAMPLES = 2000
DEFAULT_TRIALS_PER_BUILD = 200
DEFAULT_SEED = 42

# Difficulties covered by a full study
STUDY_DIFFICULTIES = (1, 2, 3, 4)

# Scenario seed = seed + difficulty * stride + hash(enemy name)
SCENARIO_SEED_DIFFICULTY_STRIDE = 1000

# Scenario-level parallelism (1 = run in-process)
DEFAULT_WORKERS = 1

# Confidence level for the reported margin of error
MARGIN_CONFIDENCE = 0.95
