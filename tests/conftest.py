"""Shared fixtures for the combat engine and ablation study test suites."""

import random

import pytest

from src.ablation_study.models import StudyConfig
from src.combat_engine.enemies import Enemy, EnemyVariant, lookup
from src.combat_engine.models import Build


# ------------------------------------------------------------------
# Random streams
# ------------------------------------------------------------------

@pytest.fixture
def rng():
    return random.Random(1234)


# ------------------------------------------------------------------
# Enemies and builds – cheap to construct, no simulation
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def zombie():
    return lookup(EnemyVariant.ZOMBIE)


@pytest.fixture(scope="module")
def training_dummy():
    """An enemy that can never hurt the player."""
    return Enemy(name="Dummy", base_health=10.0, base_damage=0.0)


@pytest.fixture(scope="module")
def full_budget_build():
    """H=9, D=7 spends exactly 9 + 21 = 30 points."""
    return Build(health=9, damage=7)


@pytest.fixture
def small_config():
    """A study small enough to run in well under a second."""
    return StudyConfig(build_samples=12, trials_per_build=10, seed=42)
