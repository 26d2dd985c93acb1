"""Tests for src.combat_engine.estimator."""

import random

import pytest

from src.combat_engine.enemies import Enemy
from src.combat_engine.estimator import margin_of_error, survival_rate
from src.combat_engine.models import Build


class TestSurvivalRate:
    @pytest.mark.parametrize("trials", [1, 7, 50, 200])
    def test_rate_is_multiple_of_one_over_n(self, zombie, trials):
        build = Build(health=15, damage=5)
        rate = survival_rate(random.Random(11), build, zombie, 2, trials, False)
        assert 0.0 <= rate <= 1.0
        survivals = rate * trials
        assert survivals == pytest.approx(round(survivals))

    @pytest.mark.parametrize("trials", [0, -5])
    def test_non_positive_trials_rejected(self, zombie, trials):
        with pytest.raises(ValueError, match="trials"):
            survival_rate(random.Random(1), Build(health=9, damage=7), zombie, 1, trials, False)

    def test_reproducible_for_same_seed(self, zombie):
        build = Build(health=12, damage=6)
        a = survival_rate(random.Random(3), build, zombie, 3, 300, False)
        b = survival_rate(random.Random(3), build, zombie, 3, 300, False)
        assert a == b

    def test_harmless_enemy_always_survived(self, full_budget_build, training_dummy):
        rate = survival_rate(
            random.Random(8), full_budget_build, training_dummy, 1, 200, False
        )
        assert rate == 1.0

    def test_non_trivial_enemy_gives_mixed_outcome(self, full_budget_build):
        """H=9, D=7 against a 10 HP / 1 dmg wave of three: mostly survives, not always."""
        enemy = Enemy(name="Grunt", base_health=10.0, base_damage=1.0)
        rate = survival_rate(random.Random(42), full_budget_build, enemy, 1, 200, False)
        assert 0.0 < rate < 1.0

    def test_harder_enemy_gives_rare_survival(self, full_budget_build):
        """Against 2 dmg enemies the build only lives through dodges or missed pre-attacks."""
        enemy = Enemy(name="Brute", base_health=10.0, base_damage=2.0)
        rate = survival_rate(random.Random(42), full_budget_build, enemy, 1, 200, False)
        assert 0.0 < rate < 0.2

    def test_zero_damage_build_never_survives(self, zombie):
        rate = survival_rate(random.Random(1), Build(health=30, damage=0), zombie, 1, 50, True)
        assert rate == 0.0

    def test_more_damage_does_not_lower_survival(self):
        """H=20 vs three 14 HP / 1 dmg enemies: roughly 3%, 30% and 100%."""
        enemy = Enemy(name="Tank", base_health=14.0, base_damage=1.0)
        rates = [
            survival_rate(random.Random(99), Build(health=20, damage=d), enemy, 1, 2000, False)
            for d in (1, 2, 3)
        ]
        assert rates[0] < rates[1] < rates[2]
        assert rates[2] == 1.0

    def test_abilities_help_eligible_build(self):
        """DamageDealer and Evolution both enabled should not make things worse."""
        enemy = Enemy(name="Brute", base_health=10.0, base_damage=2.0)
        build = Build(health=10, damage=2, damage_dealer=True, evolution=True)
        off = survival_rate(random.Random(5), build, enemy, 1, 3000, False)
        on = survival_rate(random.Random(5), build, enemy, 1, 3000, True)
        assert on >= off - 0.02

    def test_abilities_ignored_without_flags(self, zombie, full_budget_build):
        off = survival_rate(random.Random(21), full_budget_build, zombie, 2, 100, False)
        on = survival_rate(random.Random(21), full_budget_build, zombie, 2, 100, True)
        assert off == on


class TestMarginOfError:
    def test_half_rate_margin(self):
        # 1.96 * sqrt(0.25 / 100)
        assert margin_of_error(0.5, 100, 0.95) == pytest.approx(0.098, abs=1e-3)

    def test_certain_rate_has_no_margin(self):
        assert margin_of_error(1.0, 200) == 0.0
        assert margin_of_error(0.0, 200) == 0.0

    def test_shrinks_with_more_trials(self):
        assert margin_of_error(0.3, 1000) < margin_of_error(0.3, 100)

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            margin_of_error(0.5, 0)
        with pytest.raises(ValueError):
            margin_of_error(0.5, 100, confidence=1.0)
