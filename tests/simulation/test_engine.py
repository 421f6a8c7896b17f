"""Tests for SimulationDriver trial execution."""

from __future__ import annotations

import logging

import pytest

from diffusion_search.config.types import DomainConfig, RunConfig, TerminationReason
from diffusion_search.rng.gaussian import GaussianSampler
from diffusion_search.rng.uniform import UniformEngine
from diffusion_search.simulation.engine import SimulationDriver
from diffusion_search.simulation.seeding import derive_seed

FAST_DOMAIN = DomainConfig(system_size=5.0, target_size=1.0, dimension=2, time_scale=0.05)


class TestReferenceRun:
    def test_reference_trial_is_absorbed(self) -> None:
        domain = DomainConfig(system_size=10.0, target_size=1.0, dimension=2, time_scale=1e-3)
        run = RunConfig(searcher_count=1, repeat_count=1, set_count=1, base_seed=1231423)
        result = SimulationDriver(domain, run).run_trial(0, 0)
        assert result.absorbed
        assert result.termination_reason == TerminationReason.ABSORBED.value
        assert result.search_time > 0.0
        assert result.steps > 0
        assert result.search_time == pytest.approx(result.steps * 1e-3)
        assert result.seed == derive_seed(1231423, 1, 0, 0, repeat_count=1)


class TestDeterminism:
    def test_same_trial_twice_is_identical(self) -> None:
        driver = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=3, set_count=1))
        assert driver.run_trial(0, 1) == driver.run_trial(0, 1)

    def test_trial_independent_of_history(self) -> None:
        run = RunConfig(repeat_count=3, set_count=2)
        warm = SimulationDriver(FAST_DOMAIN, run)
        warm.run_trial(0, 0)
        warm.run_trial(1, 2)
        fresh = SimulationDriver(FAST_DOMAIN, run)
        assert warm.run_trial(0, 1) == fresh.run_trial(0, 1)

    def test_separate_drivers_agree(self) -> None:
        run = RunConfig(repeat_count=4, set_count=2, base_seed=99)
        assert SimulationDriver(FAST_DOMAIN, run).run() == SimulationDriver(FAST_DOMAIN, run).run()

    def test_repeats_get_distinct_seeds(self) -> None:
        driver = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=5, set_count=2))
        seeds = [r.seed for r in driver.run()]
        assert len(set(seeds)) == len(seeds)


class TestBatchOrder:
    def test_run_yields_set_major_order(self) -> None:
        run = RunConfig(repeat_count=3, set_count=2)
        results = SimulationDriver(FAST_DOMAIN, run).run()
        assert [(r.set_index, r.repeat_index) for r in results] == [
            (0, 0),
            (0, 1),
            (0, 2),
            (1, 0),
            (1, 1),
            (1, 2),
        ]
        assert all(r.absorbed for r in results)

    def test_iter_set_only_covers_one_set(self) -> None:
        driver = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=4, set_count=3))
        results = list(driver.iter_set(2))
        assert len(results) == 4
        assert {r.set_index for r in results} == {2}

    def test_trial_seed_uses_repeat_count(self) -> None:
        run = RunConfig(repeat_count=100, set_count=10, base_seed=1231423)
        driver = SimulationDriver(FAST_DOMAIN, run)
        assert driver.trial_seed(0, 0) == 1236836 + 1300


class TestStepCap:
    def test_cap_stops_unabsorbed_trial(self, caplog: pytest.LogCaptureFixture) -> None:
        domain = DomainConfig(system_size=10.0, target_size=0.1, dimension=2, time_scale=1e-8)
        run = RunConfig(repeat_count=1, set_count=1, max_steps=3)
        with caplog.at_level(logging.WARNING, logger="diffusion_search.simulation.engine"):
            result = SimulationDriver(domain, run).run_trial(0, 0)
        assert not result.absorbed
        assert result.termination_reason == TerminationReason.STEP_CAP.value
        assert result.steps == 3
        assert result.search_time == pytest.approx(3e-8)
        assert "step cap" in caplog.text

    def test_cap_does_not_change_absorbed_trials(self) -> None:
        capped = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=2, max_steps=10_000_000))
        uncapped = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=2))
        assert capped.run_trial(0, 1) == uncapped.run_trial(0, 1)


class TestInjection:
    def test_injected_engine_is_used(self) -> None:
        engine = UniformEngine(1)
        driver = SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=1), engine=engine)
        assert driver.engine is engine
        assert driver.gaussian.engine is engine

    def test_gaussian_bound_to_other_engine_rejected(self) -> None:
        with pytest.raises(ValueError, match="driver's engine"):
            SimulationDriver(
                FAST_DOMAIN,
                RunConfig(repeat_count=1),
                engine=UniformEngine(1),
                gaussian=GaussianSampler(UniformEngine(2)),
            )


class TestSeedOverlap:
    def test_warns_when_sets_share_seeds(self, caplog: pytest.LogCaptureFixture) -> None:
        run = RunConfig(repeat_count=734, set_count=2)
        with caplog.at_level(logging.WARNING, logger="diffusion_search.simulation.engine"):
            driver = SimulationDriver(FAST_DOMAIN, run)
        assert driver.trial_seed(0, 733) == driver.trial_seed(1, 0)
        assert "share seeds" in caplog.text

    def test_no_warning_below_set_offset(self, caplog: pytest.LogCaptureFixture) -> None:
        run = RunConfig(repeat_count=733, set_count=2)
        with caplog.at_level(logging.WARNING, logger="diffusion_search.simulation.engine"):
            driver = SimulationDriver(FAST_DOMAIN, run)
        seeds = {
            driver.trial_seed(s, r) for s in range(run.set_count) for r in range(run.repeat_count)
        }
        assert len(seeds) == run.total_trials
        assert "share seeds" not in caplog.text

    def test_single_set_never_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="diffusion_search.simulation.engine"):
            SimulationDriver(FAST_DOMAIN, RunConfig(repeat_count=5_000, set_count=1))
        assert caplog.text == ""


def test_driver_raises_placement_budget_for_high_dimensions() -> None:
    domain = DomainConfig(dimension=10)
    driver = SimulationDriver(domain, RunConfig(repeat_count=1, max_rejection_tries=10))
    assert driver.walker.max_placement_tries == domain.min_placement_tries
    assert driver.step_sampler.max_tries == 10
