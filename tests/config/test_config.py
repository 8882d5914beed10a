"""Tests for `idxgraph.config`."""

from idxgraph.config import SOLVER_CONFIG, SolverConfig


def test_defaults() -> None:
    config = SolverConfig()
    assert config.skip_stale_entries is True
    assert config.slow_solve_seconds == 1.0


def test_global_instance_uses_defaults() -> None:
    assert SOLVER_CONFIG == SolverConfig()


def test_is_slow_threshold() -> None:
    config = SolverConfig(slow_solve_seconds=0.5)
    assert not config.is_slow(0.1)
    assert config.is_slow(0.5)
    assert config.is_slow(2.0)
