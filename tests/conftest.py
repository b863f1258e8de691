"""Pytest helpers for the option_payoffs library."""

from __future__ import annotations

import numpy as np
import pytest

from option_payoffs.positive import Positive
from option_payoffs.scenario import PayoffInfo
from option_payoffs.types import OptionStyle, Side


@pytest.fixture
def make_info():
    """Factory fixture for constructing PayoffInfo scenarios from plain floats."""

    def _make(
        *,
        spot: float,
        strike: float = 100.0,
        style: OptionStyle = OptionStyle.CALL,
        side: Side = Side.LONG,
        spot_prices=None,
        spot_min: float | None = None,
        spot_max: float | None = None,
    ) -> PayoffInfo:
        return PayoffInfo(
            spot=Positive(spot),
            strike=Positive(strike),
            style=style,
            side=side,
            spot_prices=spot_prices,
            spot_min=spot_min,
            spot_max=spot_max,
        )

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng


@pytest.fixture
def gbm_paths(rng):
    """Lognormal sample paths, shape (n_paths, n_steps + 1), starting at S0."""

    def _paths(
        *,
        n_paths: int = 64,
        n_steps: int = 20,
        S0: float = 100.0,
        sigma: float = 0.2,
        T: float = 1.0,
        seed: int = 0,
    ) -> np.ndarray:
        dt = T / n_steps
        Z = rng(seed).standard_normal((n_paths, n_steps))
        log_incr = -0.5 * sigma**2 * dt + sigma * np.sqrt(dt) * Z
        log_paths = np.hstack([np.zeros((n_paths, 1)), np.cumsum(log_incr, axis=1)])
        return S0 * np.exp(log_paths)

    return _paths
