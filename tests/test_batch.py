from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from option_payoffs import payoff
from option_payoffs.batch import PathPayoff, discounted_mean, payoff_many, payoff_paths
from option_payoffs.contracts import Asian, Barrier, European, Lookback
from option_payoffs.scenario import PayoffInfo
from option_payoffs.types import (
    AsianAveragingType,
    BarrierType,
    LookbackType,
    OptionStyle,
)

CONTRACTS = [
    European(),
    Asian(AsianAveragingType.ARITHMETIC),
    Asian(AsianAveragingType.GEOMETRIC),
    Barrier(BarrierType.UP_AND_OUT, barrier_level=115.0, rebate=1.0),
    Barrier(BarrierType.DOWN_AND_IN, barrier_level=90.0),
    Lookback(LookbackType.FLOATING_STRIKE),
]


def test_payoff_many_matches_scalar_engine(make_info):
    infos = [make_info(spot=s, strike=100.0) for s in (80.0, 100.0, 120.0)]
    out = payoff_many(European(), infos)
    assert out.dtype == np.float64
    np.testing.assert_array_equal(out, [0.0, 0.0, 20.0])


def test_payoff_many_accepts_generators(make_info):
    out = payoff_many(European(), (make_info(spot=s) for s in (101.0, 102.0)))
    np.testing.assert_array_equal(out, [1.0, 2.0])


def test_payoff_many_empty():
    assert payoff_many(European(), []).shape == (0,)


@pytest.mark.parametrize("contract", CONTRACTS, ids=lambda c: repr(c))
@pytest.mark.parametrize("style", [OptionStyle.CALL, OptionStyle.PUT])
def test_payoff_paths_matches_row_by_row(gbm_paths, contract, style):
    paths = gbm_paths(n_paths=32, n_steps=12, seed=5)
    out = payoff_paths(contract, paths, strike=100.0, style=style)
    assert out.shape == (32,)

    for row, value in zip(paths, out, strict=True):
        info = PayoffInfo.from_path(row, strike=100.0, style=style)
        assert value == payoff(contract, info)


def test_payoff_paths_single_path():
    out = payoff_paths(European(), [100.0, 105.0, 112.0], strike=100.0)
    np.testing.assert_array_equal(out, [12.0])


def test_payoff_paths_uses_path_extrema():
    paths = np.array(
        [
            [100.0, 120.0, 105.0],  # touched 115
            [100.0, 110.0, 105.0],  # did not
        ]
    )
    contract = Barrier(BarrierType.UP_AND_OUT, barrier_level=115.0, rebate=1.0)
    np.testing.assert_array_equal(
        payoff_paths(contract, paths, strike=100.0), [1.0, 5.0]
    )


@pytest.mark.parametrize(
    "paths", [np.zeros((2, 3, 4)), np.zeros((3, 0))], ids=["3d", "no-steps"]
)
def test_payoff_paths_rejects_bad_shapes(paths):
    with pytest.raises(ValueError):
        payoff_paths(European(), paths, strike=100.0)


def test_path_payoff_callable(gbm_paths):
    paths = gbm_paths(seed=11)
    fn = PathPayoff(Asian(), strike=100.0, style=OptionStyle.PUT)
    np.testing.assert_array_equal(
        fn(paths), payoff_paths(Asian(), paths, strike=100.0, style=OptionStyle.PUT)
    )


def test_path_payoff_rejects_negative_strike():
    with pytest.raises(ValueError):
        PathPayoff(European(), strike=-1.0)


def test_concurrent_evaluation_matches_serial(gbm_paths):
    paths = gbm_paths(n_paths=200, seed=2)
    contract = Asian(AsianAveragingType.GEOMETRIC)
    serial = payoff_paths(contract, paths, strike=100.0)

    chunks = np.array_split(paths, 4)
    with ThreadPoolExecutor(max_workers=4) as pool:
        parts = list(
            pool.map(lambda c: payoff_paths(contract, c, strike=100.0), chunks)
        )
    np.testing.assert_array_equal(np.concatenate(parts), serial)


def test_discounted_mean():
    mean, se = discounted_mean([1.0, 2.0, 3.0, 4.0], df=0.5)
    assert mean == pytest.approx(1.25)
    assert se == pytest.approx(0.5 * np.std([1, 2, 3, 4], ddof=1) / 2.0)


def test_discounted_mean_single_sample():
    assert discounted_mean([3.0]) == (3.0, 0.0)


def test_discounted_mean_validation():
    with pytest.raises(ValueError):
        discounted_mean([])
    with pytest.raises(ValueError):
        discounted_mean([1.0], df=-0.1)


def test_asian_call_mean_on_driftless_paths_is_below_european(gbm_paths):
    """Averaging lowers variance, so the Asian call is worth less on average."""
    paths = gbm_paths(n_paths=4_000, n_steps=50, sigma=0.3, seed=7)
    euro, se_e = discounted_mean(payoff_paths(European(), paths, strike=100.0))
    asian, se_a = discounted_mean(payoff_paths(Asian(), paths, strike=100.0))
    assert asian < euro
    assert math.isfinite(se_e) and math.isfinite(se_a)


def test_payoff_many_warns_on_missing_path_history(make_info, caplog):
    infos = [
        make_info(spot=110.0, spot_prices=[100.0, 110.0]),
        make_info(spot=110.0),
        make_info(spot=120.0, spot_prices=[]),
    ]
    with caplog.at_level(logging.WARNING, logger="option_payoffs.batch"):
        out = payoff_many(Asian(AsianAveragingType.ARITHMETIC), infos)
    np.testing.assert_allclose(out, [5.0, 0.0, 0.0])
    records = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(records) == 1
    assert "2 of 3 scenarios" in records[0].getMessage()


def test_payoff_many_no_warning_for_path_independent(make_info, caplog):
    infos = [make_info(spot=110.0), make_info(spot=90.0)]
    with caplog.at_level(logging.WARNING, logger="option_payoffs.batch"):
        out = payoff_many(European(), infos)
    np.testing.assert_allclose(out, [10.0, 0.0])
    assert not [r for r in caplog.records if r.levelno == logging.WARNING]
