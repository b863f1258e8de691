"""Payoff engine.

:func:`payoff` maps a contract variant and a scenario snapshot to a single
payoff amount. It is a pure function: no state, no I/O, and with the default
configuration it never raises for well-formed inputs. Missing path data
resolves to a payoff of ``0.0``; callers that need to tell "worth nothing"
apart from "could not be evaluated" should check
:attr:`PayoffInfo.has_path <option_payoffs.scenario.PayoffInfo.has_path>`
first, or use :attr:`MissingDataPolicy.RAISE
<option_payoffs.config.MissingDataPolicy.RAISE>`.

Arithmetic on :class:`~option_payoffs.positive.Positive` values is done in
plain floats wherever a difference can go negative; results are only wrapped
back into :class:`Positive` after they have been floored at zero.
"""

from __future__ import annotations

import logging
import math
import warnings
from collections.abc import Sequence
from typing import assert_never

from scipy.stats import gmean

from .config import DEFAULT_CONFIG, MissingDataPolicy, PayoffConfig
from .contracts import (
    American,
    Asian,
    Barrier,
    Bermuda,
    Binary,
    Chooser,
    Cliquet,
    Compound,
    European,
    Exchange,
    Lookback,
    OptionType,
    Power,
    Quanto,
    Rainbow,
    Spread,
)
from .exceptions import MissingPathDataError
from .positive import Positive
from .scenario import PayoffInfo
from .types import (
    AsianAveragingType,
    BarrierType,
    BinaryType,
    LookbackType,
    OptionStyle,
)

logger = logging.getLogger(__name__)


def payoff(
    contract: OptionType,
    info: PayoffInfo,
    *,
    cfg: PayoffConfig | None = None,
) -> float:
    """Payoff of ``contract`` in the scenario ``info``.

    Parameters
    ----------
    contract
        Any :data:`~option_payoffs.contracts.OptionType` variant.
    info
        Market snapshot (spot, strike, style, optional path statistics).
    cfg
        Engine configuration. Defaults to
        :data:`~option_payoffs.config.DEFAULT_CONFIG`.

    Returns
    -------
    float
        The payoff amount. Floating-strike lookbacks are not floored and may
        return a negative number when the supplied extremum is inconsistent
        with the spot.
    """
    cfg = DEFAULT_CONFIG if cfg is None else cfg

    match contract:
        case European() | American() | Bermuda():
            return standard_payoff(info)
        case Asian(averaging_type=averaging_type):
            return calculate_asian_payoff(averaging_type, info, cfg=cfg)
        case Barrier(barrier_type=barrier_type, barrier_level=level, rebate=rebate):
            return calculate_barrier_payoff(barrier_type, level, rebate, info)
        case Binary(binary_type=binary_type):
            return calculate_binary_payoff(binary_type, info, cfg=cfg)
        case Lookback(lookback_type=lookback_type):
            if lookback_type is LookbackType.FIXED_STRIKE:
                return standard_payoff(info)
            return calculate_floating_strike_payoff(info)
        case Compound(underlying_option=underlying):
            return payoff(underlying, info, cfg=cfg)
        case Chooser():
            return intrinsic_call(info).max(intrinsic_put(info)).to_float()
        case Cliquet():
            # reset dates not applied: PayoffInfo carries no reset levels
            return standard_payoff(info)
        case Rainbow() | Spread() | Exchange():
            return standard_payoff(info)
        case Quanto(exchange_rate=exchange_rate):
            return standard_payoff(info) * exchange_rate
        case Power(exponent=exponent):
            return calculate_power_payoff(exponent, info)
        case _:
            assert_never(contract)


# ---------------------------
# Intrinsic value
# ---------------------------


def intrinsic_call(info: PayoffInfo) -> Positive:
    """``max(spot - strike, 0)``."""
    return Positive.clamp(info.spot - info.strike)


def intrinsic_put(info: PayoffInfo) -> Positive:
    """``max(strike - spot, 0)``."""
    return Positive.clamp(info.strike - info.spot)


def standard_payoff(info: PayoffInfo) -> float:
    """Intrinsic value of a call or put at the scenario spot."""
    if info.style is OptionStyle.CALL:
        return intrinsic_call(info).to_float()
    return intrinsic_put(info).to_float()


def _intrinsic_against(underlying: float, info: PayoffInfo) -> float:
    # underlying replaces the spot, e.g. a path average or spot**exponent
    if info.style is OptionStyle.CALL:
        return Positive.clamp(underlying - info.strike).to_float()
    return Positive.clamp(info.strike - underlying).to_float()


# ---------------------------
# Asian
# ---------------------------


def _geometric_mean(prices: Sequence[float], cfg: PayoffConfig) -> float:
    n = len(prices)
    if n < cfg.log_space_min_length:
        product = math.prod(prices)
        underflow = product == 0.0 and all(p > 0.0 for p in prices)
        if math.isfinite(product) and not underflow:
            return product ** (1.0 / n)
    if any(p == 0.0 for p in prices):
        return 0.0
    logger.debug("Geometric mean of %d prices computed in log space", n)
    return float(gmean(prices))


def average_spot(
    prices: Sequence[float],
    averaging_type: AsianAveragingType,
    *,
    cfg: PayoffConfig | None = None,
) -> float | None:
    """Average of a sampled path, or ``None`` if the path is empty.

    Arithmetic averaging is ``sum / n``. Geometric averaging is the n-th root
    of the product; long paths (see
    :attr:`PayoffConfig.log_space_min_length`), and products that overflow or
    underflow, are averaged in log space instead.
    """
    cfg = DEFAULT_CONFIG if cfg is None else cfg
    n = len(prices)
    if n == 0:
        return None
    if averaging_type is AsianAveragingType.ARITHMETIC:
        return sum(prices) / n
    if averaging_type is AsianAveragingType.GEOMETRIC:
        return _geometric_mean(prices, cfg)
    assert_never(averaging_type)


def calculate_asian_payoff(
    averaging_type: AsianAveragingType,
    info: PayoffInfo,
    *,
    cfg: PayoffConfig | None = None,
) -> float:
    """Intrinsic value with the path average in place of the spot.

    An absent or empty path gives ``0.0`` (or raises
    :class:`~option_payoffs.exceptions.MissingPathDataError` under
    :attr:`MissingDataPolicy.RAISE`).
    """
    cfg = DEFAULT_CONFIG if cfg is None else cfg
    average = None
    if info.spot_prices is not None:
        average = average_spot(info.spot_prices, averaging_type, cfg=cfg)

    if average is None:
        if cfg.missing_path is MissingDataPolicy.RAISE:
            raise MissingPathDataError(
                "Asian payoff needs at least one path price (spot_prices is "
                f"{'empty' if info.spot_prices is not None else 'missing'})"
            )
        logger.debug("Asian payoff without path history; returning 0.0")
        return 0.0

    return _intrinsic_against(average, info)


# ---------------------------
# Barrier
# ---------------------------


def barrier_triggered(
    barrier_type: BarrierType, barrier_level: float, info: PayoffInfo
) -> bool:
    """Whether the barrier level was touched.

    Up barriers compare the observed maximum, down barriers the observed
    minimum; without path statistics the current spot stands in for both.
    Touching the level counts as crossing it.
    """
    if barrier_type.is_up:
        return info.observed_max() >= barrier_level
    return info.observed_min() <= barrier_level


def calculate_barrier_payoff(
    barrier_type: BarrierType,
    barrier_level: float,
    rebate: float | None,
    info: PayoffInfo,
) -> float:
    """Knock-in / knock-out payoff.

    ========  ===================  ====================
    type      barrier touched      not touched
    ========  ===================  ====================
    in        standard payoff      0.0
    out       rebate (or 0.0)      standard payoff
    ========  ===================  ====================
    """
    triggered = barrier_triggered(barrier_type, barrier_level, info)
    match barrier_type:
        case BarrierType.UP_AND_IN | BarrierType.DOWN_AND_IN:
            return standard_payoff(info) if triggered else 0.0
        case BarrierType.UP_AND_OUT | BarrierType.DOWN_AND_OUT:
            if triggered:
                return 0.0 if rebate is None else rebate
            return standard_payoff(info)
        case _:
            assert_never(barrier_type)


# ---------------------------
# Binary
# ---------------------------


def is_in_the_money(info: PayoffInfo) -> bool:
    """Strict ITM test: ``spot > strike`` for calls, ``spot < strike`` for puts."""
    if info.style is OptionStyle.CALL:
        return info.spot > info.strike
    return info.spot < info.strike


def calculate_binary_payoff(
    binary_type: BinaryType,
    info: PayoffInfo,
    *,
    cfg: PayoffConfig | None = None,
) -> float:
    """Digital payoff: all or nothing, nothing at the money.

    - cash-or-nothing pays :attr:`PayoffConfig.cash_payout` (1.0 by default)
    - asset-or-nothing pays the spot
    - gap pays ``|spot - strike|``
    """
    cfg = DEFAULT_CONFIG if cfg is None else cfg
    if not is_in_the_money(info):
        return 0.0
    match binary_type:
        case BinaryType.CASH_OR_NOTHING:
            return cfg.cash_payout
        case BinaryType.ASSET_OR_NOTHING:
            return info.spot.to_float()
        case BinaryType.GAP:
            return abs(info.spot - info.strike)
        case _:
            assert_never(binary_type)


# ---------------------------
# Lookback
# ---------------------------


def calculate_floating_strike_payoff(info: PayoffInfo) -> float:
    """Floating-strike lookback payoff.

    Call: ``spot - spot_min``; put: ``spot_max - spot``. A missing extremum is
    taken as ``0.0`` (not the spot), and the result is not floored at zero.
    """
    spot = info.spot.to_float()
    if info.style is OptionStyle.CALL:
        return spot - (0.0 if info.spot_min is None else info.spot_min)
    return (0.0 if info.spot_max is None else info.spot_max) - spot


# ---------------------------
# Power
# ---------------------------


def _power(base: float, exponent: float) -> float:
    if base == 0.0 and exponent < 0.0:
        warnings.warn(
            "0 raised to a negative exponent; treating spot**exponent as +inf",
            RuntimeWarning,
            stacklevel=3,
        )
        return math.inf
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def calculate_power_payoff(exponent: float, info: PayoffInfo) -> float:
    """Intrinsic value on ``spot ** exponent``."""
    return _intrinsic_against(_power(info.spot.to_float(), exponent), info)
