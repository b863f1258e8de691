"""Scenario snapshots consumed by the payoff engine.

A :class:`PayoffInfo` is the market state an option is evaluated against:
the current spot, the strike, the option style and, for path-dependent
contracts, whatever path statistics the caller has.

Path fields are optional. Nothing ties the contract type to which of them are
populated, so the engine always checks for presence before using them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from .exceptions import NonFiniteValueError
from .positive import Positive
from .types import OptionStyle, Side
from .typing import PathLike


def _normalise_path(path: Iterable[float] | PathLike) -> tuple[float, ...]:
    arr = np.asarray(path, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"spot_prices must be one-dimensional, got ndim={arr.ndim}")
    # Positive() rejects negatives and NaN with the library's own errors.
    return tuple(Positive(float(x)).value for x in arr)


def _optional_extremum(name: str, value: float | None) -> float | None:
    if value is None:
        return None
    v = float(value)
    if math.isnan(v):
        raise NonFiniteValueError(f"{name} must not be NaN")
    return v


@dataclass(frozen=True, slots=True)
class PayoffInfo:
    """Market snapshot for a single payoff evaluation.

    Parameters
    ----------
    spot : Positive
        Underlying price at evaluation time. Plain numbers are converted, so a
        negative spot is rejected here rather than inside a formula.
    strike : Positive
        Strike price. Floating-strike lookbacks ignore it.
    style : OptionStyle, default CALL
        Call or put.
    side : Side, default LONG
        Long or short. Informational only.
    spot_prices : tuple of float, optional
        Sampled spot prices along the path, oldest first. Used by Asian
        options.
    spot_min, spot_max : float, optional
        Lowest / highest spot observed over the life of the contract. Used by
        barrier and lookback options.

    Notes
    -----
    Defaults (spot 0, strike 0, call, long) allow partially filled scenarios
    in tests and batch code.
    """

    spot: Positive = Positive.ZERO
    strike: Positive = Positive.ZERO
    style: OptionStyle = OptionStyle.CALL
    side: Side = Side.LONG
    spot_prices: tuple[float, ...] | None = None
    spot_min: float | None = None
    spot_max: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "spot", Positive.new(self.spot))
        object.__setattr__(self, "strike", Positive.new(self.strike))
        object.__setattr__(self, "style", OptionStyle(self.style))
        object.__setattr__(self, "side", Side(self.side))
        if self.spot_prices is not None:
            object.__setattr__(self, "spot_prices", _normalise_path(self.spot_prices))
        object.__setattr__(
            self, "spot_min", _optional_extremum("spot_min", self.spot_min)
        )
        object.__setattr__(
            self, "spot_max", _optional_extremum("spot_max", self.spot_max)
        )

    @classmethod
    def from_path(
        cls,
        path: PathLike,
        *,
        strike: float | Positive,
        style: OptionStyle = OptionStyle.CALL,
        side: Side = Side.LONG,
    ) -> PayoffInfo:
        """Build a scenario from a sampled path.

        The spot is the last sample; ``spot_min`` / ``spot_max`` are the path
        extrema and ``spot_prices`` the full path.

        Raises
        ------
        ValueError
            If the path is empty or not one-dimensional.
        """
        prices = _normalise_path(path)
        if not prices:
            raise ValueError("path must contain at least one price")
        return cls(
            spot=Positive(prices[-1]),
            strike=Positive.new(strike),
            style=style,
            side=side,
            spot_prices=prices,
            spot_min=min(prices),
            spot_max=max(prices),
        )

    def spot_prices_len(self) -> int | None:
        if self.spot_prices is None:
            return None
        return len(self.spot_prices)

    @property
    def has_path(self) -> bool:
        """``True`` when at least one path sample is available."""
        return bool(self.spot_prices)

    def observed_max(self) -> float:
        """Highest observed spot, falling back to the current spot."""
        return self.spot.to_float() if self.spot_max is None else self.spot_max

    def observed_min(self) -> float:
        """Lowest observed spot, falling back to the current spot."""
        return self.spot.to_float() if self.spot_min is None else self.spot_min

    def replace(self, **changes: Any) -> PayoffInfo:
        return replace(self, **changes)
