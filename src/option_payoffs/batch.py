"""Batch evaluation over many scenarios or sampled paths.

The engine evaluates one scenario at a time. These helpers loop it over a
collection of scenarios, or over the rows of a path matrix such as the output
of a Monte Carlo simulator, and return NumPy arrays. Paths are produced
elsewhere; nothing here simulates prices.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from .config import PayoffConfig
from .contracts import OptionType
from .payoff import payoff
from .positive import Positive
from .scenario import PayoffInfo
from .types import OptionStyle, Side
from .typing import FloatArray, FloatDType, PathLike

logger = logging.getLogger(__name__)


def payoff_many(
    contract: OptionType,
    infos: Iterable[PayoffInfo],
    *,
    cfg: PayoffConfig | None = None,
) -> FloatArray:
    """Evaluate ``contract`` in every scenario of ``infos``.

    Returns
    -------
    np.ndarray
        float64 array with one payoff per scenario, in input order.

    Notes
    -----
    For path-dependent contracts, scenarios without path history are counted
    and reported with a WARNING on this module's logger; under the default
    missing-data policy they silently evaluate to a fallback value.
    """
    infos = list(infos)
    if contract.is_path_dependent:
        missing = sum(1 for info in infos if not info.has_path)
        if missing:
            logger.warning(
                "%d of %d scenarios have no path history for path-dependent %s",
                missing,
                len(infos),
                contract.name,
            )
    out = np.fromiter(
        (payoff(contract, info, cfg=cfg) for info in infos),
        dtype=FloatDType,
        count=len(infos),
    )
    logger.debug("Evaluated %s over %d scenarios", contract.name, out.size)
    return out


def _as_path_matrix(paths: PathLike) -> np.ndarray:
    arr = np.asarray(paths, dtype=FloatDType)
    if arr.ndim == 1:
        arr = arr[np.newaxis, :]
    if arr.ndim != 2:
        raise ValueError(f"paths must be 1-D or 2-D, got ndim={arr.ndim}")
    if arr.shape[1] == 0:
        raise ValueError("paths must contain at least one time step")
    return arr


def payoff_paths(
    contract: OptionType,
    paths: PathLike,
    *,
    strike: float | Positive,
    style: OptionStyle = OptionStyle.CALL,
    side: Side = Side.LONG,
    cfg: PayoffConfig | None = None,
) -> FloatArray:
    """Evaluate ``contract`` on each sampled path.

    Parameters
    ----------
    contract
        Contract variant to evaluate.
    paths
        Array of shape ``(n_paths, n_steps + 1)``; column 0 is the initial
        spot and the last column the spot at evaluation time. A 1-D array is
        treated as a single path.
    strike, style, side
        Contract terms shared by every path.
    cfg
        Engine configuration.

    Returns
    -------
    np.ndarray
        Payoffs with shape ``(n_paths,)``.

    Notes
    -----
    Each row becomes a :class:`PayoffInfo` via :meth:`PayoffInfo.from_path`:
    spot is the last sample, ``spot_min`` / ``spot_max`` the row extrema.
    """
    arr = _as_path_matrix(paths)
    K = Positive.new(strike)
    logger.debug(
        "Evaluating %s on %d paths of %d steps", contract.name, *arr.shape
    )
    return payoff_many(
        contract,
        (PayoffInfo.from_path(row, strike=K, style=style, side=side) for row in arr),
        cfg=cfg,
    )


@dataclass(frozen=True, slots=True)
class PathPayoff:
    """Path payoff callable bound to fixed contract terms.

    Calling the object with a path matrix returns one payoff per path, so it
    can be handed to any path-based pricer expecting ``paths -> payoffs``.
    """

    contract: OptionType
    strike: float
    style: OptionStyle = OptionStyle.CALL
    cfg: PayoffConfig | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "strike", Positive.new(self.strike).to_float())

    def __call__(self, paths: PathLike) -> FloatArray:
        return payoff_paths(
            self.contract, paths, strike=self.strike, style=self.style, cfg=self.cfg
        )


def discounted_mean(payoffs: PathLike, df: float = 1.0) -> tuple[float, float]:
    """Discounted sample mean of ``payoffs`` and its standard error.

    Parameters
    ----------
    payoffs
        Payoff samples, e.g. the output of :func:`payoff_paths`.
    df
        Discount factor applied to the mean (``exp(-r * tau)`` for a flat
        rate).

    Returns
    -------
    (float, float)
        ``(df * mean, df * std / sqrt(n))``. The standard error is 0.0 for a
        single sample.
    """
    x = np.asarray(payoffs, dtype=FloatDType).ravel()
    if x.size == 0:
        raise ValueError("payoffs must contain at least one sample")
    if df < 0.0:
        raise ValueError("df must be >= 0")
    mean = float(np.mean(x))
    se = float(np.std(x, ddof=1)) / math.sqrt(x.size) if x.size > 1 else 0.0
    return df * mean, df * se
