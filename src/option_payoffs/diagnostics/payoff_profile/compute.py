from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from ...config import PayoffConfig
from ...contracts import OptionType
from ...payoff import payoff
from ...positive import Positive
from ...scenario import PayoffInfo
from ...types import OptionStyle


def payoff_profile(
    contracts: Mapping[str, OptionType],
    spots: Sequence[float] | np.ndarray,
    *,
    strike: float,
    style: OptionStyle = OptionStyle.CALL,
    spot_prices: Sequence[float] | None = None,
    spot_min: float | None = None,
    spot_max: float | None = None,
    cfg: PayoffConfig | None = None,
) -> pd.DataFrame:
    """Payoff of each contract across a grid of terminal spots.

    Parameters
    ----------
    contracts
        Label -> contract. Labels become column names.
    spots
        Terminal spot grid (non-negative).
    strike, style
        Terms shared by every contract.
    spot_prices, spot_min, spot_max
        Path statistics held fixed across the grid (only the terminal spot
        moves).

    Returns
    -------
    pd.DataFrame
        Column ``spot`` followed by one column per label.
    """
    if not contracts:
        raise ValueError("contracts must not be empty")
    if "spot" in contracts:
        raise ValueError("'spot' is reserved for the spot column")

    grid = np.asarray(spots, dtype=float).ravel()
    K = Positive.new(strike)
    infos = [
        PayoffInfo(
            spot=Positive(float(s)),
            strike=K,
            style=style,
            spot_prices=spot_prices,
            spot_min=spot_min,
            spot_max=spot_max,
        )
        for s in grid
    ]

    data: dict[str, np.ndarray] = {"spot": grid}
    for label, contract in contracts.items():
        data[label] = np.array([payoff(contract, info, cfg=cfg) for info in infos])
    return pd.DataFrame(data)
