from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from matplotlib.axes import Axes


def _pyplot():
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "plot_payoff_profile requires matplotlib: pip install matplotlib"
        ) from e
    return plt


def _payoff_columns(df: pd.DataFrame, spot_col: str) -> list[str]:
    if spot_col not in df.columns:
        raise ValueError(f"DataFrame has no {spot_col!r} column")
    cols = [c for c in df.columns if c != spot_col]
    if not cols:
        raise ValueError("DataFrame has no payoff columns to plot")
    return cols


def plot_payoff_profile(
    df: pd.DataFrame,
    *,
    spot_col: str = "spot",
    ax: Axes | None = None,
    title: str | None = None,
    figsize=(8, 5),
):
    """Line plot of every payoff column against ``spot_col``.

    ``df`` is typically the output of :func:`payoff_profile`. Returns
    ``(fig, ax)``.
    """
    value_cols = _payoff_columns(df, spot_col)

    if ax is None:
        fig, ax = _pyplot().subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure

    x = df[spot_col].to_numpy(dtype=float)
    for col in value_cols:
        ax.plot(x, df[col].to_numpy(dtype=float), label=str(col))

    # zero line, light grid, open top/right
    ax.axhline(0.0, lw=0.8, color="black")
    ax.grid(alpha=0.25)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)

    ax.set_xlabel("Spot at evaluation")
    ax.set_ylabel("Payoff")
    if title is not None:
        ax.set_title(title)
    ax.legend()
    return fig, ax
