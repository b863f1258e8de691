"""Payoff diagnostics: tables (pandas) and plots (matplotlib, optional)."""

from .payoff_profile.compute import payoff_profile
from .payoff_profile.plots import plot_payoff_profile

__all__ = ["payoff_profile", "plot_payoff_profile"]
