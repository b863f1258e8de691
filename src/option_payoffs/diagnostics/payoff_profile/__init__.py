from .compute import payoff_profile
from .plots import plot_payoff_profile

__all__ = ["payoff_profile", "plot_payoff_profile"]
