"""
option_payoffs

Payoff evaluation for vanilla and exotic option contracts.

The main entry point is :func:`payoff`, which maps a contract variant and a
market scenario to a payoff amount:

    from option_payoffs import Barrier, BarrierType, OptionStyle, PayoffInfo, payoff

    info = PayoffInfo(spot=130.0, strike=100.0, style=OptionStyle.CALL)
    payoff(Barrier(BarrierType.UP_AND_IN, barrier_level=120.0), info)  # 30.0
"""

import logging

from .batch import PathPayoff, discounted_mean, payoff_many, payoff_paths
from .config import DEFAULT_CONFIG, MissingDataPolicy, PayoffConfig
from .contracts import (
    OPTION_TYPES,
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
    ExoticParams,
    Lookback,
    OptionType,
    Payoff,
    Power,
    Quanto,
    Rainbow,
    Spread,
)
from .exceptions import (
    InvalidValueError,
    MissingPathDataError,
    NegativeValueError,
    NonFiniteValueError,
    PayoffError,
)
from .payoff import payoff, standard_payoff
from .positive import Positive
from .scenario import PayoffInfo
from .types import (
    AsianAveragingType,
    BarrierType,
    BinaryType,
    LookbackType,
    OptionStyle,
    RainbowType,
    Side,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Values
    "Positive",
    # Enums
    "OptionStyle",
    "Side",
    "AsianAveragingType",
    "BarrierType",
    "BinaryType",
    "LookbackType",
    "RainbowType",
    # Contracts
    "OptionType",
    "OPTION_TYPES",
    "Payoff",
    "European",
    "American",
    "Bermuda",
    "Asian",
    "Barrier",
    "Binary",
    "Lookback",
    "Compound",
    "Chooser",
    "Cliquet",
    "Rainbow",
    "Spread",
    "Exchange",
    "Quanto",
    "Power",
    "ExoticParams",
    # Scenario
    "PayoffInfo",
    # Engine
    "payoff",
    "standard_payoff",
    "payoff_many",
    "payoff_paths",
    "PathPayoff",
    "discounted_mean",
    # Config
    "PayoffConfig",
    "MissingDataPolicy",
    "DEFAULT_CONFIG",
    # Errors
    "PayoffError",
    "InvalidValueError",
    "NegativeValueError",
    "NonFiniteValueError",
    "MissingPathDataError",
]
