"""Option contract variants ("what is being evaluated").

Every option shape is its own small frozen dataclass carrying only the terms
its payoff needs. :data:`OptionType` is the closed union of all of them; the
payoff engine matches on it exhaustively, so adding a variant here without a
formula in :mod:`option_payoffs.payoff` is caught by the type checker.

Some variants carry terms the current formulas do not read:

- :class:`Bermuda` exercise dates and :class:`Chooser` choice date are
  informational.
- :class:`Cliquet`, :class:`Rainbow`, :class:`Spread` and :class:`Exchange`
  evaluate with the plain intrinsic-value formula. Reset-aware and
  multi-asset formulas need scenario data (several correlated paths, reset
  levels) that :class:`~option_payoffs.scenario.PayoffInfo` does not carry.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .positive import Positive
from .types import (
    AsianAveragingType,
    BarrierType,
    BinaryType,
    LookbackType,
    OptionStyle,
    RainbowType,
    Side,
)

if TYPE_CHECKING:
    from .config import PayoffConfig
    from .scenario import PayoffInfo


@runtime_checkable
class Payoff(Protocol):
    """Anything that maps a scenario to a payoff amount."""

    def payoff(self, info: PayoffInfo) -> float: ...


class _ContractBase:
    __slots__ = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def is_path_dependent(self) -> bool:
        return False

    def payoff(self, info: PayoffInfo, *, cfg: PayoffConfig | None = None) -> float:
        """Evaluate this contract against ``info``.

        Shorthand for :func:`option_payoffs.payoff.payoff`.
        """
        from .payoff import payoff

        return payoff(self, info, cfg=cfg)  # type: ignore[arg-type]


def _float_tuple(values: Iterable[float]) -> tuple[float, ...]:
    return tuple(float(v) for v in values)


# ---------------------------
# Standard exercise styles
# ---------------------------


@dataclass(frozen=True, slots=True)
class European(_ContractBase):
    pass


@dataclass(frozen=True, slots=True)
class American(_ContractBase):
    pass


@dataclass(frozen=True, slots=True)
class Bermuda(_ContractBase):
    """Bermudan option; ``exercise_dates`` are offsets (e.g. days)."""

    exercise_dates: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exercise_dates", _float_tuple(self.exercise_dates))


# ---------------------------
# Path-dependent
# ---------------------------


@dataclass(frozen=True, slots=True)
class Asian(_ContractBase):
    averaging_type: AsianAveragingType = AsianAveragingType.ARITHMETIC

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "averaging_type", AsianAveragingType(self.averaging_type)
        )

    @property
    def is_path_dependent(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Barrier(_ContractBase):
    """Knock-in / knock-out option.

    Parameters
    ----------
    barrier_type : BarrierType
        Direction (up/down) and effect (in/out).
    barrier_level : float
        Price level that triggers the barrier. Touching it counts.
    rebate : float, optional
        Paid instead of the payoff when a knock-out barrier is triggered.
        ``None`` means no rebate (0.0).
    """

    barrier_type: BarrierType
    barrier_level: float
    rebate: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "barrier_type", BarrierType(self.barrier_type))
        object.__setattr__(self, "barrier_level", float(self.barrier_level))
        if self.rebate is not None:
            object.__setattr__(self, "rebate", float(self.rebate))

    @property
    def is_path_dependent(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Lookback(_ContractBase):
    lookback_type: LookbackType = LookbackType.FIXED_STRIKE

    def __post_init__(self) -> None:
        object.__setattr__(self, "lookback_type", LookbackType(self.lookback_type))

    @property
    def is_path_dependent(self) -> bool:
        return True


# ---------------------------
# Digital
# ---------------------------


@dataclass(frozen=True, slots=True)
class Binary(_ContractBase):
    binary_type: BinaryType = BinaryType.CASH_OR_NOTHING

    def __post_init__(self) -> None:
        object.__setattr__(self, "binary_type", BinaryType(self.binary_type))


# ---------------------------
# Options on options
# ---------------------------


@dataclass(frozen=True, slots=True)
class Compound(_ContractBase):
    """Option whose payoff is that of ``underlying_option``."""

    underlying_option: OptionType

    def __post_init__(self) -> None:
        if not isinstance(self.underlying_option, OPTION_TYPES):
            raise TypeError(
                "underlying_option must be an option contract, got "
                f"{type(self.underlying_option).__name__}"
            )

    @property
    def is_path_dependent(self) -> bool:
        return self.underlying_option.is_path_dependent


@dataclass(frozen=True, slots=True)
class Chooser(_ContractBase):
    """Holder picks call or put at ``choice_date``; payoff takes the better one."""

    choice_date: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "choice_date", float(self.choice_date))


# ---------------------------
# Multi-period / multi-asset
# ---------------------------


@dataclass(frozen=True, slots=True)
class Cliquet(_ContractBase):
    reset_dates: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "reset_dates", _float_tuple(self.reset_dates))


@dataclass(frozen=True, slots=True)
class Rainbow(_ContractBase):
    num_assets: int = 2
    rainbow_type: RainbowType = RainbowType.BEST_OF

    def __post_init__(self) -> None:
        if self.num_assets < 1:
            raise ValueError("num_assets must be >= 1")
        object.__setattr__(self, "rainbow_type", RainbowType(self.rainbow_type))


@dataclass(frozen=True, slots=True)
class Spread(_ContractBase):
    second_asset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "second_asset", float(self.second_asset))


@dataclass(frozen=True, slots=True)
class Exchange(_ContractBase):
    second_asset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "second_asset", float(self.second_asset))


# ---------------------------
# Scaled payoffs
# ---------------------------


@dataclass(frozen=True, slots=True)
class Quanto(_ContractBase):
    """Standard payoff converted at a fixed ``exchange_rate``."""

    exchange_rate: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "exchange_rate", float(self.exchange_rate))


@dataclass(frozen=True, slots=True)
class Power(_ContractBase):
    """Payoff on ``spot ** exponent`` instead of spot."""

    exponent: float = 1.0

    def __post_init__(self) -> None:
        exponent = float(self.exponent)
        if not math.isfinite(exponent):
            raise ValueError(f"exponent must be finite, got {exponent!r}")
        object.__setattr__(self, "exponent", exponent)


type OptionType = (
    European
    | American
    | Bermuda
    | Asian
    | Barrier
    | Binary
    | Lookback
    | Compound
    | Chooser
    | Cliquet
    | Rainbow
    | Spread
    | Exchange
    | Quanto
    | Power
)

# Runtime counterpart of OptionType, for isinstance checks.
OPTION_TYPES: tuple[type, ...] = (
    European,
    American,
    Bermuda,
    Asian,
    Barrier,
    Binary,
    Lookback,
    Compound,
    Chooser,
    Cliquet,
    Rainbow,
    Spread,
    Exchange,
    Quanto,
    Power,
)


# ---------------------------
# Secondary market data
# ---------------------------


def _check_correlation(name: str, rho: float | None) -> float | None:
    if rho is None:
        return None
    rho = float(rho)
    if not (-1.0 <= rho <= 1.0):
        raise ValueError(f"{name} must lie in [-1, 1], got {rho!r}")
    return rho


def _optional_positive(value: float | Positive | None) -> Positive | None:
    return None if value is None else Positive.new(value)


@dataclass(frozen=True, slots=True)
class ExoticParams:
    """Secondary market data attached to an exotic contract.

    None of these fields is read by the payoff formulas. They travel with the
    contract so pricers and reports that need them (second-asset dynamics,
    cliquet caps and floors, quanto FX terms) have one place to find them.
    The path fields can be turned into a scenario with :meth:`to_payoff_info`.
    """

    spot_prices: tuple[float, ...] | None = None
    spot_min: float | None = None
    spot_max: float | None = None

    cliquet_local_cap: float | None = None
    cliquet_local_floor: float | None = None
    cliquet_global_cap: float | None = None
    cliquet_global_floor: float | None = None

    rainbow_second_asset_price: Positive | None = None
    rainbow_second_asset_volatility: Positive | None = None
    rainbow_second_asset_dividend: Positive | None = None
    rainbow_correlation: float | None = None

    spread_second_asset_volatility: Positive | None = None
    spread_second_asset_dividend: Positive | None = None
    spread_correlation: float | None = None

    quanto_fx_volatility: Positive | None = None
    quanto_fx_correlation: float | None = None
    quanto_foreign_rate: float | None = None

    exchange_second_asset_volatility: Positive | None = None
    exchange_second_asset_dividend: Positive | None = None
    exchange_correlation: float | None = None

    def __post_init__(self) -> None:
        if self.spot_prices is not None:
            object.__setattr__(self, "spot_prices", _float_tuple(self.spot_prices))

        for name in (
            "rainbow_second_asset_price",
            "rainbow_second_asset_volatility",
            "rainbow_second_asset_dividend",
            "spread_second_asset_volatility",
            "spread_second_asset_dividend",
            "quanto_fx_volatility",
            "exchange_second_asset_volatility",
            "exchange_second_asset_dividend",
        ):
            object.__setattr__(self, name, _optional_positive(getattr(self, name)))

        for name in (
            "rainbow_correlation",
            "spread_correlation",
            "quanto_fx_correlation",
            "exchange_correlation",
        ):
            object.__setattr__(self, name, _check_correlation(name, getattr(self, name)))

        for lo, hi in (
            ("cliquet_local_floor", "cliquet_local_cap"),
            ("cliquet_global_floor", "cliquet_global_cap"),
        ):
            floor, cap = getattr(self, lo), getattr(self, hi)
            if floor is not None and cap is not None and floor > cap:
                raise ValueError(f"{lo} must be <= {hi}")

        if self.quanto_foreign_rate is not None and not math.isfinite(
            self.quanto_foreign_rate
        ):
            raise ValueError("quanto_foreign_rate must be finite")

    def to_payoff_info(
        self,
        *,
        spot: float | Positive,
        strike: float | Positive,
        style: OptionStyle = OptionStyle.CALL,
        side: Side = Side.LONG,
    ) -> PayoffInfo:
        """Scenario built from ``spot``/``strike`` plus this object's path fields."""
        from .scenario import PayoffInfo

        return PayoffInfo(
            spot=Positive.new(spot),
            strike=Positive.new(strike),
            style=style,
            side=side,
            spot_prices=self.spot_prices,
            spot_min=self.spot_min,
            spot_max=self.spot_max,
        )
