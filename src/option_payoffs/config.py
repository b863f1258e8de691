from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class MissingDataPolicy(str, Enum):
    ZERO = "zero"  # sentinel payoff of 0.0
    RAISE = "raise"  # raise MissingPathDataError


@dataclass(frozen=True, slots=True)
class PayoffConfig:
    """Knobs for the payoff engine.

    Parameters
    ----------
    cash_payout : float, default 1.0
        Amount paid by an in-the-money cash-or-nothing binary.
    log_space_min_length : int, default 512
        Paths with at least this many samples average geometrically in log
        space. Shorter paths use product-then-root.
    missing_path : MissingDataPolicy, default ZERO
        What an Asian payoff does when the scenario carries no path history.
    """

    cash_payout: float = 1.0
    log_space_min_length: int = 512
    missing_path: MissingDataPolicy = MissingDataPolicy.ZERO

    def __post_init__(self) -> None:
        if not math.isfinite(self.cash_payout) or self.cash_payout < 0.0:
            raise ValueError("cash_payout must be finite and >= 0")
        if self.log_space_min_length <= 0:
            raise ValueError("log_space_min_length must be > 0")
        try:
            policy = MissingDataPolicy(self.missing_path)
        except ValueError as e:
            raise ValueError(
                f"Unsupported missing_path policy: {self.missing_path!r}"
            ) from e
        object.__setattr__(self, "missing_path", policy)


DEFAULT_CONFIG = PayoffConfig()
