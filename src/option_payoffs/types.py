from enum import Enum


class OptionStyle(str, Enum):
    """Option style.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


class Side(str, Enum):
    """Position side. Carried on scenarios, never read by payoff formulas."""

    LONG = "long"
    SHORT = "short"


class AsianAveragingType(str, Enum):
    """How an Asian option averages its sampled path."""

    ARITHMETIC = "arithmetic"
    GEOMETRIC = "geometric"


class BarrierType(str, Enum):
    """Barrier direction and effect.

    "Up" barriers are tested against the highest observed spot, "down"
    barriers against the lowest. "In" barriers activate the payoff when the
    level is touched, "out" barriers extinguish it.
    """

    UP_AND_IN = "up-and-in"
    DOWN_AND_IN = "down-and-in"
    UP_AND_OUT = "up-and-out"
    DOWN_AND_OUT = "down-and-out"

    @property
    def is_up(self) -> bool:
        return self in (BarrierType.UP_AND_IN, BarrierType.UP_AND_OUT)

    @property
    def is_knock_in(self) -> bool:
        return self in (BarrierType.UP_AND_IN, BarrierType.DOWN_AND_IN)


class BinaryType(str, Enum):
    CASH_OR_NOTHING = "cash-or-nothing"
    ASSET_OR_NOTHING = "asset-or-nothing"
    GAP = "gap"


class LookbackType(str, Enum):
    FIXED_STRIKE = "fixed-strike"
    FLOATING_STRIKE = "floating-strike"


class RainbowType(str, Enum):
    BEST_OF = "best-of"
    WORST_OF = "worst-of"
