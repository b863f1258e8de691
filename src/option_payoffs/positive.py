"""Non-negative real numbers.

:class:`Positive` wraps a ``float`` that is guaranteed to be ``>= 0``. It is
used for every quantity that cannot be negative in this library: spot and
strike prices, path samples, volatilities, dividends.

The invariant is checked once, at construction. Arithmetic follows a simple
rule so formulas never have to re-check it:

- ``+``, ``*`` and ``/`` between two :class:`Positive` values return a
  :class:`Positive` (the result cannot be negative).
- ``-`` always returns a plain ``float``; a difference of prices can be
  negative. Use :meth:`Positive.clamp` to go back once the result has been
  floored at zero.
- Any arithmetic with a plain number returns a plain ``float``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from numbers import Real
from typing import ClassVar

from .exceptions import NegativeValueError, NonFiniteValueError


def _as_float(other: object) -> float | None:
    if isinstance(other, Positive):
        return other.value
    if isinstance(other, Real) and not isinstance(other, bool):
        return float(other)
    return None


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Positive:
    """A ``float`` known to be non-negative.

    Parameters
    ----------
    value : float
        The wrapped number. ``+inf`` is allowed, NaN is not.

    Raises
    ------
    NegativeValueError
        If ``value < 0``.
    NonFiniteValueError
        If ``value`` is NaN.
    """

    value: float

    ZERO: ClassVar[Positive]
    ONE: ClassVar[Positive]
    TWO: ClassVar[Positive]
    HUNDRED: ClassVar[Positive]

    def __post_init__(self) -> None:
        v = _as_float(self.value)
        if v is None:
            raise TypeError(
                f"Positive requires a real number, got {type(self.value).__name__}"
            )
        if math.isnan(v):
            raise NonFiniteValueError("Positive value must not be NaN")
        if v < 0.0:
            raise NegativeValueError(f"Positive value must be >= 0, got {v!r}")
        # normalise -0.0
        object.__setattr__(self, "value", v + 0.0)

    # --- construction

    @classmethod
    def new(cls, value: float | Positive) -> Positive:
        """Validated constructor; returns ``value`` unchanged if already positive."""
        if isinstance(value, Positive):
            return value
        return cls(value)

    @classmethod
    def try_new(cls, value: float | Positive) -> Positive | None:
        """Like :meth:`new` but returns ``None`` instead of raising."""
        try:
            return cls.new(value)
        except (NegativeValueError, NonFiniteValueError):
            return None

    @classmethod
    def clamp(cls, value: float | Positive) -> Positive:
        """Floor ``value`` at zero, then wrap it.

        NaN (e.g. ``inf - inf``) floors to zero as well, so a clamped result is
        always a valid :class:`Positive`.
        """
        if isinstance(value, Positive):
            return value
        v = float(value)
        return cls(v if v > 0.0 else 0.0)

    # --- conversion

    def to_float(self) -> float:
        return self.value

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def is_zero(self) -> bool:
        return self.value == 0.0

    # --- comparison

    def __eq__(self, other: object) -> bool:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value == v

    def __lt__(self, other: object) -> bool:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value < v

    def __hash__(self) -> int:
        return hash(self.value)

    def max(self, other: Positive) -> Positive:
        return self if self >= other else other

    def min(self, other: Positive) -> Positive:
        return self if self <= other else other

    # --- arithmetic

    def __add__(self, other: object) -> Positive | float:
        if isinstance(other, Positive):
            return Positive(self.value + other.value)
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value + v

    def __radd__(self, other: object) -> float:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return v + self.value

    def __sub__(self, other: object) -> float:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value - v

    def __rsub__(self, other: object) -> float:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return v - self.value

    def __mul__(self, other: object) -> Positive | float:
        if isinstance(other, Positive):
            return Positive(self.value * other.value)
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value * v

    def __rmul__(self, other: object) -> float:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return v * self.value

    def __truediv__(self, other: object) -> Positive | float:
        if isinstance(other, Positive):
            return Positive(self.value / other.value)
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return self.value / v

    def __rtruediv__(self, other: object) -> float:
        v = _as_float(other)
        if v is None:
            return NotImplemented
        return v / self.value

    def __pow__(self, exponent: object) -> float:
        v = _as_float(exponent)
        if v is None:
            return NotImplemented
        return self.value**v

    def __neg__(self) -> float:
        return -self.value


Positive.ZERO = Positive(0.0)
Positive.ONE = Positive(1.0)
Positive.TWO = Positive(2.0)
Positive.HUNDRED = Positive(100.0)
