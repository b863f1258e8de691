class PayoffError(Exception):
    """Base class for errors raised by :mod:`option_payoffs`."""


class InvalidValueError(PayoffError, ValueError):
    """Raised when a value violates a construction-time invariant."""


class NegativeValueError(InvalidValueError):
    """Raised when a negative number is used to build a :class:`Positive`.

    Prices, strikes, volatilities and path samples are non-negative quantities.
    The check happens once, at construction, so the payoff formulas can assume
    every wrapped value already satisfies ``x >= 0``.
    """


class NonFiniteValueError(InvalidValueError):
    """Raised when NaN is used to build a :class:`Positive`."""


class MissingPathDataError(PayoffError, LookupError):
    """Raised when a path-dependent payoff has no path history to work with.

    Only raised under :attr:`MissingDataPolicy.RAISE
    <option_payoffs.config.MissingDataPolicy.RAISE>`. With the default policy
    the engine returns a zero payoff instead.
    """
