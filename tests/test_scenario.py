from __future__ import annotations

import math

import numpy as np
import pytest

from option_payoffs.exceptions import NegativeValueError, NonFiniteValueError
from option_payoffs.positive import Positive
from option_payoffs.scenario import PayoffInfo
from option_payoffs.types import OptionStyle, Side


def test_defaults():
    info = PayoffInfo()
    assert info.spot == Positive.ZERO
    assert info.strike == Positive.ZERO
    assert info.style is OptionStyle.CALL
    assert info.side is Side.LONG
    assert info.spot_prices is None
    assert info.spot_min is None and info.spot_max is None


def test_plain_numbers_are_wrapped():
    info = PayoffInfo(spot=110.0, strike=100)
    assert isinstance(info.spot, Positive)
    assert isinstance(info.strike, Positive)
    assert info.spot == 110.0


@pytest.mark.parametrize("field", ["spot", "strike"])
def test_negative_prices_rejected(field):
    with pytest.raises(NegativeValueError):
        PayoffInfo(**{field: -1.0})


def test_string_enums_are_coerced():
    info = PayoffInfo(spot=1.0, style="put", side="short")
    assert info.style is OptionStyle.PUT
    assert info.side is Side.SHORT


def test_path_is_normalised_to_tuple_of_floats():
    info = PayoffInfo(spot=1.0, spot_prices=np.array([1, 2, 3]))
    assert info.spot_prices == (1.0, 2.0, 3.0)
    assert info.spot_prices_len() == 3
    assert info.has_path


def test_empty_and_missing_path():
    assert PayoffInfo(spot=1.0).spot_prices_len() is None
    assert not PayoffInfo(spot=1.0).has_path
    empty = PayoffInfo(spot=1.0, spot_prices=[])
    assert empty.spot_prices_len() == 0
    assert not empty.has_path


def test_path_values_validated():
    with pytest.raises(NegativeValueError):
        PayoffInfo(spot=1.0, spot_prices=[1.0, -2.0])
    with pytest.raises(NonFiniteValueError):
        PayoffInfo(spot=1.0, spot_prices=[1.0, math.nan])
    with pytest.raises(ValueError):
        PayoffInfo(spot=1.0, spot_prices=[[1.0, 2.0]])


def test_nan_extremum_rejected():
    with pytest.raises(NonFiniteValueError):
        PayoffInfo(spot=1.0, spot_min=math.nan)


def test_observed_extrema_fall_back_to_spot():
    info = PayoffInfo(spot=105.0)
    assert info.observed_max() == 105.0
    assert info.observed_min() == 105.0
    info = info.replace(spot_min=90.0, spot_max=120.0)
    assert info.observed_max() == 120.0
    assert info.observed_min() == 90.0


def test_from_path():
    info = PayoffInfo.from_path(
        [100.0, 120.0, 80.0, 95.0], strike=100.0, style=OptionStyle.PUT
    )
    assert info.spot == 95.0
    assert info.strike == 100.0
    assert info.style is OptionStyle.PUT
    assert info.spot_min == 80.0
    assert info.spot_max == 120.0
    assert info.spot_prices == (100.0, 120.0, 80.0, 95.0)


def test_from_path_requires_samples():
    with pytest.raises(ValueError):
        PayoffInfo.from_path([], strike=100.0)


def test_frozen_and_hashable():
    info = PayoffInfo(spot=1.0, spot_prices=[1.0])
    with pytest.raises(AttributeError):
        info.spot = Positive.ONE  # type: ignore[misc]
    assert hash(info) == hash(PayoffInfo(spot=1.0, spot_prices=(1.0,)))
