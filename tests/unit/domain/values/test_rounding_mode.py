import math

import pytest

from cowry.domain.values import RoundingMode


@pytest.mark.parametrize(
    "value, nearest, floor, ceil",
    [
        (262.5, 263, 262, 263),
        (-262.5, -263, -263, -262),
        (2.94, 3, 2, 3),
        (-2.94, -3, -3, -2),
        (2.5, 3, 2, 3),
        (0.0, 0, 0, 0),
        (7.0, 7, 7, 7),
    ],
)
def test_rounding_modes(value, nearest, floor, ceil):
    assert RoundingMode.NEAREST.apply(value) == nearest
    assert RoundingMode.FLOOR.apply(value) == floor
    assert RoundingMode.CEIL.apply(value) == ceil


def test_nearest_is_not_bankers_rounding():
    # round() would give 2 and 4 here
    assert RoundingMode.NEAREST.apply(2.5) == 3
    assert RoundingMode.NEAREST.apply(4.5) == 5
    assert RoundingMode.NEAREST.apply(-4.5) == -5


def test_nearest_just_below_half_rounds_down():
    assert RoundingMode.NEAREST.apply(0.49999999999999994) == 0
    assert RoundingMode.NEAREST.apply(-0.49999999999999994) == 0


def test_apply_returns_int():
    assert isinstance(RoundingMode.FLOOR.apply(1.5), int)
    assert isinstance(RoundingMode.NEAREST.apply(1.5), int)


def test_apply_rejects_non_finite():
    with pytest.raises(ValueError):
        RoundingMode.NEAREST.apply(math.inf)
    with pytest.raises(ValueError):
        RoundingMode.FLOOR.apply(math.nan)


def test_from_str_is_case_insensitive():
    assert RoundingMode.from_str("FLOOR") is RoundingMode.FLOOR
    assert RoundingMode.from_str(" ceil ") is RoundingMode.CEIL
    assert RoundingMode.from_str(RoundingMode.NEAREST) is RoundingMode.NEAREST
    assert str(RoundingMode.CEIL) == "ceil"


def test_from_str_unknown_name():
    with pytest.raises(ValueError, match="Unknown rounding mode"):
        RoundingMode.from_str("bankers")
