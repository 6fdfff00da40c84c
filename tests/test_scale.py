import numpy as np
import pandas as pd
import pytest

from tests.scheme import _TestCase, Parameters, Raises, assert_same, parametrize

from numround import (
    ceil, ceil_zeros, floor, floor_zeros, round, round_zeros, scale_decimals,
    scale_zeros
)


####################
####    DATA    ####
####################


def round_data():
    case = lambda decimals, test_input, test_output: _TestCase(
        {"decimals": decimals}, test_input, test_output
    )

    return Parameters(
        case(2, 123.456, 123.46),
        case(0, 123.456, 123.0),
        case(2, np.float32(123.456), np.float32(123.46)),
        case(1, -123.456, -123.5),
        case(2, 123.0, 123.0),
        case(2, np.float64(123.456), np.float64(123.46)),

        # ties away from zero
        case(0, 2.5, 3.0),
        case(0, -2.5, -3.0),
        case(0, 0.5, 1.0),
        case(0, np.float32(-0.5), np.float32(-1.0)),
        case(1, 0.25, 0.3),
        case(1, -0.25, -0.3),
        case(0, 0.49999999999999994, 0.0),

        # negative decimals count zeros
        case(-1, 125.0, 130.0),
        case(-2, -150.0, -200.0),
    )


def ceil_data():
    case = lambda decimals, test_input, test_output: _TestCase(
        {"decimals": decimals}, test_input, test_output
    )

    return Parameters(
        case(2, 123.454, 123.46),
        case(0, 123.456, 124.0),
        case(2, np.float32(123.454), np.float32(123.46)),
        case(1, -123.456, -123.4),
        case(2, 123.0, 123.0),
        case(0, -0.5, -0.0),
    )


def floor_data():
    case = lambda decimals, test_input, test_output: _TestCase(
        {"decimals": decimals}, test_input, test_output
    )

    return Parameters(
        case(2, 123.456, 123.45),
        case(0, 123.456, 123.0),
        case(2, np.float32(123.454), np.float32(123.45)),
        case(1, -123.426, -123.5),
        case(2, 123.0, 123.0),
        case(0, -0.5, -1.0),
    )


def round_zeros_data():
    case = lambda zeros, test_input, test_output: _TestCase(
        {"zeros": zeros}, test_input, test_output
    )

    return Parameters(
        case(1, 123.456, 120.0),
        case(0, 123.456, 123.0),
        case(2, np.int32(123), np.int32(100)),
        case(1, np.uint64(12345), np.uint64(12350)),
        case(2, np.float32(1250.0), np.float32(1300.0)),

        # ties away from zero
        case(1, 125, 130),
        case(1, -125, -130),
        case(1, -124, -120),
        case(1, -126, -130),
        case(2, np.int8(-50), np.int8(-100)),
        case(1, np.int16(-15), np.int16(-20)),

        # python integers beyond int64 resolve to uint64
        case(1, 2**63, 2**63 + 2),

        # negative zeros round right of the decimal point
        case(-2, 123.456, 123.46),
        case(-2, np.int32(123), np.int32(123)),
    )


def ceil_zeros_data():
    case = lambda zeros, test_input, test_output: _TestCase(
        {"zeros": zeros}, test_input, test_output
    )

    return Parameters(
        case(1, 123.456, 130.0),
        case(0, 123.456, 124.0),
        case(2, np.int32(123), np.int32(200)),
        case(4, np.uint64(123453789), np.uint64(123460000)),
        case(0, np.uint32(12345), np.uint32(12345)),
        case(3, np.int32(-12645), np.int32(-12000)),
        case(3, np.int32(-12000), np.int32(-12000)),
        case(1, np.uint8(241), np.uint8(250)),
    )


def floor_zeros_data():
    case = lambda zeros, test_input, test_output: _TestCase(
        {"zeros": zeros}, test_input, test_output
    )

    return Parameters(
        case(1, 123.456, 120.0),
        case(0, 123.654, 123.0),
        case(2, np.int32(156), np.int32(100)),
        case(3, np.int64(-12345), np.int64(-13000)),
        case(3, np.int64(-13000), np.int64(-13000)),
        case(2, np.uint16(99), np.uint16(0)),
    )


#####################
####    VALID    ####
#####################


@parametrize(round_data())
def test_round_to_decimal_places(kwargs, test_input, test_output):
    assert_same(round(test_input, **kwargs), test_output)


@parametrize(ceil_data())
def test_ceil_to_decimal_places(kwargs, test_input, test_output):
    assert_same(ceil(test_input, **kwargs), test_output)


@parametrize(floor_data())
def test_floor_to_decimal_places(kwargs, test_input, test_output):
    assert_same(floor(test_input, **kwargs), test_output)


@parametrize(round_zeros_data())
def test_round_to_zeros(kwargs, test_input, test_output):
    assert_same(round_zeros(test_input, **kwargs), test_output)


@parametrize(ceil_zeros_data())
def test_ceil_to_zeros(kwargs, test_input, test_output):
    assert_same(ceil_zeros(test_input, **kwargs), test_output)


@parametrize(floor_zeros_data())
def test_floor_to_zeros(kwargs, test_input, test_output):
    assert_same(floor_zeros(test_input, **kwargs), test_output)


def test_decimal_places_keep_float32_arithmetic():
    val = np.array([1.25, -1.25, 2.0], dtype=np.float32)
    expected = np.array([1.3, -1.3, 2.0], dtype=np.float32)
    assert_same(round(val, 1), expected)


def test_scale_decimals_matches_named_rules():
    val = [-1.5, -0.5, 0.2, 1.7]
    assert_same(scale_decimals(val, 0, rule="floor"), floor(np.array(val)))
    assert_same(scale_decimals(val, 0, rule="ceiling"), ceil(np.array(val)))
    assert_same(scale_decimals(val, 0, rule="half_up"), round(np.array(val)))
    assert_same(
        scale_decimals(val, 0, rule="half_up"),
        np.array([-2.0, -1.0, 0.0, 2.0])
    )


def test_scale_zeros_on_series_keeps_index():
    val = pd.Series([1234, -5678, 50], index=[3, 1, 2], dtype=np.int64)
    expected = pd.Series([1200, -5700, 100], index=[3, 1, 2], dtype=np.int64)
    assert_same(scale_zeros(val, 2), expected)


def test_integer_zeros_are_exact_beyond_float_precision():
    # 2**53 + 1 is not representable as a double
    val = np.int64(2**53 + 1)
    assert_same(round_zeros(val, 0), val)
    assert_same(ceil_zeros(np.uint64(2**64 - 1), 0), np.uint64(2**64 - 1))
    assert_same(
        floor_zeros(np.int64(2**62 + 123), 2),
        np.int64(2**62 + 96)
    )


##########################
####    PROPERTIES    ####
##########################


float_values = [123.456, -123.456, 0.5, -0.5, 2.675, 98765.4321, 1e-5, 7.0]
integer_kinds = [
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64
]


@pytest.mark.parametrize("decimals", [0, 1, 2, 3])
@pytest.mark.parametrize("val", float_values)
def test_round_is_idempotent(val, decimals):
    rounded = round(val, decimals)
    assert round(rounded, decimals) == rounded


@pytest.mark.parametrize("func", [round, ceil, floor])
@pytest.mark.parametrize("val", float_values)
def test_whole_number_rounding_is_idempotent(val, func):
    rounded = func(val, 0)
    assert func(rounded, 0) == rounded


@pytest.mark.parametrize("func", [round_zeros, ceil_zeros, floor_zeros])
@pytest.mark.parametrize("zeros", [0, 1, 2, 3])
@pytest.mark.parametrize("val", float_values + [123, -98765, 4])
def test_zeros_rounding_is_idempotent(val, zeros, func):
    rounded = func(val, zeros)
    assert func(rounded, zeros) == rounded


@pytest.mark.parametrize("decimals", [0, 1, 2, 3])
@pytest.mark.parametrize("val", float_values)
def test_floor_round_ceil_are_ordered(val, decimals):
    assert floor(val, decimals) <= round(val, decimals) <= ceil(val, decimals)


@pytest.mark.parametrize("zeros", [0, 1, 2, 3])
@pytest.mark.parametrize("val", [123, -12645, 999, -5, 0, 50])
def test_zeros_floor_round_ceil_are_ordered(val, zeros):
    lower = floor_zeros(np.int32(val), zeros)
    upper = ceil_zeros(np.int32(val), zeros)
    assert lower <= round_zeros(np.int32(val), zeros) <= upper


@pytest.mark.parametrize("decimals", [0, 1, 2, 3])
@pytest.mark.parametrize("val", float_values)
def test_decimal_places_are_sign_symmetric(val, decimals):
    assert round(-val, decimals) == -round(val, decimals)
    assert ceil(-val, decimals) == -floor(val, decimals)
    assert floor(-val, decimals) == -ceil(val, decimals)


@pytest.mark.parametrize("zeros", [0, 1, 2, 3])
@pytest.mark.parametrize("val", [123, 12645, 999, 5, 50, 125])
def test_zeros_are_sign_symmetric(val, zeros):
    assert round_zeros(-val, zeros) == -round_zeros(val, zeros)
    assert ceil_zeros(-val, zeros) == -floor_zeros(val, zeros)


@pytest.mark.parametrize("kind", integer_kinds)
def test_zero_zeros_is_identity_for_integers(kind):
    info = np.iinfo(kind)
    values = np.array([info.min, info.min + 1, 0, 7, info.max - 1, info.max],
                      dtype=kind)
    for func in (round_zeros, ceil_zeros, floor_zeros):
        assert_same(func(values, 0), values)


def test_input_is_never_modified():
    val = np.array([1.25, 2.5, -3.75])
    original = val.copy()
    round(val, 1)
    ceil_zeros(val, 1)
    np.testing.assert_array_equal(val, original)


@pytest.mark.parametrize("zeros", [0, -2])
def test_integer_results_never_share_memory_with_input(zeros):
    val = np.array([1, 2, 3], dtype=np.int32)
    for func in (round_zeros, ceil_zeros, floor_zeros):
        result = func(val, zeros)
        assert not np.shares_memory(result, val)
        result[0] = 99
        np.testing.assert_array_equal(val, [1, 2, 3])


@pytest.mark.parametrize("zeros", [20, 25, 100])
def test_integer_zeros_beyond_int64_scale(zeros):
    assert_same(round_zeros(np.int32(5), zeros), np.int32(0))
    assert_same(round_zeros(np.uint64(2**64 - 1), zeros), np.uint64(0))
    assert_same(
        round_zeros(np.array([5, -5], dtype=np.int64), zeros),
        np.array([0, 0], dtype=np.int64)
    )
    assert_same(
        floor_zeros(np.array([0, 5], dtype=np.int64), zeros),
        np.array([0, 0], dtype=np.int64)
    )


########################
####    OVERFLOW    ####
########################


def test_integer_overflow_saturates_silently():
    assert_same(round_zeros(np.int8(127), 1), np.int8(127))
    assert_same(floor_zeros(np.int8(-128), 1), np.int8(-128))
    assert_same(ceil_zeros(np.uint8(251), 1), np.uint8(255))
    assert_same(floor_zeros(np.uint8(5), 1), np.uint8(0))
    assert_same(
        ceil_zeros(np.array([2**63 - 1, 5], dtype=np.int64), 1),
        np.array([2**63 - 1, 10], dtype=np.int64)
    )


def test_integer_overflow_saturates_for_huge_scales():
    # ceiling bias leaves any positive value at one full scale
    assert_same(ceil_zeros(np.uint16(5), 30), np.uint16(2**16 - 1))
    assert_same(ceil_zeros(np.int16(-5), 30), np.int16(0))


def test_integer_overflow_warns():
    with pytest.warns(RuntimeWarning, match="exceed int8 range") as record:
        result = round_zeros(np.int8(127), 1, errors="warn")
    assert_same(result, np.int8(127))
    assert record[0].filename == __file__


def test_integer_overflow_warning_points_at_caller():
    with pytest.warns(RuntimeWarning, match="exceed uint8 range") as record:
        scale_zeros(np.uint8(251), 1, rule="ceiling", errors="warn")
    assert record[0].filename == __file__


def test_integer_overflow_raises():
    with pytest.raises(OverflowError, match="exceed uint8 range"):
        ceil_zeros(np.uint8(251), 1, errors="raise")


def test_float_overflow_propagates_silently():
    assert np.isnan(round(1.5, 400))
    assert np.isnan(floor_zeros(1.5, 400))


def test_float_overflow_warns():
    with pytest.warns(RuntimeWarning):
        round(1.5, 400, errors="warn")


def test_float_overflow_raises():
    with pytest.raises(FloatingPointError):
        round(1.5, 400, errors="raise")


#######################
####    INVALID    ####
#######################


def invalid_data():
    case = lambda kwargs, test_input, error_type, msg=None: _TestCase(
        kwargs, test_input, Raises(error_type, msg)
    )

    return Parameters(
        case({"decimals": 1}, np.int32(5), TypeError, "floating point"),
        case({"decimals": 1}, [1, 2, 3], TypeError, "floating point"),
        case({"decimals": 1.0}, 1.5, TypeError, "`decimals`"),
        case({"decimals": True}, 1.5, TypeError, "`decimals`"),
        case({"decimals": 1, "rule": "half_even"}, 1.5, ValueError, "`rule`"),
        case({"decimals": 1, "rule": 1}, 1.5, TypeError, "`rule`"),
        case({"decimals": 1, "errors": "coerce"}, 1.5, ValueError, "`errors`"),
        case({"decimals": 1}, "1.5", TypeError),
        case({"decimals": 1}, True, TypeError),
        case({"decimals": 1}, 1 + 2j, TypeError),
        case({"decimals": 1}, np.float16(1.5), TypeError),
    )


@parametrize(invalid_data())
def test_scale_decimals_rejects_invalid_input(kwargs, test_input, test_output):
    with test_output:
        scale_decimals(test_input, **kwargs)


def test_scale_zeros_rejects_big_integers():
    with pytest.raises(OverflowError, match="64-bit"):
        round_zeros(2**70, 1)
