"""Tests for the scaling module."""

import pytest

from dao_exchange import (
    MAX_UINT256,
    NATIVE_COIN,
    Coin,
    InvalidCoinPairError,
    InvalidDecimalFormatError,
    OrderOperationType,
    ScaledValueOverflowError,
    ScaledValueUnderflowError,
    compute_base_unit_quantity,
    compute_base_units_to_sell,
    compute_scaled_rate,
    denormalize_scaled_rate,
    invert_scaled_rate,
    is_quantity_in_native_units,
    parse_decimal_to_scaled,
    scale_decimal_string,
)

DAO_COIN_X = Coin("BC1YLgDAOCoinX")
DAO_COIN_Y = Coin("BC1YLgDAOCoinY")


class TestParseDecimalToScaled:
    def test_whole_number(self):
        assert parse_decimal_to_scaled("1") == 10**38

    def test_fractional_value(self):
        assert parse_decimal_to_scaled("1.23456") == 123456 * 10**33

    def test_leading_and_trailing_point(self):
        assert parse_decimal_to_scaled(".5") == 5 * 10**37
        assert parse_decimal_to_scaled("2.") == 2 * 10**38

    def test_smallest_representable_value(self):
        assert parse_decimal_to_scaled("0." + "0" * 37 + "1") == 1

    def test_truncates_beyond_38_places(self):
        assert parse_decimal_to_scaled("0." + "0" * 37 + "19") == 1

    def test_long_precise_input(self):
        value = "12345678901234567890.12345678901234567890123456789012345678"
        assert parse_decimal_to_scaled(value) == int(value.replace(".", ""))

    @pytest.mark.parametrize(
        "value",
        [
            "", "abc", "1.2.3", "-1", "+1", "1e5", "NaN", "Infinity", " 1", "1,5", ".",
            "1.5\n", "1.5 ", "\u0661.\u0665",
        ],
    )
    def test_rejects_non_decimal_numerals(self, value):
        with pytest.raises(InvalidDecimalFormatError):
            parse_decimal_to_scaled(value)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidDecimalFormatError):
            parse_decimal_to_scaled(1.5)

    def test_zero_underflows(self):
        with pytest.raises(ScaledValueUnderflowError):
            parse_decimal_to_scaled("0")

    def test_too_small_underflows(self):
        with pytest.raises(ScaledValueUnderflowError):
            parse_decimal_to_scaled("0." + "0" * 38 + "1")

    def test_overflow(self):
        with pytest.raises(ScaledValueOverflowError):
            parse_decimal_to_scaled(str(2**256))

    def test_long_fraction_of_zeros(self):
        assert parse_decimal_to_scaled("1." + "0" * 5000) == 10**38

    def test_long_leading_zeros(self):
        assert parse_decimal_to_scaled("0" * 5000 + "2.5") == 25 * 10**37

    def test_long_whole_number_overflows(self):
        with pytest.raises(ScaledValueOverflowError):
            parse_decimal_to_scaled("9" * 5000)


class TestScaleDecimalString:
    def test_scales_by_nanos(self):
        assert scale_decimal_string("1.5", 10**9) == 1_500_000_000

    def test_long_fraction_truncated(self):
        assert scale_decimal_string("0.5" + "9" * 5000, 10**9) == 599_999_999

    def test_truncates_to_factor_precision(self):
        assert scale_decimal_string("0.0000000019", 10**9) == 1

    def test_zero_is_returned(self):
        assert scale_decimal_string("0", 10**18) == 0

    def test_max_uint256_fits(self):
        assert scale_decimal_string(str(MAX_UINT256), 1) == MAX_UINT256

    def test_overflow(self):
        with pytest.raises(ScaledValueOverflowError):
            scale_decimal_string(str(MAX_UINT256 + 1), 1)


class TestComputeScaledRate:
    def test_buying_native_multiplies(self):
        raw = parse_decimal_to_scaled("1.5")
        assert compute_scaled_rate(NATIVE_COIN, DAO_COIN_Y, raw) == 15 * 10**37 * 10**9

    def test_selling_native_divides(self):
        raw = parse_decimal_to_scaled("1.5")
        assert compute_scaled_rate(DAO_COIN_X, NATIVE_COIN, raw) == 15 * 10**28

    def test_dao_coin_pair_unchanged(self):
        raw = parse_decimal_to_scaled("1.5")
        assert compute_scaled_rate(DAO_COIN_X, DAO_COIN_Y, raw) == raw

    def test_both_native_rejected(self):
        with pytest.raises(InvalidCoinPairError):
            compute_scaled_rate(NATIVE_COIN, NATIVE_COIN, 10**38)

    def test_selling_native_underflow(self):
        raw = parse_decimal_to_scaled("0.000000000000000000000000000000000001")
        with pytest.raises(ScaledValueUnderflowError):
            compute_scaled_rate(DAO_COIN_X, NATIVE_COIN, raw)

    def test_buying_native_overflow(self):
        raw = MAX_UINT256 // 10**9 + 1
        with pytest.raises(ScaledValueOverflowError):
            compute_scaled_rate(NATIVE_COIN, DAO_COIN_X, raw)

    def test_buying_native_at_limit(self):
        raw = MAX_UINT256 // 10**9
        assert compute_scaled_rate(NATIVE_COIN, DAO_COIN_X, raw) == raw * 10**9


class TestDenormalizeScaledRate:
    def test_recovers_buying_native_rate(self):
        raw = 123456789 * 10**30
        scaled = compute_scaled_rate(NATIVE_COIN, DAO_COIN_X, raw)
        assert denormalize_scaled_rate(NATIVE_COIN, DAO_COIN_X, scaled) == raw

    def test_recovers_selling_native_rate_within_truncation(self):
        raw = 123456789 * 10**9 + 5
        scaled = compute_scaled_rate(DAO_COIN_X, NATIVE_COIN, raw)
        assert denormalize_scaled_rate(DAO_COIN_X, NATIVE_COIN, scaled) == raw - 5

    def test_buying_native_underflow(self):
        with pytest.raises(ScaledValueUnderflowError):
            denormalize_scaled_rate(NATIVE_COIN, DAO_COIN_X, 10**9 - 1)

    def test_selling_native_overflow(self):
        with pytest.raises(ScaledValueOverflowError):
            denormalize_scaled_rate(DAO_COIN_X, NATIVE_COIN, MAX_UINT256)


class TestInvertScaledRate:
    def test_one_is_its_own_inverse(self):
        assert invert_scaled_rate(10**38) == 10**38

    def test_inverts_two(self):
        assert invert_scaled_rate(2 * 10**38) == 5 * 10**37

    def test_involution(self):
        rate = 4 * 10**38
        assert invert_scaled_rate(invert_scaled_rate(rate)) == rate

    def test_keeps_38_places(self):
        # 1/3 = 0.333... to 38 places
        assert invert_scaled_rate(3 * 10**38) == int("3" * 38)

    def test_zero_underflows(self):
        with pytest.raises(ScaledValueUnderflowError):
            invert_scaled_rate(0)

    def test_huge_rate_underflows(self):
        with pytest.raises(ScaledValueUnderflowError):
            invert_scaled_rate(10**76 + 1)


class TestIsQuantityInNativeUnits:
    def test_bid_buying_native(self):
        assert is_quantity_in_native_units(NATIVE_COIN, DAO_COIN_X, OrderOperationType.BID)

    def test_ask_buying_native(self):
        assert not is_quantity_in_native_units(NATIVE_COIN, DAO_COIN_X, OrderOperationType.ASK)

    def test_ask_selling_native(self):
        assert is_quantity_in_native_units(DAO_COIN_X, NATIVE_COIN, OrderOperationType.ASK)

    def test_bid_selling_native(self):
        assert not is_quantity_in_native_units(DAO_COIN_X, NATIVE_COIN, OrderOperationType.BID)

    def test_dao_coin_pair(self):
        for operation_type in OrderOperationType:
            assert not is_quantity_in_native_units(DAO_COIN_X, DAO_COIN_Y, operation_type)


class TestComputeBaseUnitQuantity:
    def test_ask_selling_native_uses_nanos(self):
        quantity = compute_base_unit_quantity(
            DAO_COIN_X, NATIVE_COIN, OrderOperationType.ASK, "2.5"
        )
        assert quantity == 2_500_000_000

    def test_bid_buying_dao_coin_uses_dao_base_units(self):
        quantity = compute_base_unit_quantity(
            DAO_COIN_X, NATIVE_COIN, OrderOperationType.BID, "2.5"
        )
        assert quantity == 25 * 10**17

    def test_nanos_underflow(self):
        with pytest.raises(ScaledValueUnderflowError):
            compute_base_unit_quantity(
                NATIVE_COIN, DAO_COIN_X, OrderOperationType.BID, "0.0000000001"
            )

    def test_invalid_quantity(self):
        with pytest.raises(InvalidDecimalFormatError):
            compute_base_unit_quantity(DAO_COIN_X, DAO_COIN_Y, OrderOperationType.BID, "ten")

    def test_both_native_rejected(self):
        with pytest.raises(InvalidCoinPairError):
            compute_base_unit_quantity(NATIVE_COIN, NATIVE_COIN, OrderOperationType.BID, "1")


class TestComputeBaseUnitsToSell:
    def test_ask_sells_quantity(self):
        assert compute_base_units_to_sell(OrderOperationType.ASK, 2 * 10**38, 7) == 7

    def test_bid_converts_with_rate(self):
        assert compute_base_units_to_sell(OrderOperationType.BID, 2 * 10**38, 3) == 6

    def test_bid_underflow(self):
        with pytest.raises(ScaledValueUnderflowError):
            compute_base_units_to_sell(OrderOperationType.BID, 1, 5)

    def test_bid_overflow(self):
        with pytest.raises(ScaledValueOverflowError):
            compute_base_units_to_sell(OrderOperationType.BID, MAX_UINT256, 2 * 10**38)
