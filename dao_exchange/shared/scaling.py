"""Fixed-point scaling for DAO coin limit orders.

Exchange rates are unsigned 256-bit integers scaled by 1e38 and expressed
as selling-coin base units per buying-coin base unit. Quantities are
integers in the base unit of the coin they refer to: nanos (1e9) for $DESO
and 1e18 base units for DAO coins.
"""

import re

from .constants import (
    BASE_UNITS_PER_COIN,
    DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR,
    MAX_UINT256,
    NANOS_PER_UNIT,
    ONE_E38,
    ONE_E76,
)
from .errors import (
    InvalidDecimalFormatError,
    ScaledValueOverflowError,
    ScaledValueUnderflowError,
)
from .types import Coin, OrderOperationType, validate_coin_pair

# Unsigned decimal numeral: "1", "1.", "1.5" or ".5"
DECIMAL_NUMERAL_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")
MAX_UINT256_DIGITS = len(str(MAX_UINT256))


def check_uint256(value: int, source, operation: str) -> int:
    """Return value if it fits in 256 bits.

    Raises:
        ScaledValueOverflowError: If value exceeds 2^256 - 1
    """
    if value > MAX_UINT256:
        raise ScaledValueOverflowError(source, operation)
    return value


def scale_decimal_string(value: str, scaling_factor: int) -> int:
    """Scale a decimal string by a power-of-ten scaling_factor, truncating extra digits.

    Ex: scale_decimal_string("1.5", 10**9) -> 1500000000

    Digits beyond the precision of scaling_factor are dropped. A zero
    result is returned unchanged; callers decide whether zero is valid.

    Raises:
        InvalidDecimalFormatError: If value is not a plain decimal numeral
        ScaledValueOverflowError: If the result does not fit in 256 bits
    """
    if not isinstance(value, str) or not DECIMAL_NUMERAL_PATTERN.fullmatch(value):
        raise InvalidDecimalFormatError(value)

    whole_number, _, fraction = value.partition(".")
    whole_number = whole_number.lstrip("0")
    # Any whole part longer than 2^256 - 1 overflows before scaling
    if len(whole_number) > MAX_UINT256_DIGITS:
        raise ScaledValueOverflowError(value, "scaling")
    fraction = fraction[: len(str(scaling_factor))]

    scaled = int(whole_number or "0") * scaling_factor
    if fraction:
        scaled += int(fraction) * scaling_factor // 10 ** len(fraction)
    return check_uint256(scaled, value, "scaling")


def parse_decimal_to_scaled(value: str) -> int:
    """Parse a decimal string into an exchange rate scaled by 1e38.

    Ex: parse_decimal_to_scaled("1.23") -> 123 * 10**36

    Raises:
        InvalidDecimalFormatError: If value is not a plain decimal numeral
        ScaledValueOverflowError: If the result does not fit in 256 bits
        ScaledValueUnderflowError: If the result is zero
    """
    scaled = scale_decimal_string(value, ONE_E38)
    if scaled == 0:
        raise ScaledValueUnderflowError(value, "producing a scaled exchange rate")
    return scaled


def compute_scaled_rate(buying_coin: Coin, selling_coin: Coin, raw_scaled_rate: int) -> int:
    """Convert a coin-to-coin scaled rate into a base-unit-to-base-unit rate.

    A rate entered as coins per coin assumes both sides share a base unit.
    $DESO has 1e9 fewer base units per coin than a DAO coin, so:
      - buying $DESO: multiply by 1e9
      - selling $DESO: divide by 1e9
      - DAO coin for DAO coin: unchanged

    Raises:
        InvalidCoinPairError: If both coins are $DESO
        ScaledValueOverflowError: If the product does not fit in 256 bits
        ScaledValueUnderflowError: If the quotient is zero
    """
    validate_coin_pair(buying_coin, selling_coin)
    if buying_coin.is_native:
        product = raw_scaled_rate * DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR
        return check_uint256(
            product, raw_scaled_rate, "adjusting a scaled exchange rate for buying $DESO"
        )
    if selling_coin.is_native:
        quotient = raw_scaled_rate // DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR
        if quotient == 0:
            raise ScaledValueUnderflowError(
                raw_scaled_rate, "adjusting a scaled exchange rate for selling $DESO"
            )
        return quotient
    return raw_scaled_rate


def denormalize_scaled_rate(buying_coin: Coin, selling_coin: Coin, scaled_rate: int) -> int:
    """Reverse compute_scaled_rate, turning a stored rate back into coins per coin.

    Raises:
        InvalidCoinPairError: If both coins are $DESO
        ScaledValueOverflowError: If the product does not fit in 256 bits
        ScaledValueUnderflowError: If the quotient is zero
    """
    validate_coin_pair(buying_coin, selling_coin)
    if buying_coin.is_native:
        quotient = scaled_rate // DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR
        if quotient == 0:
            raise ScaledValueUnderflowError(
                scaled_rate, "reading a scaled exchange rate for buying $DESO"
            )
        return quotient
    if selling_coin.is_native:
        product = scaled_rate * DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR
        return check_uint256(
            product, scaled_rate, "reading a scaled exchange rate for selling $DESO"
        )
    return scaled_rate


def invert_scaled_rate(scaled_rate: int) -> int:
    """Compute 1 / rate for a rate scaled by 1e38, keeping 38 decimal places.

    The quotient (1e38 * 1e38) / (rate * 1e38) is computed with unbounded
    ints and then checked against the 256-bit limit.

    Raises:
        ScaledValueOverflowError: If the inverse does not fit in 256 bits
        ScaledValueUnderflowError: If the rate is zero or its inverse rounds to zero
    """
    if scaled_rate == 0:
        raise ScaledValueUnderflowError(scaled_rate, "inverting a scaled exchange rate")
    inverted = ONE_E76 // scaled_rate
    if inverted == 0:
        raise ScaledValueUnderflowError(scaled_rate, "inverting a scaled exchange rate")
    return check_uint256(inverted, scaled_rate, "inverting a scaled exchange rate")


def is_quantity_in_native_units(
    buying_coin: Coin,
    selling_coin: Coin,
    operation_type: OrderOperationType,
) -> bool:
    """Whether an order's quantity to fill is denominated in $DESO nanos.

    A BID's quantity refers to the buying coin and an ASK's quantity refers
    to the selling coin. The quantity is in nanos when that coin is $DESO.
    """
    if operation_type == OrderOperationType.BID:
        return buying_coin.is_native
    return selling_coin.is_native


def quantity_scaling_factor(
    buying_coin: Coin,
    selling_coin: Coin,
    operation_type: OrderOperationType,
) -> int:
    """Base units per coin for the side an order's quantity refers to."""
    if is_quantity_in_native_units(buying_coin, selling_coin, operation_type):
        return NANOS_PER_UNIT
    return BASE_UNITS_PER_COIN


def compute_base_unit_quantity(
    buying_coin: Coin,
    selling_coin: Coin,
    operation_type: OrderOperationType,
    quantity: str,
) -> int:
    """Scale a human-entered quantity into base units of the coin it refers to.

    Ex: buying a DAO coin with $DESO as an ASK, "2.5" -> 2500000000 nanos

    Raises:
        InvalidCoinPairError: If both coins are $DESO
        InvalidDecimalFormatError: If quantity is not a plain decimal numeral
        ScaledValueOverflowError: If the result does not fit in 256 bits
        ScaledValueUnderflowError: If the result is zero
    """
    validate_coin_pair(buying_coin, selling_coin)
    scaling_factor = quantity_scaling_factor(buying_coin, selling_coin, operation_type)
    base_units = scale_decimal_string(quantity, scaling_factor)
    if base_units == 0:
        raise ScaledValueUnderflowError(quantity, "converting a quantity to base units")
    return base_units


def compute_base_units_to_sell(
    operation_type: OrderOperationType,
    scaled_rate: int,
    quantity_to_fill: int,
) -> int:
    """Base units of the selling coin an order gives up if fully filled.

    An ASK's quantity is already in the selling coin. A BID's quantity is in
    the buying coin and is converted with the scaled rate.

    Raises:
        ScaledValueOverflowError: If the result does not fit in 256 bits
        ScaledValueUnderflowError: If a nonzero BID quantity rounds to zero
    """
    if operation_type == OrderOperationType.ASK:
        return quantity_to_fill

    base_units_to_sell = scaled_rate * quantity_to_fill // ONE_E38
    if base_units_to_sell == 0 and quantity_to_fill != 0:
        raise ScaledValueUnderflowError(
            quantity_to_fill, "computing base units to sell"
        )
    return check_uint256(
        base_units_to_sell, quantity_to_fill, "computing base units to sell"
    )
