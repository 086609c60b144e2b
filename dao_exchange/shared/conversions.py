"""Conversions between API-facing prices/quantities and on-chain scaled values.

Write path (user input -> transaction inputs):
    scaled_rate_from_price_string, scaled_rate_from_float

Read path (order entries -> JSON):
    price_string_from_scaled_rate, exchange_rate_as_float,
    quantity_as_string, quantity_as_float
"""

from .constants import ONE_E38
from .price import (
    format_float_as_decimal_string,
    format_scaled_as_decimal_string,
    scaled_value_to_float,
)
from .scaling import (
    compute_scaled_rate,
    denormalize_scaled_rate,
    invert_scaled_rate,
    parse_decimal_to_scaled,
    quantity_scaling_factor,
)
from .types import Coin, OrderOperationType


def scaled_rate_from_price_string(
    buying_coin: Coin,
    selling_coin: Coin,
    price: str,
    operation_type: OrderOperationType,
) -> int:
    """Convert a decimal price into a base-unit exchange rate scaled by 1e38.

    For a BID, price is selling coins per buying coin, which is already the
    stored direction. For an ASK, price is buying coins per selling coin and
    is inverted before the denomination adjustment.

    Raises:
        ExchangeArithmeticError: If the price cannot be represented
    """
    raw_scaled_rate = parse_decimal_to_scaled(price)
    if operation_type == OrderOperationType.ASK:
        raw_scaled_rate = invert_scaled_rate(raw_scaled_rate)
    return compute_scaled_rate(buying_coin, selling_coin, raw_scaled_rate)


def scaled_rate_from_float(
    buying_coin: Coin,
    selling_coin: Coin,
    exchange_rate_coins_to_sell_per_coin_to_buy: float,
) -> int:
    """Convert a float coins-to-sell per coin-to-buy rate into a scaled rate.

    The float is printed with at most 15 significant digits first so that
    float64 noise never reaches the scaled value.

    Raises:
        ExchangeArithmeticError: If the rate cannot be represented
    """
    raw_scaled_rate = parse_float_to_scaled(exchange_rate_coins_to_sell_per_coin_to_buy)
    return compute_scaled_rate(buying_coin, selling_coin, raw_scaled_rate)


def parse_float_to_scaled(value: float) -> int:
    """Parse a float into a value scaled by 1e38."""
    return parse_decimal_to_scaled(format_float_as_decimal_string(value))


def price_string_from_scaled_rate(
    buying_coin: Coin,
    selling_coin: Coin,
    scaled_rate: int,
    operation_type: OrderOperationType,
) -> str:
    """Render a stored exchange rate as the price a user would have entered.

    Mirrors scaled_rate_from_price_string: the denomination adjustment is
    undone and ASK rates are inverted back to buying coins per selling coin.

    Raises:
        ExchangeArithmeticError: If the rate cannot be rendered
    """
    coin_rate = denormalize_scaled_rate(buying_coin, selling_coin, scaled_rate)
    if operation_type == OrderOperationType.ASK:
        coin_rate = invert_scaled_rate(coin_rate)
    return format_scaled_as_decimal_string(coin_rate, ONE_E38)


def exchange_rate_as_float(
    buying_coin: Coin,
    selling_coin: Coin,
    scaled_rate: int,
) -> float:
    """Coin-level coins-to-sell per coin-to-buy rate as a float.

    Raises:
        ExchangeArithmeticError: If the rate cannot be rendered
    """
    coin_rate = denormalize_scaled_rate(buying_coin, selling_coin, scaled_rate)
    return scaled_value_to_float(coin_rate, ONE_E38)


def quantity_as_string(
    buying_coin: Coin,
    selling_coin: Coin,
    operation_type: OrderOperationType,
    quantity_to_fill_in_base_units: int,
) -> str:
    """Render a base-unit quantity in whole coins of the side it refers to."""
    scaling_factor = quantity_scaling_factor(buying_coin, selling_coin, operation_type)
    return format_scaled_as_decimal_string(quantity_to_fill_in_base_units, scaling_factor)


def quantity_as_float(
    buying_coin: Coin,
    selling_coin: Coin,
    operation_type: OrderOperationType,
    quantity_to_fill_in_base_units: int,
) -> float:
    scaling_factor = quantity_scaling_factor(buying_coin, selling_coin, operation_type)
    return scaled_value_to_float(quantity_to_fill_in_base_units, scaling_factor)
