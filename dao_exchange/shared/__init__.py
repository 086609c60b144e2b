"""Exchange arithmetic shared by the API and order-book modules.

Everything here is pure and stateless, safe to call from concurrent
request handlers.
"""

from .constants import (
    BASE_UNITS_PER_COIN,
    DESO_COIN_IDENTIFIER,
    DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR,
    MAX_UINT256,
    NANOS_PER_UNIT,
    ONE_E38,
    ZERO_PKID,
)
from .conversions import (
    exchange_rate_as_float,
    parse_float_to_scaled,
    price_string_from_scaled_rate,
    quantity_as_float,
    quantity_as_string,
    scaled_rate_from_float,
    scaled_rate_from_price_string,
)
from .errors import (
    ExchangeArithmeticError,
    InvalidCoinPairError,
    InvalidDecimalFormatError,
    ScaledValueOverflowError,
    ScaledValueUnderflowError,
    UnknownEnumValueError,
)
from .price import (
    count_decimal_digits,
    format_float_as_decimal_string,
    format_scaled_as_decimal_string,
    scaled_value_to_float,
)
from .scaling import (
    compute_base_unit_quantity,
    compute_base_units_to_sell,
    compute_scaled_rate,
    denormalize_scaled_rate,
    invert_scaled_rate,
    is_quantity_in_native_units,
    parse_decimal_to_scaled,
    scale_decimal_string,
)
from .types import NATIVE_COIN, Coin, OrderFillType, OrderOperationType, validate_coin_pair


__all__ = [
    # Constants
    "BASE_UNITS_PER_COIN",
    "DESO_COIN_IDENTIFIER",
    "DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR",
    "MAX_UINT256",
    "NANOS_PER_UNIT",
    "ONE_E38",
    "ZERO_PKID",
    # Types
    "Coin",
    "NATIVE_COIN",
    "OrderFillType",
    "OrderOperationType",
    "validate_coin_pair",
    # Errors
    "ExchangeArithmeticError",
    "InvalidCoinPairError",
    "InvalidDecimalFormatError",
    "ScaledValueOverflowError",
    "ScaledValueUnderflowError",
    "UnknownEnumValueError",
    # Scaling
    "scale_decimal_string",
    "parse_decimal_to_scaled",
    "compute_scaled_rate",
    "denormalize_scaled_rate",
    "invert_scaled_rate",
    "is_quantity_in_native_units",
    "compute_base_unit_quantity",
    "compute_base_units_to_sell",
    # Formatting
    "count_decimal_digits",
    "format_scaled_as_decimal_string",
    "format_float_as_decimal_string",
    "scaled_value_to_float",
    # Conversions
    "scaled_rate_from_price_string",
    "scaled_rate_from_float",
    "parse_float_to_scaled",
    "price_string_from_scaled_rate",
    "exchange_rate_as_float",
    "quantity_as_string",
    "quantity_as_float",
]
