"""DAO coin exchange - order-book arithmetic and API layer for a DeSo node.

This package provides two modules:
- `shared`: Fixed-point exchange arithmetic (scaled rates, base units, formatting)
- `api`: Identifier validation, order-book services, and the HTTP server

Example:
    from dao_exchange import Coin, OrderOperationType, scaled_rate_from_price_string

    rate = scaled_rate_from_price_string(
        Coin("DESO"), Coin(creator_key), "1.5", OrderOperationType.BID
    )
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import api
from . import shared

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM SHARED MODULE
# ============================================================================

from .shared import (
    # Constants
    BASE_UNITS_PER_COIN,
    DESO_COIN_IDENTIFIER,
    DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR,
    MAX_UINT256,
    NANOS_PER_UNIT,
    ONE_E38,
    # Types
    Coin,
    NATIVE_COIN,
    OrderFillType,
    OrderOperationType,
    # Errors
    ExchangeArithmeticError,
    InvalidCoinPairError,
    InvalidDecimalFormatError,
    ScaledValueOverflowError,
    ScaledValueUnderflowError,
    UnknownEnumValueError,
    # Scaling
    compute_base_unit_quantity,
    compute_base_units_to_sell,
    compute_scaled_rate,
    denormalize_scaled_rate,
    invert_scaled_rate,
    is_quantity_in_native_units,
    parse_decimal_to_scaled,
    scale_decimal_string,
    # Formatting
    count_decimal_digits,
    format_float_as_decimal_string,
    format_scaled_as_decimal_string,
    # Conversions
    exchange_rate_as_float,
    price_string_from_scaled_rate,
    quantity_as_float,
    quantity_as_string,
    scaled_rate_from_float,
    scaled_rate_from_price_string,
)

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM API MODULE
# ============================================================================

from .api import (
    LimitOrderEntry,
    OrderBookServer,
    OrderBookService,
    ServerConfig,
    UniversalView,
    create_app,
)

__all__ = [
    # Version
    "__version__",
    # Modules
    "api",
    "shared",
    # Constants
    "BASE_UNITS_PER_COIN",
    "DESO_COIN_IDENTIFIER",
    "DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR",
    "MAX_UINT256",
    "NANOS_PER_UNIT",
    "ONE_E38",
    # Types
    "Coin",
    "NATIVE_COIN",
    "OrderFillType",
    "OrderOperationType",
    # Errors
    "ExchangeArithmeticError",
    "InvalidCoinPairError",
    "InvalidDecimalFormatError",
    "ScaledValueOverflowError",
    "ScaledValueUnderflowError",
    "UnknownEnumValueError",
    # Scaling
    "compute_base_unit_quantity",
    "compute_base_units_to_sell",
    "compute_scaled_rate",
    "denormalize_scaled_rate",
    "invert_scaled_rate",
    "is_quantity_in_native_units",
    "parse_decimal_to_scaled",
    "scale_decimal_string",
    # Formatting
    "count_decimal_digits",
    "format_float_as_decimal_string",
    "format_scaled_as_decimal_string",
    # Conversions
    "exchange_rate_as_float",
    "price_string_from_scaled_rate",
    "quantity_as_float",
    "quantity_as_string",
    "scaled_rate_from_float",
    "scaled_rate_from_price_string",
    # API
    "LimitOrderEntry",
    "OrderBookServer",
    "OrderBookService",
    "ServerConfig",
    "UniversalView",
    "create_app",
]
