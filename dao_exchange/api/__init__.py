"""Order-book API module.

This module provides the HTTP-facing layer: identifier validation, the
order-book services that call into the blockchain view, and the aiohttp
server exposing them.

Example:
    ```python
    from dao_exchange.api import OrderBookServer, ServerConfig

    server = OrderBookServer(view, ServerConfig.testnet().with_port(18001))
    await server.start()
    ```
"""

from .config import ServerConfig

from .error import (
    ApiError,
    BadRequestError,
    DeserializeError,
    ErrorResponse,
    InsufficientBalanceError,
    InvalidParameterError,
    ViewError,
)

from .orderbook import OrderBookService, build_order_response

from .server import OrderBookServer, configure_logging, create_app

from .types import (
    DAOCoinLimitOrderEntryResponse,
    DAOCoinLimitOrderRequest,
    GetDAOCoinLimitOrdersRequest,
    GetDAOCoinLimitOrdersResponse,
    GetTransactorDAOCoinLimitOrdersRequest,
    LimitOrderParams,
)

from .validation import (
    decode_public_key_base58check,
    encode_public_key_base58check,
    validate_access_group_key_name,
    validate_access_group_public_key_and_name,
    validate_public_key,
)

from .view import LimitOrderEntry, UniversalView

__all__ = [
    # Config
    "ServerConfig",
    # Errors
    "ApiError",
    "BadRequestError",
    "DeserializeError",
    "ErrorResponse",
    "InsufficientBalanceError",
    "InvalidParameterError",
    "ViewError",
    # Services
    "OrderBookService",
    "build_order_response",
    # Server
    "OrderBookServer",
    "configure_logging",
    "create_app",
    # Types
    "DAOCoinLimitOrderEntryResponse",
    "DAOCoinLimitOrderRequest",
    "GetDAOCoinLimitOrdersRequest",
    "GetDAOCoinLimitOrdersResponse",
    "GetTransactorDAOCoinLimitOrdersRequest",
    "LimitOrderParams",
    # Validation
    "decode_public_key_base58check",
    "encode_public_key_base58check",
    "validate_access_group_key_name",
    "validate_access_group_public_key_and_name",
    "validate_public_key",
    # View
    "LimitOrderEntry",
    "UniversalView",
]
