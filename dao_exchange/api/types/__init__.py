"""Request and response types for the order-book endpoints."""

from .order import (
    DAOCoinLimitOrderEntryResponse,
    DAOCoinLimitOrderRequest,
    GetDAOCoinLimitOrdersRequest,
    GetDAOCoinLimitOrdersResponse,
    GetTransactorDAOCoinLimitOrdersRequest,
    LimitOrderParams,
)

__all__ = [
    "DAOCoinLimitOrderEntryResponse",
    "DAOCoinLimitOrderRequest",
    "GetDAOCoinLimitOrdersRequest",
    "GetDAOCoinLimitOrdersResponse",
    "GetTransactorDAOCoinLimitOrdersRequest",
    "LimitOrderParams",
]
