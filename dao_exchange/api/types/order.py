"""Order-related request and response types for the order-book endpoints."""

from dataclasses import dataclass, field
from typing import Optional

from ...shared.types import OrderFillType, OrderOperationType
from ..error import DeserializeError


def _require_str(data: dict, key: str, type_name: str) -> str:
    try:
        value = data[key]
    except KeyError as e:
        raise DeserializeError(f"Missing required field in {type_name}: {e}")
    if not isinstance(value, str):
        raise DeserializeError(f"Field {key} in {type_name} must be a string")
    return value


def _optional_float(data: dict, key: str, type_name: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializeError(f"Field {key} in {type_name} must be a number")
    try:
        return float(value)
    except OverflowError:
        raise DeserializeError(f"Field {key} in {type_name} is too large for a float")


@dataclass
class GetDAOCoinLimitOrdersRequest:
    """Request for POST /api/v0/get-dao-coin-limit-orders."""

    dao_coin1_creator_public_key: str
    dao_coin2_creator_public_key: str

    @classmethod
    def from_dict(cls, data: dict) -> "GetDAOCoinLimitOrdersRequest":
        name = "GetDAOCoinLimitOrdersRequest"
        return cls(
            dao_coin1_creator_public_key=_require_str(
                data, "DAOCoin1CreatorPublicKeyBase58Check", name
            ),
            dao_coin2_creator_public_key=_require_str(
                data, "DAOCoin2CreatorPublicKeyBase58Check", name
            ),
        )


@dataclass
class GetTransactorDAOCoinLimitOrdersRequest:
    """Request for POST /api/v0/get-transactor-dao-coin-limit-orders."""

    transactor_public_key: str

    @classmethod
    def from_dict(cls, data: dict) -> "GetTransactorDAOCoinLimitOrdersRequest":
        return cls(
            transactor_public_key=_require_str(
                data, "TransactorPublicKeyBase58Check", "GetTransactorDAOCoinLimitOrdersRequest"
            ),
        )


@dataclass
class DAOCoinLimitOrderRequest:
    """Request describing a new limit order.

    Either price or the deprecated exchange_rate_coins_to_sell_per_coin_to_buy
    must be set, and either quantity or the deprecated quantity_to_fill.
    """

    transactor_public_key: str
    buying_dao_coin_creator_public_key: str
    selling_dao_coin_creator_public_key: str
    operation_type: str
    fill_type: str = OrderFillType.GOOD_TILL_CANCELLED.label
    price: Optional[str] = None
    quantity: Optional[str] = None
    exchange_rate_coins_to_sell_per_coin_to_buy: Optional[float] = None
    quantity_to_fill: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DAOCoinLimitOrderRequest":
        name = "DAOCoinLimitOrderRequest"
        price = data.get("Price") or None
        quantity = data.get("Quantity") or None
        if price is not None and not isinstance(price, str):
            raise DeserializeError(f"Field Price in {name} must be a string")
        if quantity is not None and not isinstance(quantity, str):
            raise DeserializeError(f"Field Quantity in {name} must be a string")
        return cls(
            transactor_public_key=_require_str(data, "TransactorPublicKeyBase58Check", name),
            buying_dao_coin_creator_public_key=_require_str(
                data, "BuyingDAOCoinCreatorPublicKeyBase58Check", name
            ),
            selling_dao_coin_creator_public_key=_require_str(
                data, "SellingDAOCoinCreatorPublicKeyBase58Check", name
            ),
            operation_type=_require_str(data, "OperationType", name),
            fill_type=data.get("FillType") or OrderFillType.GOOD_TILL_CANCELLED.label,
            price=price,
            quantity=quantity,
            exchange_rate_coins_to_sell_per_coin_to_buy=_optional_float(
                data, "ExchangeRateCoinsToSellPerCoinToBuy", name
            ),
            quantity_to_fill=_optional_float(data, "QuantityToFill", name),
        )


@dataclass
class LimitOrderParams:
    """Scaled inputs handed to the transaction builder for a new limit order.

    Creator public keys are None for the $DESO side.
    """

    transactor_public_key: bytes
    buying_dao_coin_creator_public_key: Optional[bytes]
    selling_dao_coin_creator_public_key: Optional[bytes]
    scaled_exchange_rate_coins_to_sell_per_coin_to_buy: int
    quantity_to_fill_in_base_units: int
    operation_type: OrderOperationType
    fill_type: OrderFillType

    def to_dict(self) -> dict:
        # uint256 values go out as decimal strings, JSON numbers can't hold them
        return {
            "ScaledExchangeRateCoinsToSellPerCoinToBuy": str(
                self.scaled_exchange_rate_coins_to_sell_per_coin_to_buy
            ),
            "QuantityToFillInBaseUnits": str(self.quantity_to_fill_in_base_units),
            "OperationType": self.operation_type.label,
            "FillType": self.fill_type.label,
        }


@dataclass
class DAOCoinLimitOrderEntryResponse:
    """A limit order as returned by the order-book endpoints."""

    transactor_public_key: str
    buying_dao_coin_creator_public_key: str
    selling_dao_coin_creator_public_key: str
    price: str
    quantity: str
    exchange_rate_coins_to_sell_per_coin_to_buy: float  # Deprecated
    quantity_to_fill: float  # Deprecated
    operation_type: str
    order_id: str

    def to_dict(self) -> dict:
        return {
            "TransactorPublicKeyBase58Check": self.transactor_public_key,
            "BuyingDAOCoinCreatorPublicKeyBase58Check": self.buying_dao_coin_creator_public_key,
            "SellingDAOCoinCreatorPublicKeyBase58Check": self.selling_dao_coin_creator_public_key,
            "Price": self.price,
            "Quantity": self.quantity,
            "ExchangeRateCoinsToSellPerCoinToBuy": self.exchange_rate_coins_to_sell_per_coin_to_buy,
            "QuantityToFill": self.quantity_to_fill,
            "OperationType": self.operation_type,
            "OrderID": self.order_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DAOCoinLimitOrderEntryResponse":
        try:
            return cls(
                transactor_public_key=data["TransactorPublicKeyBase58Check"],
                buying_dao_coin_creator_public_key=data["BuyingDAOCoinCreatorPublicKeyBase58Check"],
                selling_dao_coin_creator_public_key=data["SellingDAOCoinCreatorPublicKeyBase58Check"],
                price=data["Price"],
                quantity=data["Quantity"],
                exchange_rate_coins_to_sell_per_coin_to_buy=data["ExchangeRateCoinsToSellPerCoinToBuy"],
                quantity_to_fill=data["QuantityToFill"],
                operation_type=data["OperationType"],
                order_id=data["OrderID"],
            )
        except KeyError as e:
            raise DeserializeError(
                f"Missing required field in DAOCoinLimitOrderEntryResponse: {e}"
            )


@dataclass
class GetDAOCoinLimitOrdersResponse:
    """Response for both order listing endpoints."""

    orders: list[DAOCoinLimitOrderEntryResponse] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"Orders": [order.to_dict() for order in self.orders]}

    @classmethod
    def from_dict(cls, data: dict) -> "GetDAOCoinLimitOrdersResponse":
        return cls(
            orders=[
                DAOCoinLimitOrderEntryResponse.from_dict(o)
                for o in data.get("Orders") or []
            ],
        )
