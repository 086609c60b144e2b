"""DAO coin limit order book services.

Read path: turn on-chain order entries into API responses. A single entry
that cannot be formatted is skipped and logged so one bad historical order
does not break the whole listing.

Write path: turn a limit order request into scaled transaction inputs and
check the transactor can cover it. Any error fails the request.
"""

import logging
from typing import Optional

from ..shared.constants import ZERO_PKID
from ..shared.conversions import (
    exchange_rate_as_float,
    price_string_from_scaled_rate,
    quantity_as_float,
    quantity_as_string,
    scaled_rate_from_float,
    scaled_rate_from_price_string,
)
from ..shared.errors import ExchangeArithmeticError
from ..shared.price import format_float_as_decimal_string
from ..shared.scaling import (
    check_uint256,
    compute_base_unit_quantity,
    compute_base_units_to_sell,
)
from ..shared.types import (
    Coin,
    OrderFillType,
    OrderOperationType,
    validate_coin_pair,
)
from .error import BadRequestError, InsufficientBalanceError, ViewError
from .types import (
    DAOCoinLimitOrderEntryResponse,
    DAOCoinLimitOrderRequest,
    LimitOrderParams,
)
from .validation import decode_public_key_base58check, encode_public_key_base58check
from .view import LimitOrderEntry, UniversalView

logger = logging.getLogger(__name__)


def build_order_response(
    transactor_public_key: str,
    buying_coin: Coin,
    selling_coin: Coin,
    order: LimitOrderEntry,
) -> DAOCoinLimitOrderEntryResponse:
    """Format a single on-chain order entry.

    Errors here mean an order with invalid values made it onto the book.

    Raises:
        ExchangeArithmeticError: If any field cannot be formatted
    """
    operation_type = OrderOperationType.from_value(order.operation_type)
    scaled_rate = order.scaled_exchange_rate_coins_to_sell_per_coin_to_buy
    quantity = order.quantity_to_fill_in_base_units

    return DAOCoinLimitOrderEntryResponse(
        transactor_public_key=transactor_public_key,
        buying_dao_coin_creator_public_key=buying_coin.identifier,
        selling_dao_coin_creator_public_key=selling_coin.identifier,
        price=price_string_from_scaled_rate(
            buying_coin, selling_coin, scaled_rate, operation_type
        ),
        quantity=quantity_as_string(buying_coin, selling_coin, operation_type, quantity),
        exchange_rate_coins_to_sell_per_coin_to_buy=exchange_rate_as_float(
            buying_coin, selling_coin, scaled_rate
        ),
        quantity_to_fill=quantity_as_float(buying_coin, selling_coin, operation_type, quantity),
        operation_type=operation_type.label,
        order_id=order.order_id,
    )


class OrderBookService:
    """Order-book queries and order preparation against a universal view.

    Example:
        ```python
        service = OrderBookService(view, network="testnet")
        orders = service.get_limit_orders(Coin("DESO"), Coin(creator_key))
        ```
    """

    def __init__(self, view: UniversalView, network: str = "mainnet"):
        self._view = view
        self._network = network

    @property
    def network(self) -> str:
        return self._network

    # ------------------------------------------------------------------
    # Identity resolution
    # ------------------------------------------------------------------

    def get_pkid_for_public_key(self, public_key_base58check: str, field_name: str) -> bytes:
        """Decode a Base58Check public key and resolve its PKID.

        Raises:
            InvalidParameterError: If the key is invalid
            ViewError: If the view lookup fails
        """
        public_key = decode_public_key_base58check(public_key_base58check, field_name)
        try:
            return self._view.get_pkid_for_public_key(public_key)
        except Exception as e:
            raise ViewError(f"Problem fetching PKID for {field_name}: {e}") from e

    def get_coin_pkid(self, coin: Coin, field_name: str) -> bytes:
        """PKID for one side of a pair, the zero PKID for $DESO."""
        if coin.is_native:
            return ZERO_PKID
        return self.get_pkid_for_public_key(coin.identifier, field_name)

    def get_public_key_base58check_for_pkid(self, pkid: bytes) -> str:
        try:
            public_key = self._view.get_public_key_for_pkid(pkid)
        except Exception as e:
            raise ViewError(f"Problem fetching public key for PKID {pkid.hex()}: {e}") from e
        return encode_public_key_base58check(public_key, self._network)

    def get_coin_for_pkid(self, pkid: bytes) -> Coin:
        """Coin identified by a PKID, $DESO for the zero PKID."""
        if pkid == ZERO_PKID:
            return Coin.native()
        return Coin(self.get_public_key_base58check_for_pkid(pkid))

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def get_limit_orders(
        self, coin1: Coin, coin2: Coin
    ) -> list[DAOCoinLimitOrderEntryResponse]:
        """All open orders on both sides of a coin pair.

        Raises:
            BadRequestError: If both coins are $DESO
            InvalidParameterError: If a creator public key is invalid
            ViewError: If the view fails
        """
        if coin1.is_native and coin2.is_native:
            raise BadRequestError(
                "Must provide either a DAOCoin1CreatorPublicKeyBase58Check or "
                "DAOCoin2CreatorPublicKeyBase58Check or both"
            )

        coin1_pkid = self.get_coin_pkid(coin1, "DAOCoin1CreatorPublicKeyBase58Check")
        coin2_pkid = self.get_coin_pkid(coin2, "DAOCoin2CreatorPublicKeyBase58Check")

        orders_buying_coin1 = self._fetch_coin_pair_orders(coin1_pkid, coin2_pkid)
        orders_buying_coin2 = self._fetch_coin_pair_orders(coin2_pkid, coin1_pkid)

        return self.build_responses_for_coin_pair(
            coin1, coin2, orders_buying_coin1
        ) + self.build_responses_for_coin_pair(coin2, coin1, orders_buying_coin2)

    def get_transactor_limit_orders(
        self, transactor_public_key: str
    ) -> list[DAOCoinLimitOrderEntryResponse]:
        """All open orders placed by a transactor.

        Raises:
            InvalidParameterError: If the public key is invalid
            ViewError: If the view fails
        """
        transactor_pkid = self.get_pkid_for_public_key(
            transactor_public_key, "TransactorPublicKeyBase58Check"
        )
        orders = self._fetch_transactor_orders(transactor_pkid)
        return self.build_responses_for_transactor(transactor_public_key, orders)

    def build_responses_for_coin_pair(
        self,
        buying_coin: Coin,
        selling_coin: Coin,
        orders: list[LimitOrderEntry],
    ) -> list[DAOCoinLimitOrderEntryResponse]:
        responses = []
        for order in orders:
            try:
                transactor_public_key = self.get_public_key_base58check_for_pkid(
                    order.transactor_pkid
                )
                response = build_order_response(
                    transactor_public_key, buying_coin, selling_coin, order
                )
            except ExchangeArithmeticError as e:
                logger.warning(
                    f"Unable to build DAO coin limit order response for OrderID {order.order_id}: {e}"
                )
                continue
            responses.append(response)
        return responses

    def build_responses_for_transactor(
        self,
        transactor_public_key: str,
        orders: list[LimitOrderEntry],
    ) -> list[DAOCoinLimitOrderEntryResponse]:
        responses = []
        for order in orders:
            try:
                buying_coin = self.get_coin_for_pkid(order.buying_dao_coin_creator_pkid)
                selling_coin = self.get_coin_for_pkid(order.selling_dao_coin_creator_pkid)
                response = build_order_response(
                    transactor_public_key, buying_coin, selling_coin, order
                )
            except ExchangeArithmeticError as e:
                logger.warning(
                    f"Unable to build DAO coin limit order response for OrderID {order.order_id}: {e}"
                )
                continue
            responses.append(response)
        return responses

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    def prepare_limit_order(self, request: DAOCoinLimitOrderRequest) -> LimitOrderParams:
        """Validate a limit order request and scale its price and quantity.

        Raises:
            InvalidParameterError: If a public key is invalid
            BadRequestError: If price or quantity is missing
            ExchangeArithmeticError: If a value cannot be scaled
        """
        transactor_public_key = decode_public_key_base58check(
            request.transactor_public_key, "TransactorPublicKeyBase58Check"
        )
        buying_coin = Coin(request.buying_dao_coin_creator_public_key)
        selling_coin = Coin(request.selling_dao_coin_creator_public_key)
        validate_coin_pair(buying_coin, selling_coin)
        buying_public_key = self._decode_coin(
            buying_coin, "BuyingDAOCoinCreatorPublicKeyBase58Check"
        )
        selling_public_key = self._decode_coin(
            selling_coin, "SellingDAOCoinCreatorPublicKeyBase58Check"
        )

        operation_type = OrderOperationType.from_label(request.operation_type)
        fill_type = OrderFillType.from_label(request.fill_type)

        if request.price is not None:
            scaled_rate = scaled_rate_from_price_string(
                buying_coin, selling_coin, request.price, operation_type
            )
        elif request.exchange_rate_coins_to_sell_per_coin_to_buy is not None:
            scaled_rate = scaled_rate_from_float(
                buying_coin, selling_coin, request.exchange_rate_coins_to_sell_per_coin_to_buy
            )
        else:
            raise BadRequestError("Must provide Price or ExchangeRateCoinsToSellPerCoinToBuy")

        if request.quantity is not None:
            quantity = request.quantity
        elif request.quantity_to_fill is not None:
            quantity = format_float_as_decimal_string(request.quantity_to_fill)
        else:
            raise BadRequestError("Must provide Quantity or QuantityToFill")

        quantity_to_fill = compute_base_unit_quantity(
            buying_coin, selling_coin, operation_type, quantity
        )

        return LimitOrderParams(
            transactor_public_key=transactor_public_key,
            buying_dao_coin_creator_public_key=buying_public_key,
            selling_dao_coin_creator_public_key=selling_public_key,
            scaled_exchange_rate_coins_to_sell_per_coin_to_buy=scaled_rate,
            quantity_to_fill_in_base_units=quantity_to_fill,
            operation_type=operation_type,
            fill_type=fill_type,
        )

    def validate_transactor_selling_coin_balance(self, params: LimitOrderParams) -> None:
        """Check the transactor can cover this order plus their open orders on the pair.

        Raises:
            InsufficientBalanceError: If the selling balance is too low
            ViewError: If the view fails or has no balance entry
            ExchangeArithmeticError: If a selling amount cannot be computed
        """
        transactor_pkid = self._lookup_pkid(params.transactor_public_key)
        buying_coin_pkid = self._coin_pkid_from_public_key(
            params.buying_dao_coin_creator_public_key
        )
        selling_coin_pkid = self._coin_pkid_from_public_key(
            params.selling_dao_coin_creator_public_key
        )
        available = self._selling_balance(
            params.transactor_public_key, params.selling_dao_coin_creator_public_key
        )

        total_selling_base_units = compute_base_units_to_sell(
            params.operation_type,
            params.scaled_exchange_rate_coins_to_sell_per_coin_to_buy,
            params.quantity_to_fill_in_base_units,
        )

        for order in self._fetch_transactor_orders(transactor_pkid):
            if (
                order.buying_dao_coin_creator_pkid != buying_coin_pkid
                or order.selling_dao_coin_creator_pkid != selling_coin_pkid
            ):
                continue
            order_selling_base_units = compute_base_units_to_sell(
                OrderOperationType.from_value(order.operation_type),
                order.scaled_exchange_rate_coins_to_sell_per_coin_to_buy,
                order.quantity_to_fill_in_base_units,
            )
            total_selling_base_units = check_uint256(
                total_selling_base_units + order_selling_base_units,
                order.order_id,
                "adding open order selling quantity for OrderID",
            )

        if available < total_selling_base_units:
            raise InsufficientBalanceError(total_selling_base_units, available)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _decode_coin(self, coin: Coin, field_name: str) -> Optional[bytes]:
        if coin.is_native:
            return None
        return decode_public_key_base58check(coin.identifier, field_name)

    def _lookup_pkid(self, public_key: bytes) -> bytes:
        try:
            return self._view.get_pkid_for_public_key(public_key)
        except Exception as e:
            raise ViewError(f"Problem fetching PKID: {e}") from e

    def _coin_pkid_from_public_key(self, public_key: Optional[bytes]) -> bytes:
        if public_key is None:
            return ZERO_PKID
        return self._lookup_pkid(public_key)

    def _selling_balance(
        self, transactor_public_key: bytes, selling_public_key: Optional[bytes]
    ) -> int:
        try:
            if selling_public_key is None:
                return self._view.get_deso_balance_nanos(transactor_public_key)
            balance = self._view.get_dao_coin_balance_base_units(
                transactor_public_key, selling_public_key
            )
        except Exception as e:
            raise ViewError(f"Problem fetching transactor selling balance: {e}") from e
        if balance is None:
            raise ViewError("Transactor DAO coin balance not found")
        return balance

    def _fetch_coin_pair_orders(
        self, buying_coin_pkid: bytes, selling_coin_pkid: bytes
    ) -> list[LimitOrderEntry]:
        try:
            return self._view.get_limit_orders_for_coin_pair(buying_coin_pkid, selling_coin_pkid)
        except Exception as e:
            raise ViewError(f"Error getting limit orders: {e}") from e

    def _fetch_transactor_orders(self, transactor_pkid: bytes) -> list[LimitOrderEntry]:
        try:
            return self._view.get_limit_orders_for_transactor(transactor_pkid)
        except Exception as e:
            raise ViewError(f"Error getting limit orders: {e}") from e
