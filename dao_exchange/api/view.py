"""Read interface onto the blockchain core's augmented universal view.

The view (UTXO state plus mempool) is owned by the blockchain core. The API
layer only reads from it through this protocol.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class LimitOrderEntry:
    """A DAO coin limit order as stored on-chain.

    PKIDs are 33-byte profile identifiers. The zero PKID marks the $DESO
    side of an order. operation_type and fill_type are the raw on-chain
    integers and are only mapped to enums when the entry is formatted.
    """

    order_id: str
    transactor_pkid: bytes
    buying_dao_coin_creator_pkid: bytes
    selling_dao_coin_creator_pkid: bytes
    scaled_exchange_rate_coins_to_sell_per_coin_to_buy: int
    quantity_to_fill_in_base_units: int
    operation_type: int
    fill_type: int


class UniversalView(Protocol):
    """Queries the order-book endpoints make against the blockchain core."""

    def get_pkid_for_public_key(self, public_key: bytes) -> bytes:
        ...

    def get_public_key_for_pkid(self, pkid: bytes) -> bytes:
        ...

    def get_limit_orders_for_coin_pair(
        self, buying_coin_pkid: bytes, selling_coin_pkid: bytes
    ) -> list[LimitOrderEntry]:
        ...

    def get_limit_orders_for_transactor(self, transactor_pkid: bytes) -> list[LimitOrderEntry]:
        ...

    def get_deso_balance_nanos(self, public_key: bytes) -> int:
        ...

    def get_dao_coin_balance_base_units(
        self, holder_public_key: bytes, creator_public_key: bytes
    ) -> Optional[int]:
        """Balance of a DAO coin held by holder, or None if there is no balance entry."""
        ...
