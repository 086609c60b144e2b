"""Type definitions for the DAO coin exchange."""

from dataclasses import dataclass
from enum import IntEnum

from .constants import DESO_COIN_IDENTIFIER
from .errors import InvalidCoinPairError, UnknownEnumValueError


class OrderOperationType(IntEnum):
    """Side of a DAO coin limit order.

    Values match the on-chain encoding.
    """

    ASK = 1  # Transactor sells the selling coin, quantity is in selling coin
    BID = 2  # Transactor buys the buying coin, quantity is in buying coin

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_label(cls, label: str) -> "OrderOperationType":
        """Map an API string ("ASK" / "BID") to an operation type.

        Raises:
            UnknownEnumValueError: If the label is not recognized
        """
        try:
            return cls[label]
        except (KeyError, TypeError):
            raise UnknownEnumValueError("DAOCoinLimitOrderOperationType", label)

    @classmethod
    def from_value(cls, value: int) -> "OrderOperationType":
        """Map an on-chain integer to an operation type.

        Raises:
            UnknownEnumValueError: If the value is not recognized
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownEnumValueError("DAOCoinLimitOrderOperationType", value)


class OrderFillType(IntEnum):
    """How a limit order is filled against the book."""

    GOOD_TILL_CANCELLED = 1
    IMMEDIATE_OR_CANCEL = 2
    FILL_OR_KILL = 3

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_label(cls, label: str) -> "OrderFillType":
        """Map an API string (e.g. "FILL_OR_KILL") to a fill type.

        Raises:
            UnknownEnumValueError: If the label is not recognized
        """
        try:
            return cls[label]
        except (KeyError, TypeError):
            raise UnknownEnumValueError("DAOCoinLimitOrderFillType", label)


@dataclass(frozen=True)
class Coin:
    """One side of a coin pair.

    The identifier is either the native coin sentinel or a DAO coin
    creator's Base58Check public key.
    """

    identifier: str

    @classmethod
    def native(cls) -> "Coin":
        return cls(DESO_COIN_IDENTIFIER)

    @property
    def is_native(self) -> bool:
        return self.identifier == DESO_COIN_IDENTIFIER

    def __str__(self) -> str:
        return self.identifier


NATIVE_COIN = Coin.native()


def validate_coin_pair(buying_coin: Coin, selling_coin: Coin) -> None:
    """Validate that at most one side of the pair is the native coin.

    Raises:
        InvalidCoinPairError: If both coins are the native coin
    """
    if buying_coin.is_native and selling_coin.is_native:
        raise InvalidCoinPairError()
