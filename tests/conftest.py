"""Pytest configuration and shared fixtures."""

from typing import Optional

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from dao_exchange import LimitOrderEntry
from dao_exchange.api import encode_public_key_base58check


def new_public_key() -> bytes:
    """Fresh compressed secp256k1 public key."""
    private_key = ec.generate_private_key(ec.SECP256K1())
    return private_key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


class User:
    """A test account: raw key, Base58Check key, and PKID."""

    def __init__(self, network: str = "mainnet"):
        self.public_key = new_public_key()
        self.base58check = encode_public_key_base58check(self.public_key, network)
        # Accounts that never swapped identities have PKID == public key
        self.pkid = self.public_key


class MockUniversalView:
    """In-memory universal view for testing."""

    def __init__(self):
        self.orders: list[LimitOrderEntry] = []
        self.deso_balances: dict[bytes, int] = {}
        self.dao_coin_balances: dict[tuple[bytes, bytes], int] = {}
        self.fail_with: Optional[Exception] = None

    def add_order(self, order: LimitOrderEntry) -> LimitOrderEntry:
        self.orders.append(order)
        return order

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def get_pkid_for_public_key(self, public_key: bytes) -> bytes:
        self._check()
        return public_key

    def get_public_key_for_pkid(self, pkid: bytes) -> bytes:
        self._check()
        return pkid

    def get_limit_orders_for_coin_pair(self, buying_coin_pkid, selling_coin_pkid):
        self._check()
        return [
            o
            for o in self.orders
            if o.buying_dao_coin_creator_pkid == buying_coin_pkid
            and o.selling_dao_coin_creator_pkid == selling_coin_pkid
        ]

    def get_limit_orders_for_transactor(self, transactor_pkid):
        self._check()
        return [o for o in self.orders if o.transactor_pkid == transactor_pkid]

    def get_deso_balance_nanos(self, public_key: bytes) -> int:
        self._check()
        return self.deso_balances.get(public_key, 0)

    def get_dao_coin_balance_base_units(self, holder_public_key, creator_public_key):
        self._check()
        return self.dao_coin_balances.get((holder_public_key, creator_public_key))


@pytest.fixture
def view():
    return MockUniversalView()


@pytest.fixture
def transactor():
    return User()


@pytest.fixture
def creator():
    return User()
