"""Tests for order types and coin pairs."""

import pytest

from dao_exchange import (
    DESO_COIN_IDENTIFIER,
    NATIVE_COIN,
    Coin,
    InvalidCoinPairError,
    OrderFillType,
    OrderOperationType,
    UnknownEnumValueError,
)
from dao_exchange.shared import validate_coin_pair


class TestOrderOperationType:
    def test_on_chain_values(self):
        assert OrderOperationType.ASK == 1
        assert OrderOperationType.BID == 2

    def test_from_label(self):
        assert OrderOperationType.from_label("ASK") == OrderOperationType.ASK
        assert OrderOperationType.from_label("BID") == OrderOperationType.BID

    def test_label(self):
        assert OrderOperationType.BID.label == "BID"

    @pytest.mark.parametrize("label", ["bid", "SELL", "", None])
    def test_unknown_label(self, label):
        with pytest.raises(UnknownEnumValueError) as exc_info:
            OrderOperationType.from_label(label)
        assert "DAOCoinLimitOrderOperationType" in str(exc_info.value)

    def test_from_value(self):
        assert OrderOperationType.from_value(1) == OrderOperationType.ASK

    def test_unknown_value(self):
        with pytest.raises(UnknownEnumValueError):
            OrderOperationType.from_value(0)


class TestOrderFillType:
    def test_on_chain_values(self):
        assert OrderFillType.GOOD_TILL_CANCELLED == 1
        assert OrderFillType.IMMEDIATE_OR_CANCEL == 2
        assert OrderFillType.FILL_OR_KILL == 3

    def test_from_label(self):
        assert OrderFillType.from_label("FILL_OR_KILL") == OrderFillType.FILL_OR_KILL

    def test_unknown_label(self):
        with pytest.raises(UnknownEnumValueError):
            OrderFillType.from_label("GOOD_TILL_DATE")


class TestCoin:
    def test_native(self):
        assert Coin.native() == NATIVE_COIN
        assert NATIVE_COIN.is_native
        assert str(NATIVE_COIN) == DESO_COIN_IDENTIFIER

    def test_dao_coin(self):
        coin = Coin("BC1YLgDAOCoinX")
        assert not coin.is_native
        assert str(coin) == "BC1YLgDAOCoinX"

    def test_hashable(self):
        assert len({Coin("A"), Coin("A"), NATIVE_COIN}) == 2


class TestValidateCoinPair:
    def test_one_native_side_allowed(self):
        validate_coin_pair(NATIVE_COIN, Coin("A"))
        validate_coin_pair(Coin("A"), NATIVE_COIN)
        validate_coin_pair(Coin("A"), Coin("B"))

    def test_both_native_rejected(self):
        with pytest.raises(InvalidCoinPairError):
            validate_coin_pair(NATIVE_COIN, NATIVE_COIN)
