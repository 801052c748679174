from __future__ import annotations

import pytest
from conftest import CONTRACT

from frenparty_client.encoding import from_base64


def test_config_query(query_composer) -> None:
    q = query_composer.config()
    assert q.contract_address == CONTRACT
    assert q.query == {"config": {}}
    assert q.query_data == b'{"config":{}}'


def test_shares_balance_query(query_composer) -> None:
    q = query_composer.shares_balance("bob", "alice")
    assert q.query_data == b'{"shares_balance":{"subject":"bob","holder":"alice"}}'


def test_shares_supply_query(query_composer) -> None:
    assert query_composer.shares_supply("bob").query == {"shares_supply": {"subject": "bob"}}


@pytest.mark.parametrize(
    "method", ["buy_price", "buy_price_after_fee", "sell_price", "sell_price_after_fee"]
)
def test_price_queries_keyed_by_name(query_composer, method) -> None:
    q = getattr(query_composer, method)("bob", "3")
    assert q.query == {method: {"subject": "bob", "amount": "3"}}


def test_smart_query_to_dict(query_composer) -> None:
    d = query_composer.shares_supply("bob").to_dict()
    assert d["address"] == CONTRACT
    assert from_base64(d["queryData"]) == b'{"shares_supply":{"subject":"bob"}}'
