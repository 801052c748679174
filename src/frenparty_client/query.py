"""Smart-query payloads for the FrenParty contract.

Queries are read-only, so there is no envelope: a `SmartQuery` is just the
contract address and the JSON query a client passes to `queryContractSmart`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from frenparty_client.encoding import to_base64, to_json_bytes
from frenparty_client.types import QueryMsg, Uint128

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmartQuery:
    contract_address: str
    query: QueryMsg

    @property
    def query_data(self) -> bytes:
        return to_json_bytes(self.query)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.contract_address,
            "queryData": to_base64(self.query_data),
        }


@dataclass(frozen=True)
class FrenPartyQueryComposer:
    contract_address: str

    def _query(self, name: str, args: dict[str, Any]) -> SmartQuery:
        logger.debug("composing query %s for contract %s", name, self.contract_address)
        return SmartQuery(contract_address=self.contract_address, query={name: args})  # type: ignore[arg-type]

    def config(self) -> SmartQuery:
        return self._query("config", {})

    def shares_balance(self, subject: str, holder: str) -> SmartQuery:
        return self._query("shares_balance", {"subject": subject, "holder": holder})

    def shares_supply(self, subject: str) -> SmartQuery:
        return self._query("shares_supply", {"subject": subject})

    def buy_price(self, subject: str, amount: Uint128) -> SmartQuery:
        return self._query("buy_price", {"subject": subject, "amount": amount})

    def buy_price_after_fee(self, subject: str, amount: Uint128) -> SmartQuery:
        return self._query("buy_price_after_fee", {"subject": subject, "amount": amount})

    def sell_price(self, subject: str, amount: Uint128) -> SmartQuery:
        return self._query("sell_price", {"subject": subject, "amount": amount})

    def sell_price_after_fee(self, subject: str, amount: Uint128) -> SmartQuery:
        return self._query("sell_price_after_fee", {"subject": subject, "amount": amount})
