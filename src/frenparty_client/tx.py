"""
CosmWasm transport message types.

`MsgExecuteContract` mirrors `cosmwasm.wasm.v1.MsgExecuteContract`; the
envelope pairs it with its type URL the way signing clients expect
(`{"typeUrl": ..., "value": ...}`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from frenparty_client.constants import MSG_EXECUTE_CONTRACT_TYPE_URL
from frenparty_client.encoding import from_base64, from_json_bytes, to_base64
from frenparty_client.errors import EncodeObjectError
from frenparty_client.types import Coin

logger = logging.getLogger(__name__)


def _require_str(d: dict[str, Any], key: str) -> str:
    v = d.get(key, "")
    if not isinstance(v, str):
        raise EncodeObjectError(key, f"expected str, got {type(v).__name__}")
    return v


def _coins_from_list(raw: Any) -> list[Coin]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise EncodeObjectError("funds", f"expected list, got {type(raw).__name__}")
    out: list[Coin] = []
    for i, c in enumerate(raw):
        if not isinstance(c, dict):
            raise EncodeObjectError(f"funds[{i}]", "must be a dict")
        denom = c.get("denom", "")
        amount = c.get("amount", "")
        if not isinstance(denom, str) or not isinstance(amount, str):
            raise EncodeObjectError(f"funds[{i}]", "denom and amount must be strings")
        out.append({"denom": denom, "amount": amount})
    return out


@dataclass(frozen=True)
class MsgExecuteContract:
    sender: str = ""
    contract: str = ""
    msg: bytes = b""
    funds: list[Coin] = field(default_factory=list)

    @classmethod
    def from_partial(
        cls,
        *,
        sender: str | None = None,
        contract: str | None = None,
        msg: bytes | None = None,
        funds: list[Coin] | None = None,
    ) -> MsgExecuteContract:
        """Build a message from a partial field set, filling proto3 defaults for missing fields."""
        return cls(
            sender=sender if sender is not None else "",
            contract=contract if contract is not None else "",
            msg=bytes(msg) if msg is not None else b"",
            funds=list(funds) if funds is not None else [],
        )

    def to_dict(self) -> dict[str, Any]:
        """Proto3 JSON form: `msg` as base64, coins as plain dicts."""
        return {
            "sender": self.sender,
            "contract": self.contract,
            "msg": to_base64(self.msg),
            "funds": [{"denom": c["denom"], "amount": c["amount"]} for c in self.funds],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MsgExecuteContract:
        if not isinstance(d, dict):
            raise EncodeObjectError("value", "must be a dict")
        msg_b64 = _require_str(d, "msg")
        return cls.from_partial(
            sender=_require_str(d, "sender"),
            contract=_require_str(d, "contract"),
            msg=from_base64(msg_b64),
            funds=_coins_from_list(d.get("funds")),
        )


@dataclass(frozen=True)
class MsgExecuteContractEncodeObject:
    """Tagged envelope consumed by a signing/broadcast pipeline."""

    value: MsgExecuteContract
    type_url: str = MSG_EXECUTE_CONTRACT_TYPE_URL

    def to_dict(self) -> dict[str, Any]:
        return {"typeUrl": self.type_url, "value": self.value.to_dict()}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MsgExecuteContractEncodeObject:
        if not isinstance(d, dict):
            raise EncodeObjectError("envelope", "must be a dict")
        type_url = d.get("typeUrl")
        if type_url != MSG_EXECUTE_CONTRACT_TYPE_URL:
            raise EncodeObjectError("typeUrl", f"expected {MSG_EXECUTE_CONTRACT_TYPE_URL}, got {type_url!r}")
        if "value" not in d:
            raise EncodeObjectError("value", "missing")
        return cls(value=MsgExecuteContract.from_dict(d["value"]))


def decode_execute_msg(obj: MsgExecuteContractEncodeObject | MsgExecuteContract) -> Any:
    """Return the JSON command carried by an execute message."""
    value = obj.value if isinstance(obj, MsgExecuteContractEncodeObject) else obj
    decoded = from_json_bytes(value.msg)
    logger.debug("decoded execute msg for contract %s: %s", value.contract, decoded)
    return decoded
