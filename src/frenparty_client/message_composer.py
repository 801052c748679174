"""
Execute-message composer for the FrenParty contract.

Each method returns an envelope ready to be signed and broadcast by a wallet
client. Arguments are serialized verbatim: amounts are not parsed and
subjects are not validated, the contract is the authority on both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from frenparty_client.encoding import to_json_bytes
from frenparty_client.tx import MsgExecuteContract, MsgExecuteContractEncodeObject
from frenparty_client.types import BuySharesArgs, Coin, SellSharesArgs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrenPartyMsgComposer:
    sender: str
    contract_address: str

    def _execute(self, command: str, args: object, funds: list[Coin] | None) -> MsgExecuteContractEncodeObject:
        logger.debug("composing %s for contract %s (sender=%s)", command, self.contract_address, self.sender)
        return MsgExecuteContractEncodeObject(
            value=MsgExecuteContract.from_partial(
                sender=self.sender,
                contract=self.contract_address,
                msg=to_json_bytes({command: args}),
                funds=funds,
            )
        )

    def buy_shares(self, args: BuySharesArgs, funds: list[Coin] | None = None) -> MsgExecuteContractEncodeObject:
        return self._execute("buy_shares", {"amount": args["amount"], "subject": args["subject"]}, funds)

    def sell_shares(self, args: SellSharesArgs, funds: list[Coin] | None = None) -> MsgExecuteContractEncodeObject:
        return self._execute("sell_shares", {"amount": args["amount"], "subject": args["subject"]}, funds)
