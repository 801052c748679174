"""Schema types for the FrenParty contract messages.

TypedDict definitions mirroring the contract's JSON schema. They are used for
static typing only; nothing here is checked at runtime.
"""

from __future__ import annotations

from typing import TypedDict

# cosmwasm_std numeric types travel as JSON strings
Uint128 = str
Decimal = str
Addr = str


class Coin(TypedDict):
    denom: str
    amount: Uint128


class Config(TypedDict):
    """Contract configuration, as returned by the `config` query."""

    protocol_fee_destination: Addr
    protocol_fee_percent: Decimal
    subject_fee_percent: Decimal
    curve_coefficient: Decimal


class InstantiateMsg(TypedDict):
    protocol_fee_destination: str
    protocol_fee_bps: int
    subject_fee_bps: int
    curve_coefficient: Decimal


# Execute messages


class BuySharesArgs(TypedDict):
    amount: Uint128
    subject: str


class SellSharesArgs(TypedDict):
    amount: Uint128
    subject: str


class BuySharesMsg(TypedDict):
    buy_shares: BuySharesArgs


class SellSharesMsg(TypedDict):
    sell_shares: SellSharesArgs


ExecuteMsg = BuySharesMsg | SellSharesMsg


# Query messages


class SubjectArgs(TypedDict):
    subject: str


class SharesBalanceArgs(TypedDict):
    subject: str
    holder: str


class PriceArgs(TypedDict):
    subject: str
    amount: Uint128


class ConfigQuery(TypedDict):
    config: dict[str, object]


class SharesBalanceQuery(TypedDict):
    shares_balance: SharesBalanceArgs


class SharesSupplyQuery(TypedDict):
    shares_supply: SubjectArgs


class BuyPriceQuery(TypedDict):
    buy_price: PriceArgs


class BuyPriceAfterFeeQuery(TypedDict):
    buy_price_after_fee: PriceArgs


class SellPriceQuery(TypedDict):
    sell_price: PriceArgs


class SellPriceAfterFeeQuery(TypedDict):
    sell_price_after_fee: PriceArgs


QueryMsg = (
    ConfigQuery
    | SharesBalanceQuery
    | SharesSupplyQuery
    | BuyPriceQuery
    | BuyPriceAfterFeeQuery
    | SellPriceQuery
    | SellPriceAfterFeeQuery
)
