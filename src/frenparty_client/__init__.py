"""Message composers for the FrenParty (Stargaze shares) CosmWasm contract."""

from frenparty_client.coins import coin, coins, parse_coins, stars
from frenparty_client.constants import MSG_EXECUTE_CONTRACT_TYPE_URL, NATIVE_DENOM
from frenparty_client.errors import (
    ConfigError,
    EncodeObjectError,
    FrenPartyClientError,
    InvalidCoinError,
    MessageDecodeError,
)
from frenparty_client.message_composer import FrenPartyMsgComposer
from frenparty_client.query import FrenPartyQueryComposer, SmartQuery
from frenparty_client.tx import MsgExecuteContract, MsgExecuteContractEncodeObject, decode_execute_msg
from frenparty_client.types import (
    Addr,
    BuySharesArgs,
    Coin,
    Config,
    Decimal,
    ExecuteMsg,
    InstantiateMsg,
    QueryMsg,
    SellSharesArgs,
    Uint128,
)

__all__ = [
    "Addr",
    "BuySharesArgs",
    "Coin",
    "Config",
    "Decimal",
    "ExecuteMsg",
    "InstantiateMsg",
    "QueryMsg",
    "SellSharesArgs",
    "Uint128",
    "MSG_EXECUTE_CONTRACT_TYPE_URL",
    "NATIVE_DENOM",
    "ConfigError",
    "EncodeObjectError",
    "FrenPartyClientError",
    "FrenPartyMsgComposer",
    "FrenPartyQueryComposer",
    "InvalidCoinError",
    "MessageDecodeError",
    "MsgExecuteContract",
    "MsgExecuteContractEncodeObject",
    "SmartQuery",
    "coin",
    "coins",
    "decode_execute_msg",
    "parse_coins",
    "stars",
]
