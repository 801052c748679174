"""Helpers for building the `funds` attached to execute messages."""

from __future__ import annotations

import re

from frenparty_client.constants import NATIVE_DENOM
from frenparty_client.errors import InvalidCoinError
from frenparty_client.types import Coin

# Same shape cosmjs `parseCoins` accepts: digits followed by a denom
_COIN_RE = re.compile(r"^([0-9]+)([a-zA-Z][a-zA-Z0-9/:._-]{2,127})$")


def coin(amount: int | str, denom: str) -> Coin:
    return {"denom": denom, "amount": str(amount)}


def coins(amount: int | str, denom: str) -> list[Coin]:
    return [coin(amount, denom)]


def stars(amount: int | str) -> list[Coin]:
    """Funds in the Stargaze native denom, as the contract expects for buy_shares."""
    return coins(amount, NATIVE_DENOM)


def parse_coins(text: str) -> list[Coin]:
    """
    Parse a comma-separated coin list such as "100ustars,5uatom".

    Blank input yields an empty list.
    """
    out: list[Coin] = []
    for part in text.split(","):
        s = part.strip()
        if not s:
            continue
        m = _COIN_RE.match(s)
        if m is None:
            raise InvalidCoinError(s)
        out.append(coin(int(m.group(1)), m.group(2)))
    return out
