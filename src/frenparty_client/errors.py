"""Error types for the FrenParty client.

The composers themselves never raise; these errors come from the decoding,
parsing and configuration helpers around them.
"""

from __future__ import annotations

from typing import Any


class FrenPartyClientError(Exception):
    """Base class for FrenParty client errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        self.message = message
        self.data = data or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "data": self.data,
        }


class MessageDecodeError(FrenPartyClientError, ValueError):
    """Message bytes are not valid UTF-8 JSON."""

    def __init__(self, reason: str):
        super().__init__(f"Cannot decode message: {reason}", data={"reason": reason})


class EncodeObjectError(FrenPartyClientError, ValueError):
    """A dict does not describe a valid execute-message envelope."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid encode object: {field} - {reason}",
            data={"field": field, "reason": reason},
        )


class InvalidCoinError(FrenPartyClientError, ValueError):
    """Coin string does not match `<amount><denom>`."""

    def __init__(self, value: str):
        super().__init__(f"Invalid coin: {value!r}", data={"value": value})


class ConfigError(FrenPartyClientError):
    """Required configuration value is missing."""

    def __init__(self, field: str, env_var: str):
        super().__init__(
            f"Missing {field}: pass --{field} or set {env_var}",
            data={"field": field, "envVar": env_var},
        )
