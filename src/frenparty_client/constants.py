"""
Centralized constants for the FrenParty client.

Environment variable overrides (read by `frenparty_client.config`):
- FRENPARTY_SENDER: Default sender address for composed messages
- FRENPARTY_CONTRACT: Default FrenParty contract address
"""

from __future__ import annotations

# Type URL of the CosmWasm execute message, as registered in the wasm module
MSG_EXECUTE_CONTRACT_TYPE_URL = "/cosmwasm.wasm.v1.MsgExecuteContract"

# Stargaze native staking/fee denom (1 STARS = 10^6 ustars)
NATIVE_DENOM = "ustars"

# =============================================================================
# Configuration
# =============================================================================

SENDER_ENV = "FRENPARTY_SENDER"
CONTRACT_ENV = "FRENPARTY_CONTRACT"

DEFAULT_DOTENV_FILENAME = ".env"
