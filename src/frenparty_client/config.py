"""
Configuration for the composer CLI.

Sender and contract addresses resolve in order: explicit value, process
environment, then a `.env` file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from frenparty_client.constants import CONTRACT_ENV, DEFAULT_DOTENV_FILENAME, SENDER_ENV
from frenparty_client.errors import ConfigError

logger = logging.getLogger(__name__)


def load_dotenv(path: Path) -> dict[str, str]:
    """
    Minimal .env loader:
    - supports KEY=VALUE and `export KEY=VALUE`
    - strips surrounding quotes
    - ignores blank lines and `#` comments
    - does not expand variables
    """
    out: dict[str, str] = {}
    if not path.exists():
        return out

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        k, v = (x.strip() for x in line.split("=", 1))
        if not k:
            continue
        if len(v) >= 2 and v[0] == v[-1] and v[0] in ("'", '"'):
            v = v[1:-1]
        out[k] = v
    return out


def resolve_setting(
    explicit: str | None,
    env_var: str,
    field: str,
    *,
    environ: Mapping[str, str] | None = None,
    dotenv_path: Path | None = None,
) -> str:
    """Return the first non-empty value for `field`; raises ConfigError when none is set."""
    env = os.environ if environ is None else environ
    dotenv = load_dotenv(dotenv_path or Path.cwd() / DEFAULT_DOTENV_FILENAME)
    for source, value in (("argument", explicit), ("environment", env.get(env_var)), (".env", dotenv.get(env_var))):
        if value:
            logger.debug("%s resolved from %s", field, source)
            return value
    raise ConfigError(field, env_var)


@dataclass(frozen=True)
class ComposerConfig:
    sender: str
    contract_address: str

    @classmethod
    def from_env(
        cls,
        *,
        sender: str | None = None,
        contract_address: str | None = None,
        environ: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> ComposerConfig:
        return cls(
            sender=resolve_setting(sender, SENDER_ENV, "sender", environ=environ, dotenv_path=dotenv_path),
            contract_address=resolve_setting(
                contract_address, CONTRACT_ENV, "contract", environ=environ, dotenv_path=dotenv_path
            ),
        )
