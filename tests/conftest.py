"""
Shared pytest fixtures for the FrenParty client tests.
"""

from __future__ import annotations

import pytest

from frenparty_client.message_composer import FrenPartyMsgComposer
from frenparty_client.query import FrenPartyQueryComposer

SENDER = "stars1sender0000000000000000000000000000000"
CONTRACT = "stars14hj2tavq8fpesdwxxcu44rty3hh90vhujrvcmstl4zr3txmfvw9sq5wvm5"


@pytest.fixture
def composer() -> FrenPartyMsgComposer:
    return FrenPartyMsgComposer(SENDER, CONTRACT)


@pytest.fixture
def query_composer() -> FrenPartyQueryComposer:
    return FrenPartyQueryComposer(CONTRACT)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's FRENPARTY_* variables and ./.env out of the tests."""
    monkeypatch.delenv("FRENPARTY_SENDER", raising=False)
    monkeypatch.delenv("FRENPARTY_CONTRACT", raising=False)
    monkeypatch.chdir(tmp_path)
