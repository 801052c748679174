"""CLI tests for frenparty-compose.

Tests cover:
- Execute envelopes for buy/sell with funds and decoded msg
- Sender/contract resolution from flags, environment and .env
- Query subcommands
- Error reporting through argparse
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from frenparty_client import cli

pytestmark = pytest.mark.usefixtures("isolated_env")


@pytest.fixture
def output(monkeypatch) -> io.StringIO:
    buf = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buf, width=10_000, color_system=None))
    return buf


def _run(argv: list[str], buf: io.StringIO) -> dict:
    cli.main(argv)
    return json.loads(buf.getvalue())


def test_buy_shares_with_flags(output) -> None:
    out = _run(
        [
            "--sender",
            "alice",
            "--contract",
            "contract1",
            "buy-shares",
            "--amount",
            "100",
            "--subject",
            "bob",
            "--funds",
            "1000000ustars",
            "--decode-msg",
        ],
        output,
    )
    assert out["typeUrl"] == "/cosmwasm.wasm.v1.MsgExecuteContract"
    assert out["value"]["sender"] == "alice"
    assert out["value"]["contract"] == "contract1"
    assert out["value"]["msg"] == {"buy_shares": {"amount": "100", "subject": "bob"}}
    assert out["value"]["funds"] == [{"denom": "ustars", "amount": "1000000"}]


def test_sell_shares_from_environment(output, monkeypatch) -> None:
    monkeypatch.setenv("FRENPARTY_SENDER", "alice")
    monkeypatch.setenv("FRENPARTY_CONTRACT", "contract1")
    out = _run(["sell-shares", "--amount", "1", "--subject", "bob"], output)
    assert out["value"]["sender"] == "alice"
    # sell_shares envelope carries base64 msg and no funds by default
    assert out["value"]["msg"] == "eyJzZWxsX3NoYXJlcyI6eyJhbW91bnQiOiIxIiwic3ViamVjdCI6ImJvYiJ9fQ=="
    assert out["value"]["funds"] == []


def test_env_file_flag(output, tmp_path: Path) -> None:
    env_file = tmp_path / "frenparty.env"
    env_file.write_text("FRENPARTY_SENDER=carol\nFRENPARTY_CONTRACT=contract9\n")
    out = _run(["--env-file", str(env_file), "buy-shares", "--amount", "2", "--subject", "bob"], output)
    assert out["value"]["sender"] == "carol"
    assert out["value"]["contract"] == "contract9"


def test_query_price(output) -> None:
    out = _run(["--contract", "contract1", "query", "buy-price-after-fee", "--subject", "bob", "--amount", "3"], output)
    assert out == {"address": "contract1", "query": {"buy_price_after_fee": {"subject": "bob", "amount": "3"}}}


def test_query_needs_no_sender(output, monkeypatch) -> None:
    monkeypatch.setenv("FRENPARTY_CONTRACT", "contract1")
    out = _run(["query", "shares-balance", "--subject", "bob", "--holder", "alice"], output)
    assert out["query"] == {"shares_balance": {"subject": "bob", "holder": "alice"}}


def test_query_config(output) -> None:
    out = _run(["--contract", "c", "query", "config"], output)
    assert out["query"] == {"config": {}}


def test_missing_sender_exits_with_usage_error(output, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--contract", "c", "buy-shares", "--amount", "1", "--subject", "bob"])
    assert exc.value.code == 2
    assert "FRENPARTY_SENDER" in capsys.readouterr().err


def test_invalid_funds_exits_with_usage_error(output, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--sender", "a", "--contract", "c", "buy-shares", "--amount", "1", "--subject", "b", "--funds", "x"])
    assert exc.value.code == 2
    assert "Invalid coin" in capsys.readouterr().err
