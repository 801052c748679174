"""
frenparty-compose - print FrenParty execute envelopes and smart queries as JSON.

Usage:
    frenparty-compose buy-shares --amount 1 --subject stars1... --funds 1000000ustars
    frenparty-compose sell-shares --amount 1 --subject stars1... --decode-msg
    frenparty-compose query buy-price --subject stars1... --amount 1

Sender and contract default to FRENPARTY_SENDER / FRENPARTY_CONTRACT (process
environment or `.env`). Nothing is signed or broadcast.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console

from frenparty_client.coins import parse_coins
from frenparty_client.config import ComposerConfig, resolve_setting
from frenparty_client.constants import CONTRACT_ENV
from frenparty_client.errors import FrenPartyClientError
from frenparty_client.message_composer import FrenPartyMsgComposer
from frenparty_client.query import FrenPartyQueryComposer, SmartQuery
from frenparty_client.tx import decode_execute_msg

logger = logging.getLogger(__name__)

console = Console()

_PRICE_QUERIES = ("buy-price", "buy-price-after-fee", "sell-price", "sell-price-after-fee")


def _execute_output(args: argparse.Namespace, cfg: ComposerConfig) -> dict[str, Any]:
    composer = FrenPartyMsgComposer(cfg.sender, cfg.contract_address)
    call_args = {"amount": args.amount, "subject": args.subject}
    funds = parse_coins(args.funds) if args.funds else None
    if args.command == "buy-shares":
        envelope = composer.buy_shares(call_args, funds)
    else:
        envelope = composer.sell_shares(call_args, funds)

    out = envelope.to_dict()
    if args.decode_msg:
        out["value"]["msg"] = decode_execute_msg(envelope)
    return out


def _query_output(args: argparse.Namespace, contract_address: str) -> dict[str, Any]:
    composer = FrenPartyQueryComposer(contract_address)
    q: SmartQuery
    if args.query == "config":
        q = composer.config()
    elif args.query == "shares-balance":
        q = composer.shares_balance(args.subject, args.holder)
    elif args.query == "shares-supply":
        q = composer.shares_supply(args.subject)
    else:
        method = getattr(composer, args.query.replace("-", "_"))
        q = method(args.subject, args.amount)
    return {"address": q.contract_address, "query": q.query}


def build_output(args: argparse.Namespace) -> dict[str, Any]:
    """Compose the JSON document the CLI prints for parsed arguments."""
    if args.command == "query":
        # Queries have no sender
        contract_address = resolve_setting(args.contract, CONTRACT_ENV, "contract", dotenv_path=args.env_file)
        return _query_output(args, contract_address)

    cfg = ComposerConfig.from_env(sender=args.sender, contract_address=args.contract, dotenv_path=args.env_file)
    return _execute_output(args, cfg)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Compose FrenParty contract messages (no signing, no broadcast)")
    p.add_argument("--sender", type=str, default=None, help="Sender address (default: $FRENPARTY_SENDER)")
    p.add_argument("--contract", type=str, default=None, help="Contract address (default: $FRENPARTY_CONTRACT)")
    p.add_argument("--env-file", type=Path, default=None, help="Path to .env file (default: ./.env)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="command", required=True)
    for name in ("buy-shares", "sell-shares"):
        sp = sub.add_parser(name, help=f"Compose a {name.replace('-', '_')} execute envelope")
        sp.add_argument("--amount", type=str, required=True, help="Number of shares (Uint128 string)")
        sp.add_argument("--subject", type=str, required=True, help="Subject address")
        sp.add_argument("--funds", type=str, default=None, help="Coins to attach, e.g. 1000000ustars")
        sp.add_argument("--decode-msg", action="store_true", help="Show msg as JSON instead of base64")

    qp = sub.add_parser("query", help="Compose a smart query")
    qsub = qp.add_subparsers(dest="query", required=True)
    qsub.add_parser("config")
    bal = qsub.add_parser("shares-balance")
    bal.add_argument("--subject", type=str, required=True)
    bal.add_argument("--holder", type=str, required=True)
    sup = qsub.add_parser("shares-supply")
    sup.add_argument("--subject", type=str, required=True)
    for name in _PRICE_QUERIES:
        pq = qsub.add_parser(name)
        pq.add_argument("--subject", type=str, required=True)
        pq.add_argument("--amount", type=str, required=True)
    return p


def main(argv: list[str] | None = None) -> None:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        out = build_output(args)
    except FrenPartyClientError as e:
        logger.debug("compose failed: %s", e.to_dict())
        p.error(e.message)

    console.print_json(data=out)


if __name__ == "__main__":
    main()
