"""
Command line entry point.

    xrpl-recipes batch <recipe> [-v] [--env-file PATH]

Exits 0 when the batch did what its mode promises, 1 otherwise.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

import httpx
from xrpl.asyncio.clients import AsyncJsonRpcClient
from xrpl.constants import XRPLException

from xrpl_recipes.batch.runner import BatchOutcome
from xrpl_recipes.config import ConfigError, Settings
from xrpl_recipes.console import configure_logging, format_inner_statuses, log_explorer_url
from xrpl_recipes.recipes.batch import RECIPES
from xrpl_recipes.xrpl.errors import XRPLRecipeError
from xrpl_recipes.xrpl.jsonrpc_client import JsonRpcClient
from xrpl_recipes.xrpl.signer import WalletSigner
from xrpl_recipes.xrpl.transport import HttpxTransport

logger = logging.getLogger("xrpl_recipes.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xrpl-recipes",
        description="Run XRPL transaction recipes against a live network.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")

    subparsers = parser.add_subparsers(dest="command", required=True)
    p_batch = subparsers.add_parser("batch", help="Submit a Batch and report inner results")
    p_batch.add_argument("recipe", choices=sorted(RECIPES), help="Batch recipe to run")
    return parser


async def run_recipe(settings: Settings, name: str) -> BatchOutcome:
    recipe = RECIPES[name]
    issuer = WalletSigner.from_seed(settings.issuer_seed)
    user = WalletSigner.from_seed(settings.user_seed)
    logger.info("network=%s issuer=%s user=%s", settings.network.name, issuer.account, user.account)

    client = AsyncJsonRpcClient(settings.endpoint)
    transport = HttpxTransport(timeout=settings.timeout)
    async with JsonRpcClient(settings.endpoint, transport=transport) as ledger:
        return await recipe(client, ledger, issuer, user.account)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = Settings.from_env(dotenv_path=args.env_file)
        outcome = asyncio.run(run_recipe(settings, args.recipe))
    except (ConfigError, XRPLRecipeError, XRPLException, httpx.HTTPError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    log_explorer_url(settings.network, outcome.batch_hash)
    for line in format_inner_statuses(outcome.statuses):
        print(line)
    logger.info(
        "%s: %d succeeded, %d failed", outcome.mode.name, outcome.succeeded, outcome.failed
    )
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
