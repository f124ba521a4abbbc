"""
Console output for the recipes: logging setup and result rendering.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from xrpl_recipes.batch.status import InnerTxStatus
from xrpl_recipes.config import Network, explorer_tx_url

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr; DEBUG when verbose, else INFO."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("xrpl_recipes")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def log_explorer_url(network: Network, tx_hash: str) -> str:
    url = explorer_tx_url(network, tx_hash)
    logger.info("explorer: %s", url)
    return url


def format_inner_statuses(statuses: Iterable[InnerTxStatus]) -> list[str]:
    """One line per inner transaction: mark, position, status, hash."""
    return [
        f"{'OK ' if status.successful else 'ERR'} #{status.index}: {status.status} ({status.hash})"
        for status in statuses
    ]
