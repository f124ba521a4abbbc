"""
Batch inner-transaction status resolver.

The ledger records a Batch transaction as tesSUCCESS whatever happened to
the transactions inside it. The real outcome of each inner transaction
is only visible by looking it up by its own hash.

``get_batch_tx_status`` performs those lookups concurrently and returns
one InnerTxStatus per input, in input order. A lookup that raises or
finds nothing never affects its siblings; it is reported as
``"not validated"``.

Status values:
    - the raw TransactionResult from the inner transaction's metadata
    - ``"unknown"`` when the lookup succeeded without a result code
    - ``"not validated"`` when the lookup failed or found nothing
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from xrpl_recipes.xrpl.client import XRPLClient
from xrpl_recipes.xrpl.errors import SUCCESS_RESULT

logger = logging.getLogger(__name__)

STATUS_UNKNOWN = "unknown"
STATUS_NOT_VALIDATED = "not validated"


@dataclass(frozen=True)
class InnerTxHash:
    """Identifier of an inner transaction and its 1-based batch position."""

    hash: str
    index: int

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"index must be >= 1, got: {self.index}")


@dataclass(frozen=True)
class InnerTxStatus:
    """Outcome of one inner transaction."""

    hash: str
    index: int
    successful: bool
    status: str


async def _resolve_one(client: XRPLClient, inner_tx: InnerTxHash) -> InnerTxStatus:
    try:
        result = await client.get_tx(inner_tx.hash)
    except Exception as exc:
        logger.warning(
            "lookup of inner transaction %d (%s) failed: %s",
            inner_tx.index,
            inner_tx.hash,
            exc,
        )
        return InnerTxStatus(inner_tx.hash, inner_tx.index, False, STATUS_NOT_VALIDATED)

    if not result.found:
        logger.debug(
            "inner transaction %d (%s) not found: %s",
            inner_tx.index,
            inner_tx.hash,
            result.detail or "txnNotFound",
        )
        return InnerTxStatus(inner_tx.hash, inner_tx.index, False, STATUS_NOT_VALIDATED)

    match result.engine_result:
        case str(code):
            return InnerTxStatus(inner_tx.hash, inner_tx.index, code == SUCCESS_RESULT, code)
        case _:
            return InnerTxStatus(inner_tx.hash, inner_tx.index, False, STATUS_UNKNOWN)


async def get_batch_tx_status(
    client: XRPLClient,
    inner_tx_hashes: list[InnerTxHash],
) -> list[InnerTxStatus]:
    """Look up the outcome of every inner transaction of a batch.

    Args:
        client: Connected ledger client. Only read from.
        inner_tx_hashes: Hashes computed from the ledger-recorded inner
            transactions, with their batch positions.

    Returns:
        One InnerTxStatus per input, in input order. Never raises for
        individual lookup failures.
    """
    return list(
        await asyncio.gather(*(_resolve_one(client, tx) for tx in inner_tx_hashes))
    )
