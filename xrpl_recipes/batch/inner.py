"""
Inner transaction hashes of a submitted Batch.

Hashes are recomputed from the Batch as the ledger recorded it. The
pre-submission objects are useless for this: autofill assigns each inner
transaction its Sequence (and possibly NetworkID), and every serialized
field is covered by the hash.
"""

from __future__ import annotations

import logging
from typing import Any

from xrpl.core.binarycodec import decode

from xrpl_recipes.batch.status import InnerTxHash
from xrpl_recipes.xrpl.client import XRPLClient
from xrpl_recipes.xrpl.errors import BatchError
from xrpl_recipes.xrpl.hashing import hash_signed_tx

logger = logging.getLogger(__name__)


def inner_tx_hashes(batch_tx: dict[str, Any]) -> list[InnerTxHash]:
    """Compute the hash of every inner transaction of a recorded Batch.

    Args:
        batch_tx: The Batch transaction in XRPL JSON form, as recorded
            by the ledger.

    Returns:
        InnerTxHash per computable entry, index = 1-based position in
        RawTransactions. Entries whose hash cannot be computed are logged
        and skipped; the positions of later entries are unchanged.

    Raises:
        BatchError: If the transaction has no RawTransactions list.
    """
    raw_transactions = batch_tx.get("RawTransactions")
    if not isinstance(raw_transactions, list):
        raise BatchError("transaction has no RawTransactions")

    hashes: list[InnerTxHash] = []
    for position, raw in enumerate(raw_transactions, start=1):
        inner_tx = raw.get("RawTransaction") if isinstance(raw, dict) else None
        if not inner_tx:
            logger.warning("inner transaction %d has no RawTransaction body", position)
            continue
        try:
            tx_hash = hash_signed_tx(inner_tx)
        except Exception as exc:
            logger.warning("could not hash inner transaction %d: %s", position, exc)
            continue
        hashes.append(InnerTxHash(hash=tx_hash, index=position))
    return hashes


async def fetch_inner_tx_hashes(client: XRPLClient, batch_hash: str) -> list[InnerTxHash]:
    """Fetch a Batch from the ledger and hash its recorded inner transactions.

    The Batch is requested in binary form so the inner transactions are
    taken from the exact bytes the ledger stored.

    Raises:
        BatchError: If the Batch is not found or holds no inner
            transactions that can be hashed.
    """
    result = await client.get_tx(batch_hash, binary=True)
    if not result.found:
        raise BatchError(
            f"batch transaction {batch_hash} not found"
            + (f": {result.detail}" if result.detail else "")
        )

    if result.tx_blob is not None:
        batch_tx: dict[str, Any] = decode(result.tx_blob)
    elif result.tx_json is not None:
        batch_tx = result.tx_json
    else:
        raise BatchError(f"batch transaction {batch_hash} returned no transaction body")

    hashes = inner_tx_hashes(batch_tx)
    if not hashes:
        raise BatchError(f"no inner transaction hashes could be computed for {batch_hash}")
    return hashes
