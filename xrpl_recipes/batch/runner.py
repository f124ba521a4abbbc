"""
Batch runner — submit a Batch and learn what happened inside it.

Steps:
    1. Build the Batch from unsigned inner transactions, numbering the
       inner sequences after the account's next sequence.
    2. Autofill, sign, submit and wait for validation; xrpl-py raises
       unless the outer result is tesSUCCESS.
    3. Fetch the recorded Batch and recompute the inner hashes.
    4. Resolve every inner transaction's own result.

The outer tesSUCCESS says nothing about the inner transactions; the
verdict comes from step 4 and depends on the batch mode.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from xrpl.asyncio.account import get_next_valid_seq_number
from xrpl.asyncio.clients import Client
from xrpl.models import BatchFlag
from xrpl.models.transactions.transaction import Transaction

from xrpl_recipes.batch.inner import fetch_inner_tx_hashes
from xrpl_recipes.batch.status import InnerTxStatus, get_batch_tx_status
from xrpl_recipes.xrpl.client import XRPLClient
from xrpl_recipes.xrpl.signer import XRPLSigner
from xrpl_recipes.xrpl.submission import submit_transaction
from xrpl_recipes.xrpl.tx import batch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchOutcome:
    """Outer hash, mode and per-inner-transaction results of a Batch."""

    batch_hash: str
    mode: BatchFlag
    statuses: tuple[InnerTxStatus, ...]

    @property
    def succeeded(self) -> int:
        return sum(1 for status in self.statuses if status.successful)

    @property
    def failed(self) -> int:
        return len(self.statuses) - self.succeeded

    @property
    def failures(self) -> list[InnerTxStatus]:
        return [status for status in self.statuses if not status.successful]

    @property
    def ok(self) -> bool:
        """Whether the batch did what its mode promises.

        All-or-Nothing: every inner transaction succeeded (otherwise the
        ledger rolled all of them back). The other modes tolerate failed
        or skipped inner transactions by definition.
        """
        if self.mode == BatchFlag.TF_ALL_OR_NOTHING:
            return self.failed == 0
        return True


async def run_batch(
    client: Client,
    ledger: XRPLClient,
    signer: XRPLSigner,
    inner_txs: Sequence[Transaction],
    mode: BatchFlag,
) -> BatchOutcome:
    """Submit ``inner_txs`` as one Batch from the signer's account.

    Args:
        client: xrpl-py client used to autofill and submit.
        ledger: Lookup client for the recorded Batch and its inner
            transactions.
        signer: Signs the outer Batch; also the account of every inner
            transaction.
        inner_txs: 2-8 unsigned transactions.
        mode: Batch mode flag.

    Raises:
        BatchError: If the batch is malformed or its record is unusable.
        XRPLReliableSubmissionException: If the outer Batch did not
            succeed or was never validated.
    """
    sequence = await get_next_valid_seq_number(signer.account, client)
    batch_tx = batch(signer.account, inner_txs, mode, sequence)
    mode = BatchFlag(mode)
    logger.info("submitting Batch (%s) with %d inner transactions", mode.name, len(inner_txs))

    response = await submit_transaction(batch_tx, client, signer)
    batch_hash: str = response.result["hash"]
    logger.info("Batch %s recorded as %s", batch_hash, response.result["meta"]["TransactionResult"])

    hashes = await fetch_inner_tx_hashes(ledger, batch_hash)
    statuses = await get_batch_tx_status(ledger, hashes)
    return BatchOutcome(batch_hash=batch_hash, mode=mode, statuses=tuple(statuses))
