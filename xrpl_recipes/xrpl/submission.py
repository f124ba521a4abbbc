"""
Submission — autofill, sign, submit and wait for a final outcome.

Network-dependent fields (Fee, LastLedgerSequence, NetworkID) come from
xrpl-py's autofill, and reliable submission is xrpl-py's submit_and_wait:
it polls until the transaction is in a validated ledger, and raises
XRPLReliableSubmissionException for a malformed submission, an expired
LastLedgerSequence or a final result other than tesSUCCESS.

Signing goes through an XRPLSigner so keys stay behind that boundary.
"""

from __future__ import annotations

import logging

from xrpl.asyncio.clients import Client
from xrpl.asyncio.transaction import autofill, submit_and_wait
from xrpl.models.response import Response
from xrpl.models.transactions.transaction import Transaction

from xrpl_recipes.xrpl.signer import XRPLSigner

logger = logging.getLogger(__name__)


async def submit_transaction(
    tx: Transaction,
    client: Client,
    signer: XRPLSigner,
) -> Response:
    """Autofill, sign, submit and wait for an unsigned transaction.

    Returns:
        The validated ``tx`` response; its ``result`` carries ``hash``
        and ``meta``.

    Raises:
        XRPLReliableSubmissionException: If the transaction failed or
            can no longer be validated.
        XRPLRequestFailureException: If the node answers a lookup with
            an error.
    """
    prepared = await autofill(tx, client)
    signed = signer.sign(prepared)
    logger.info(
        "submitting %s %s (Sequence=%s Fee=%s LastLedgerSequence=%s)",
        prepared.transaction_type,
        signed.tx_hash,
        prepared.sequence,
        prepared.fee,
        prepared.last_ledger_sequence,
    )
    response = await submit_and_wait(signed.signed_tx, client)
    logger.info(
        "validated %s in ledger %s",
        signed.tx_hash,
        response.result.get("ledger_index"),
    )
    return response
