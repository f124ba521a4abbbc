"""
XRPL transaction builders.

Builds unsigned xrpl-py transaction models. These are pure "recipes":
no network state, no secrets. Fee, LastLedgerSequence and signing fields
are submit-time concerns left to xrpl-py's autofill and sign.

Batch rules enforced here:
    - 2 to 8 inner transactions
    - exactly one batch mode flag on the outer transaction
    - every inner transaction carries tfInnerBatchTxn, Fee "0", an
      empty SigningPubKey and no signature
    - inner transactions of the submitting account take the sequences
      right after the outer one
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from xrpl.models import Batch, BatchFlag, NFTokenBurn, NFTokenMint, Payment, TransactionFlag
from xrpl.models.transactions.transaction import Transaction
from xrpl.utils import str_to_hex

from xrpl_recipes.xrpl.errors import BatchError

TF_INNER_BATCH_TXN = int(TransactionFlag.TF_INNER_BATCH_TXN)

MIN_INNER_TRANSACTIONS = 2
MAX_INNER_TRANSACTIONS = 8

BATCH_MODES = (
    BatchFlag.TF_ALL_OR_NOTHING,
    BatchFlag.TF_ONLY_ONE,
    BatchFlag.TF_UNTIL_FAILURE,
    BatchFlag.TF_INDEPENDENT,
)


def payment(account: str, destination: str, amount_drops: str) -> Payment:
    """Build an XRP Payment.

    Raises:
        ValueError: If account/destination is empty or the amount is not
            a positive integer string of drops.
    """
    if not account or not destination:
        raise ValueError("account and destination must be non-empty")
    if not amount_drops.isdigit() or int(amount_drops) <= 0:
        raise ValueError(f"amount_drops must be a positive integer string, got: {amount_drops!r}")
    return Payment(account=account, destination=destination, amount=amount_drops)


def nftoken_mint(
    account: str,
    uri: str,
    *,
    taxon: int = 0,
    flags: int = 0,
    transfer_fee: int | None = None,
) -> NFTokenMint:
    """Build an NFTokenMint. ``uri`` is given as text and hex-encoded here."""
    if transfer_fee is not None and not 0 <= transfer_fee <= 50000:
        raise ValueError(f"transfer_fee must be within 0..50000, got: {transfer_fee}")
    return NFTokenMint(
        account=account,
        nftoken_taxon=taxon,
        uri=str_to_hex(uri).upper(),
        flags=int(flags),
        transfer_fee=transfer_fee,
    )


def nftoken_burn(account: str, nftoken_id: str) -> NFTokenBurn:
    if len(nftoken_id) != 64:
        raise ValueError(f"nftoken_id must be 64 hex chars, got {len(nftoken_id)}")
    return NFTokenBurn(account=account, nftoken_id=nftoken_id)


def inner(tx: Transaction, sequence: int) -> Transaction:
    """Return a copy of ``tx`` prepared for inclusion in a Batch.

    Raises:
        BatchError: If the transaction is signed, is itself a Batch,
            carries a non-zero Fee or non-integer flags.
    """
    if isinstance(tx, Batch):
        raise BatchError("a Batch cannot be nested inside another Batch")
    if tx.is_signed():
        raise BatchError("inner transactions must not be signed")
    if tx.signing_pub_key:
        raise BatchError("inner transactions must have an empty SigningPubKey")
    if tx.fee not in (None, "0"):
        raise BatchError(f"inner transaction Fee must be '0', got: {tx.fee!r}")
    if not isinstance(tx.flags, int):
        raise BatchError(f"inner transaction flags must be an integer, got: {tx.flags!r}")

    return dataclasses.replace(
        tx,
        flags=tx.flags | TF_INNER_BATCH_TXN,
        fee="0",
        signing_pub_key="",
        sequence=sequence,
    )


def batch(
    account: str,
    inner_txs: Sequence[Transaction],
    mode: BatchFlag,
    sequence: int,
) -> Batch:
    """Wrap unsigned transactions into a Batch transaction.

    Args:
        account: Account submitting (and paying for) the batch. Every
            inner transaction must come from it.
        inner_txs: 2-8 unsigned transactions; each is passed through
            inner() with the next sequence after ``sequence``.
        mode: Exactly one of BATCH_MODES.
        sequence: Sequence of the outer Batch.

    Raises:
        BatchError: On a bad inner transaction count, mode or account.
    """
    if not account:
        raise BatchError("account must be non-empty")
    if not MIN_INNER_TRANSACTIONS <= len(inner_txs) <= MAX_INNER_TRANSACTIONS:
        raise BatchError(
            f"a Batch holds {MIN_INNER_TRANSACTIONS}-{MAX_INNER_TRANSACTIONS} "
            f"inner transactions, got {len(inner_txs)}"
        )
    if mode not in BATCH_MODES:
        raise BatchError(f"exactly one batch mode flag is required, got: {int(mode):#x}")
    for position, tx in enumerate(inner_txs, start=1):
        if tx.account != account:
            raise BatchError(
                f"inner transaction {position} is from {tx.account}; "
                f"only {account} can submit it without BatchSigners"
            )

    return Batch(
        account=account,
        flags=int(mode),
        sequence=sequence,
        raw_transactions=[
            inner(tx, sequence + offset) for offset, tx in enumerate(inner_txs, start=1)
        ],
    )
