"""
Transaction identifiers.

An XRPL transaction hash is SHA-512Half (first 32 bytes of SHA-512) over
the ``TXN\\0`` hash prefix followed by the canonical binary serialization
of the transaction, rendered as 64 uppercase hex chars.

The identifier covers every serialized field, so it can only be computed
once all fields are final. For inner Batch transactions that means the
form recorded by the ledger (Sequence filled in), not the object built
before submission.
"""

from __future__ import annotations

import hashlib
from typing import Any

from xrpl.core.binarycodec import encode

# "TXN\0" — prefix for hashing a signed (or inner batch) transaction.
TRANSACTION_ID_PREFIX = "54584E00"


def sha512_half(data: bytes) -> str:
    """Uppercase hex of the first 32 bytes of SHA-512(data)."""
    return hashlib.sha512(data).digest()[:32].hex().upper()


def hash_tx_blob(tx_blob_hex: str) -> str:
    """Hash a hex-encoded serialized transaction."""
    return sha512_half(bytes.fromhex(TRANSACTION_ID_PREFIX + tx_blob_hex))


def hash_signed_tx(tx: dict[str, Any] | str) -> str:
    """Compute the transaction identifier of a serialized-ready transaction.

    Args:
        tx: Either a transaction dict in XRPL JSON form or its hex blob.

    Returns:
        64-char uppercase hex hash.

    Raises:
        ValueError: If the transaction carries no signing information at
            all (no TxnSignature, Signers or SigningPubKey field), which
            means it was never prepared for submission.
        xrpl.core.binarycodec.XRPLBinaryCodecException: If the dict
            cannot be serialized.
    """
    if isinstance(tx, str):
        return hash_tx_blob(tx)

    if not any(key in tx for key in ("TxnSignature", "Signers", "SigningPubKey")):
        raise ValueError("transaction has no signing fields; cannot compute its hash")
    return hash_tx_blob(encode(tx))
