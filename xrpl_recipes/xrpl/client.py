"""
What the batch resolver needs from a ledger node: transaction lookups.

Batch code depends on this Protocol only; httpx lives behind
JsonRpcClient. Submission goes through xrpl-py's client instead.

get_tx() reports ledger outcomes (txnNotFound, node errors) as a frozen
dataclass instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TxStatusResult:
    """Result of looking up a transaction by hash.

    ``engine_result`` is the metadata discriminator: a string when the
    response carried parseable metadata with a ``TransactionResult``,
    None when it did not.

    Attributes:
        found: False for txnNotFound and for node errors.
        validated: The ledger holding the transaction is validated.
        ledger_index: Ledger sequence the tx was validated in, else None.
        engine_result: Final result code from the transaction metadata.
        ledger_close_time: ISO 8601 close time when the node reports it.
        tx_hash: Hash echoed by the node.
        nftoken_id: NFToken created by an NFTokenMint (JSON metadata only).
        tx_json: Transaction fields (JSON lookups only).
        tx_blob: Hex-encoded serialized transaction (binary lookups only).
        error_code: Machine-readable error category if the node returned
            an error other than txnNotFound.
        detail: Node-supplied message, for logs.
    """

    found: bool
    validated: bool = False
    ledger_index: int | None = None
    engine_result: str | None = None
    ledger_close_time: str | None = None
    tx_hash: str | None = None
    nftoken_id: str | None = None
    tx_json: dict[str, Any] | None = field(default=None, compare=False)
    tx_blob: str | None = None
    error_code: str | None = None
    detail: str | None = None


@runtime_checkable
class XRPLClient(Protocol):
    """Async transaction lookups against one rippled node."""

    async def get_tx(self, tx_hash: str, *, binary: bool = False) -> TxStatusResult:
        """Look up a transaction by hash."""
        ...
