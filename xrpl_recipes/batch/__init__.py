"""
Batch transactions: submission and inner-transaction outcomes.
"""

from xrpl_recipes.batch.inner import fetch_inner_tx_hashes, inner_tx_hashes
from xrpl_recipes.batch.runner import BatchOutcome, run_batch
from xrpl_recipes.batch.status import (
    STATUS_NOT_VALIDATED,
    STATUS_UNKNOWN,
    InnerTxHash,
    InnerTxStatus,
    get_batch_tx_status,
)

__all__ = [
    "BatchOutcome",
    "InnerTxHash",
    "InnerTxStatus",
    "STATUS_NOT_VALIDATED",
    "STATUS_UNKNOWN",
    "fetch_inner_tx_hashes",
    "get_batch_tx_status",
    "inner_tx_hashes",
    "run_batch",
]
