"""
xrpl-recipes: runnable XRPL transaction recipes.

Batch transactions are the centerpiece: a Batch is submitted, the
inner transaction hashes are recomputed from the ledger record, and each
inner transaction's own result is resolved concurrently.
"""

__version__ = "0.1.0"

from xrpl_recipes.batch import (
    BatchOutcome,
    InnerTxHash,
    InnerTxStatus,
    get_batch_tx_status,
    run_batch,
)
from xrpl_recipes.config import Settings

__all__ = [
    "BatchOutcome",
    "InnerTxHash",
    "InnerTxStatus",
    "Settings",
    "__version__",
    "get_batch_tx_status",
    "run_batch",
]
