"""
XRPL building blocks for the recipes.

Public API:

    Pure layer (no I/O):
        - Transaction builders: ``payment``, ``nftoken_mint``,
          ``nftoken_burn``, ``inner``, ``batch`` (xrpl-py models).
        - ``hash_signed_tx`` / ``hash_tx_blob`` — transaction identifiers.

    Impure layer (network I/O):
        - ``submit_transaction()`` — xrpl-py autofill + sign +
          submit_and_wait.
        - ``JsonRpcClient.get_tx()`` — transaction lookups.

    Protocols (for dependency injection):
        - ``XRPLClient`` — lookup boundary.
        - ``XRPLSigner`` — secrets boundary.
        - ``JsonRpcTransport`` — HTTP seam under JsonRpcClient.

    Concrete implementations:
        - ``JsonRpcClient``, ``HttpxTransport``, ``WalletSigner``.
"""

from xrpl_recipes.xrpl.client import TxStatusResult, XRPLClient
from xrpl_recipes.xrpl.errors import SUCCESS_RESULT, BatchError, XRPLRecipeError
from xrpl_recipes.xrpl.hashing import hash_signed_tx, hash_tx_blob
from xrpl_recipes.xrpl.jsonrpc_client import JsonRpcClient
from xrpl_recipes.xrpl.signer import SignResult, WalletSigner, XRPLSigner
from xrpl_recipes.xrpl.submission import submit_transaction
from xrpl_recipes.xrpl.transport import HttpxTransport, JsonRpcTransport
from xrpl_recipes.xrpl.tx import (
    BATCH_MODES,
    TF_INNER_BATCH_TXN,
    batch,
    inner,
    nftoken_burn,
    nftoken_mint,
    payment,
)

__all__ = [
    "BATCH_MODES",
    "BatchError",
    "HttpxTransport",
    "JsonRpcClient",
    "JsonRpcTransport",
    "SUCCESS_RESULT",
    "SignResult",
    "TF_INNER_BATCH_TXN",
    "TxStatusResult",
    "WalletSigner",
    "XRPLClient",
    "XRPLRecipeError",
    "XRPLSigner",
    "batch",
    "hash_signed_tx",
    "hash_tx_blob",
    "inner",
    "nftoken_burn",
    "nftoken_mint",
    "payment",
    "submit_transaction",
]
