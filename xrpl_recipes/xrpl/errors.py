"""
Error types raised by this package.

Ledger and submission failures are reported by xrpl-py's own exceptions
(``XRPLReliableSubmissionException`` carries "Transaction failed: <code>")
and transport failures by httpx; this module only covers what the
recipes add on top.
"""

from __future__ import annotations

SUCCESS_RESULT = "tesSUCCESS"


class XRPLRecipeError(Exception):
    """Base class for errors raised by this package."""


class BatchError(XRPLRecipeError):
    """A Batch transaction is malformed or its record is unusable."""
