"""
rippled JSON-RPC client — the XRPLClient used against live networks.

Every call is one POST through a JsonRpcTransport; tests plug in a fake
transport and exercise the same parsing code.

The node wraps each answer in ``{"result": {...}}``; ``status`` inside
it is ``"success"`` or ``"error"``. Lookups of a Batch use
``binary=true`` so the recorded transaction comes back as ``tx_blob``
(and its metadata as ``meta_blob``).

Nothing here submits, retries or interprets ledger semantics.
"""

from __future__ import annotations

import itertools
import logging
from types import TracebackType
from typing import Any

from xrpl.core.binarycodec import decode

from xrpl_recipes.xrpl.client import TxStatusResult
from xrpl_recipes.xrpl.transport import HttpxTransport, JsonRpcTransport

logger = logging.getLogger(__name__)

API_VERSION = 2

SERVER_ERROR = "SERVER_ERROR"
TXN_NOT_FOUND = "txnNotFound"

_request_ids = itertools.count(1)


class JsonRpcClient:
    """XRPLClient over rippled's JSON-RPC API.

    Closes its transport on ``aclose()`` or when leaving ``async with``.

    Args:
        url: JSON-RPC endpoint, e.g. "https://s.devnet.rippletest.net:51234".
        transport: HTTP seam; an HttpxTransport when omitted.
    """

    def __init__(self, url: str, transport: JsonRpcTransport | None = None) -> None:
        self._url = url
        self._transport = transport if transport is not None else HttpxTransport()

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> JsonRpcClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def _call(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        body = {
            "method": method,
            "params": [{**params, "api_version": API_VERSION}],
            "id": next(_request_ids),
        }
        reply = await self._transport.post_json(self._url, body)
        result: dict[str, Any] = reply.get("result", {})
        return result

    async def get_tx(self, tx_hash: str, *, binary: bool = False) -> TxStatusResult:
        result = await self._call("tx", {"transaction": tx_hash, "binary": binary})
        return _tx_status(result)


# =====================================================================
# Result parsing
# =====================================================================


def _is_error(result: dict[str, Any]) -> bool:
    return result.get("status") == "error"


def _error_detail(result: dict[str, Any], fallback: str) -> str:
    return result.get("error_message") or result.get("error") or fallback


def _tx_status(result: dict[str, Any]) -> TxStatusResult:
    """TxStatusResult from the ``result`` of a ``tx`` call (JSON or binary)."""
    if _is_error(result):
        if result.get("error") == TXN_NOT_FOUND:
            return TxStatusResult(found=False)
        return TxStatusResult(
            found=False,
            error_code=SERVER_ERROR,
            detail=_error_detail(result, "unknown server error"),
        )

    validated = result.get("validated") is True
    tx_json = result.get("tx_json")
    tx_blob = result.get("tx_blob")
    if tx_blob is None and isinstance(result.get("tx"), str):
        tx_blob = result["tx"]

    return TxStatusResult(
        found=True,
        validated=validated,
        ledger_index=result.get("ledger_index") if validated else None,
        engine_result=_transaction_result(result),
        ledger_close_time=result.get("close_time_iso"),
        tx_hash=result.get("hash"),
        nftoken_id=_nftoken_id(result),
        tx_json=tx_json if isinstance(tx_json, dict) else None,
        tx_blob=tx_blob,
    )


def _nftoken_id(result: dict[str, Any]) -> str | None:
    match result.get("meta"):
        case {"nftoken_id": str(nftoken_id)}:
            return nftoken_id
        case _:
            return None


def _transaction_result(result: dict[str, Any]) -> str | None:
    """TransactionResult from ``meta`` or ``meta_blob``; None if absent."""
    meta: Any = result.get("meta", result.get("meta_blob"))
    if isinstance(meta, str):
        try:
            meta = decode(meta)
        except Exception as exc:
            logger.debug("could not decode binary metadata: %s", exc)
            return None

    match meta:
        case {"TransactionResult": str(code)}:
            return code
        case _:
            return None
