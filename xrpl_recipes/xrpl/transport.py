"""
HTTP seam under JsonRpcClient.

JsonRpcClient only needs "POST this JSON, give me the decoded reply";
JsonRpcTransport names that, so tests can answer from canned dicts.

HttpxTransport keeps one httpx.AsyncClient (connection pool) per
instance. The pool is created on the first request and released by
``aclose()``; JsonRpcClient calls it when its ``async with`` block exits.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


@runtime_checkable
class JsonRpcTransport(Protocol):
    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST ``payload`` to ``url`` and return the decoded JSON reply.

        Raises:
            Exception: Whatever the HTTP layer raises (refused connection,
                timeout, non-2xx status). Not translated here.
        """
        ...


class HttpxTransport:
    """JsonRpcTransport backed by a lazily created httpx.AsyncClient.

    Args:
        timeout: Per-request timeout in seconds.
        client: Externally owned AsyncClient to use instead; it is left
            open by ``aclose()``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        client = self._client
        if client is None or client.is_closed:
            client = httpx.AsyncClient(timeout=self._timeout)
            self._client = client
            self._owns_client = True
        return client

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s method=%s", url, payload.get("method"))
        response = await self._get_client().post(url, json=payload)
        response.raise_for_status()
        decoded: dict[str, Any] = response.json()
        return decoded

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
