"""
Shared fakes for tests that drive a whole Batch through submission.

FakeNode plays a rippled JSON-RPC node behind pytest-httpx, so both
xrpl-py's AsyncJsonRpcClient (autofill, submit_and_wait) and our
JsonRpcClient (lookups) talk to it over mocked HTTP. It accepts a
submitted blob, reports it validated, serves it back in binary form,
and answers lookups of the inner transactions by their position in the
recorded Batch.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
from pytest_httpx import HTTPXMock
from xrpl.asyncio.clients import AsyncJsonRpcClient
from xrpl.core.binarycodec import decode, encode
from xrpl.wallet import Wallet

from xrpl_recipes.xrpl.hashing import hash_signed_tx, hash_tx_blob
from xrpl_recipes.xrpl.jsonrpc_client import JsonRpcClient
from xrpl_recipes.xrpl.signer import WalletSigner

NODE_URL = "http://localhost:5005"

START_SEQUENCE = 10
VALIDATED_LEDGER = 100
BASE_FEE = 10

# Inner result that makes FakeNode answer "not found".
NOT_FOUND = "NOT_FOUND"


def _success(**fields: Any) -> dict[str, Any]:
    return {**fields, "status": "success"}


def _error(error: str, message: str) -> dict[str, Any]:
    return {"error": error, "error_message": message, "status": "error"}


class FakeNode:
    """rippled stand-in holding every submitted Batch.

    Attributes:
        inner_results: Per Batch still to be submitted, the result of
            each inner transaction by position. A missing position or
            NOT_FOUND means the inner transaction is not in the ledger;
            None means found without metadata.
        outer_result: Engine result recorded for every outer Batch.
        nfts: NFTs the account already holds, served by account_nfts.
        minted: NFTokenIDs created by successful inner NFTokenMints.
    """

    def __init__(self) -> None:
        self.inner_results: list[list[str | None]] = []
        self.outer_result = "tesSUCCESS"
        self.nfts: list[dict[str, Any]] = []
        self.minted: list[str] = []
        self.submitted: list[dict[str, Any]] = []
        self.submitted_hashes: list[str] = []
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.hosts: list[str] = []
        self._sequences: dict[str, int] = {}
        self._txs: dict[str, dict[str, Any]] = {}

    def expect(self, *inner_results: list[str | None]) -> "FakeNode":
        self.inner_results.extend(inner_results)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        method = body["method"]
        params = body["params"][0] if body.get("params") else {}
        self.hosts.append(request.url.host)
        self.requests.append((method, params))

        handler = getattr(self, f"_{method}", None)
        if handler is None:
            raise AssertionError(f"unexpected method {method}")
        return httpx.Response(200, json={"result": handler(params), "id": body.get("id")})

    # -- commands --------------------------------------------------------

    def _server_info(self, params: dict[str, Any]) -> dict[str, Any]:
        return _success(
            info={
                "build_version": "2.4.0",
                "network_id": 2,
                "server_state": "full",
                "complete_ledgers": f"1-{VALIDATED_LEDGER}",
                "validated_ledger": {
                    "seq": VALIDATED_LEDGER,
                    "hash": "0" * 64,
                    "base_fee_xrp": 0.00001,
                    "reserve_base_xrp": 1,
                    "reserve_inc_xrp": 0.2,
                    "age": 1,
                },
            }
        )

    def _account_info(self, params: dict[str, Any]) -> dict[str, Any]:
        account = params["account"]
        return _success(
            account_data={
                "Account": account,
                "Balance": "100000000000",
                "Flags": 0,
                "LedgerEntryType": "AccountRoot",
                "OwnerCount": 0,
                "PreviousTxnID": "0" * 64,
                "PreviousTxnLgrSeq": 1,
                "Sequence": self._sequences.get(account, START_SEQUENCE),
                "index": "0" * 64,
            },
            ledger_current_index=VALIDATED_LEDGER + 1,
            validated=False,
        )

    def _fee(self, params: dict[str, Any]) -> dict[str, Any]:
        return _success(
            current_ledger_size="0",
            current_queue_size="0",
            drops={
                "base_fee": str(BASE_FEE),
                "median_fee": "5000",
                "minimum_fee": str(BASE_FEE),
                "open_ledger_fee": str(BASE_FEE),
            },
            expected_ledger_size="1000",
            ledger_current_index=VALIDATED_LEDGER + 1,
            levels={
                "median_level": "128000",
                "minimum_level": "256",
                "open_ledger_level": "256",
                "reference_level": "256",
            },
            max_queue_size="20000",
        )

    def _ledger(self, params: dict[str, Any]) -> dict[str, Any]:
        return _success(
            ledger={"ledger_index": str(VALIDATED_LEDGER), "closed": True},
            ledger_hash="0" * 64,
            ledger_index=VALIDATED_LEDGER,
            validated=True,
        )

    def _submit(self, params: dict[str, Any]) -> dict[str, Any]:
        blob = params["tx_blob"]
        tx = decode(blob)
        tx_hash = hash_tx_blob(blob)
        self.submitted.append(tx)
        self.submitted_hashes.append(tx_hash)
        self._record(tx, tx_hash, blob)
        return _success(
            accepted=True,
            applied=True,
            broadcast=True,
            kept=True,
            queued=False,
            engine_result="tesSUCCESS",
            engine_result_code=0,
            engine_result_message="The transaction was applied. Only final in a validated ledger.",
            tx_blob=blob,
            tx_json={**tx, "hash": tx_hash},
        )

    def _tx(self, params: dict[str, Any]) -> dict[str, Any]:
        tx_hash = params["transaction"]
        entry = self._txs.get(tx_hash)
        if entry is None:
            return _error("txnNotFound", "Transaction not found.")

        binary = bool(params.get("binary"))
        body: dict[str, Any] = {
            "hash": tx_hash,
            "ledger_index": VALIDATED_LEDGER,
            "validated": True,
        }
        if binary:
            body["tx_blob"] = entry["blob"]
        else:
            body["tx_json"] = entry["tx"]

        if entry["result"] is not None:
            meta: dict[str, Any] = {
                "AffectedNodes": [],
                "TransactionIndex": 0,
                "TransactionResult": entry["result"],
            }
            if binary:
                body["meta_blob"] = encode(meta)
            else:
                if entry["nftoken_id"]:
                    meta["nftoken_id"] = entry["nftoken_id"]
                body["meta"] = meta
        return _success(**body)

    def _account_nfts(self, params: dict[str, Any]) -> dict[str, Any]:
        return _success(account=params["account"], account_nfts=self.nfts, validated=True)

    # -- ledger state ----------------------------------------------------

    def _record(self, tx: dict[str, Any], tx_hash: str, blob: str) -> None:
        results = self.inner_results.pop(0) if self.inner_results else []
        self._txs[tx_hash] = {"tx": tx, "blob": blob, "result": self.outer_result, "nftoken_id": None}

        sequences = [tx["Sequence"]]
        for position, raw in enumerate(tx.get("RawTransactions", [])):
            inner_tx = raw["RawTransaction"]
            sequences.append(inner_tx["Sequence"])
            result = results[position] if position < len(results) else NOT_FOUND
            if result == NOT_FOUND:
                continue

            inner_hash = hash_signed_tx(inner_tx)
            nftoken_id = None
            if inner_tx["TransactionType"] == "NFTokenMint" and result == "tesSUCCESS":
                nftoken_id = "00080000" + inner_hash[8:]
                self.minted.append(nftoken_id)
            self._txs[inner_hash] = {
                "tx": inner_tx,
                "blob": encode(inner_tx),
                "result": result,
                "nftoken_id": nftoken_id,
            }
        self._sequences[tx["Account"]] = max(sequences) + 1


@pytest.fixture
def node(httpx_mock: HTTPXMock, monkeypatch: pytest.MonkeyPatch) -> FakeNode:
    monkeypatch.setattr("xrpl.asyncio.transaction.main._LEDGER_CLOSE_TIME", 0, raising=False)
    fake = FakeNode()
    httpx_mock.add_callback(fake.handle, is_reusable=True)
    return fake


@pytest.fixture
def client() -> AsyncJsonRpcClient:
    return AsyncJsonRpcClient(NODE_URL)


@pytest.fixture
def ledger() -> JsonRpcClient:
    return JsonRpcClient(NODE_URL)


@pytest.fixture
def signer() -> WalletSigner:
    return WalletSigner(Wallet.create())


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo configure_logging() changes made by a test."""
    package = logging.getLogger("xrpl_recipes")
    httpx_logger = logging.getLogger("httpx")
    handlers, level, propagate = package.handlers[:], package.level, package.propagate
    httpx_level = httpx_logger.level
    yield
    package.handlers[:] = handlers
    package.setLevel(level)
    package.propagate = propagate
    httpx_logger.setLevel(httpx_level)
