import json
from typing import Any

import httpx
import pytest

from ruleexplain.channel.json_rpc_client import JsonRpcClient
from ruleexplain.keys.key_deriver import derive_key

SENTINEL = "Explanation not found"


class FakeNode:
    """In-process JSON-RPC node hosting the explanation contract.

    Explanations are written under the derived key after `ready_after`
    missed lookups, like the out-of-band validators would.
    """

    def __init__(self, *, ready_after: int = 2, pending_receipts: int = 1) -> None:
        self.ready_after = ready_after
        self.pending_receipts = pending_receipts
        self.accounts = ["0x9fB29AAc15b9A4B7F17c3385939b007540f4d791"]
        self.calls: list[str] = []
        self.reject_reason: str | None = None
        self.failing_calls = 0
        self._transactions: dict[str, str] = {}
        self._receipt_polls: dict[str, int] = {}
        self._misses: dict[str, int] = {}
        self._store: dict[str, str] = {}

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        method, params = body["method"], body["params"]
        self.calls.append(method)
        handler = getattr(self, f"_rpc_{method}", None)
        if handler is None:
            return self._error(body["id"], -32601, "Method not found")
        try:
            result = handler(params)
        except _RpcFailure as failure:
            return self._error(body["id"], failure.code, failure.message)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    def count(self, method: str) -> int:
        return self.calls.count(method)

    def _rpc_eth_requestAccounts(self, params: list[Any]) -> list[str]:
        return self.accounts

    def _rpc_eth_sendTransaction(self, params: list[Any]) -> str:
        if self.reject_reason is not None:
            raise _RpcFailure(-32000, self.reject_reason)
        call = _decode(params[0]["data"])
        tx_hash = f"0x{len(self._transactions) + 1:064x}"
        self._transactions[tx_hash] = call["args"][0]
        self._receipt_polls[tx_hash] = 0
        return tx_hash

    def _rpc_eth_getTransactionReceipt(self, params: list[Any]) -> dict[str, str] | None:
        tx_hash = params[0]
        if self._receipt_polls[tx_hash] < self.pending_receipts:
            self._receipt_polls[tx_hash] += 1
            return None
        key = derive_key(self._transactions[tx_hash])
        self._misses.setdefault(key, 0)
        return {"transactionHash": tx_hash, "status": "0x1"}

    def _rpc_eth_call(self, params: list[Any]) -> str:
        if self.failing_calls:
            self.failing_calls -= 1
            raise _RpcFailure(-32603, "Internal error")
        key = _decode(params[0]["data"])["args"][0]
        if key in self._misses and key not in self._store:
            if self._misses[key] >= self.ready_after:
                self._store[key] = "Plain-English text"
            else:
                self._misses[key] += 1
        return _encode(self._store.get(key, SENTINEL))

    @staticmethod
    def _error(request_id: int, code: int, message: str) -> httpx.Response:
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}},
        )


class _RpcFailure(Exception):
    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def _decode(data: str) -> dict[str, Any]:
    return json.loads(bytes.fromhex(data[2:]).decode("utf-8"))


def _encode(value: str) -> str:
    return "0x" + json.dumps(value).encode("utf-8").hex()


@pytest.fixture()
def fake_node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def rpc_client(fake_node: FakeNode) -> JsonRpcClient:
    http = httpx.Client(transport=httpx.MockTransport(fake_node.handle))
    return JsonRpcClient(url="http://node.test/api", timeout_seconds=5, http_client=http)
