"""Contract channel backed by a JSON-RPC node.

Calls are addressed to the explanation contract with calldata carrying the
contract method name and its arguments as hex-encoded JSON, which is what the
node's contract gateway expects. View results come back in the same encoding.
"""

import json
import time
from typing import Any

from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.exceptions import (
    AcceptanceError,
    AcceptanceTimeoutError,
    ChannelError,
    ChannelNetworkError,
    JsonRpcError,
    QueryError,
    SubmissionRejectedError,
)
from ruleexplain.channel.json_rpc_client import JsonRpcClient
from ruleexplain.channel.models import SubmissionReceipt
from ruleexplain.logging.logger import Log

_STATUS_SUCCESS = "0x1"
_STATUS_REVERTED = "0x0"


class RpcContractChannel(BaseContractChannel):
    """Submits clauses and reads explanations through a JSON-RPC node."""

    def __init__(
        self,
        *,
        client: JsonRpcClient,
        contract_address: str,
        receipt_poll_interval_seconds: float = 1.0,
        write_method: str = "explain_clause",
        read_method: str = "get_explanation",
    ) -> None:
        self._client = client
        self._contract_address = contract_address
        self._receipt_poll_interval = receipt_poll_interval_seconds
        self._write_method = write_method
        self._read_method = read_method

    def submit(self, text: str, sender: str) -> SubmissionReceipt:
        transaction = {
            "from": sender,
            "to": self._contract_address,
            "data": encode_call(self._write_method, [text]),
        }
        try:
            tx_hash = self._client.call("eth_sendTransaction", [transaction])
        except JsonRpcError as exc:
            raise SubmissionRejectedError(exc.message or str(exc)) from exc
        if not isinstance(tx_hash, str) or not tx_hash:
            raise SubmissionRejectedError("Node returned no transaction hash")
        Log.info(f"Submitted {self._write_method} from {sender}: {tx_hash}")
        return SubmissionReceipt(tx_hash=tx_hash, sender=sender)

    def wait_for_acceptance(
        self, receipt: SubmissionReceipt, timeout: float | None = None
    ) -> None:
        deadline = time.monotonic() + timeout if timeout else None
        while True:
            status = self._fetch_receipt_status(receipt.tx_hash)
            if status == _STATUS_SUCCESS:
                Log.info(f"Transaction {receipt.tx_hash} accepted")
                return
            if status == _STATUS_REVERTED:
                raise AcceptanceError(f"Transaction {receipt.tx_hash} reverted")
            if deadline is not None and time.monotonic() >= deadline:
                raise AcceptanceTimeoutError(
                    f"Transaction {receipt.tx_hash} not accepted within {timeout:g}s"
                )
            time.sleep(self._receipt_poll_interval)

    def query(self, key: str) -> str:
        call = {
            "to": self._contract_address,
            "data": encode_call(self._read_method, [key]),
        }
        try:
            raw = self._client.call("eth_call", [call, "latest"])
        except ChannelError as exc:
            raise QueryError(f"Explanation lookup failed: {exc}") from exc
        return decode_result(raw)

    def _fetch_receipt_status(self, tx_hash: str) -> str | None:
        """Return the receipt status, or None while the transaction is pending."""
        try:
            data = self._client.call("eth_getTransactionReceipt", [tx_hash])
        except ChannelNetworkError as exc:
            Log.warning(f"Receipt lookup for {tx_hash} failed, will retry: {exc}")
            return None
        except JsonRpcError as exc:
            raise AcceptanceError(exc.message or str(exc)) from exc
        if not isinstance(data, dict):
            return None
        status = data.get("status")
        return status if isinstance(status, str) else None


def encode_call(method: str, args: list[Any]) -> str:
    """Encode a contract method call as 0x-prefixed hex of its JSON form."""
    payload = json.dumps({"method": method, "args": args}, ensure_ascii=False)
    return "0x" + payload.encode("utf-8").hex()


def decode_result(raw: Any) -> str:
    """Decode a view call result into text; an empty result decodes to ''."""
    if raw is None:
        return ""
    if not isinstance(raw, str) or not raw.startswith("0x"):
        raise QueryError(f"Unexpected view result: {raw!r}")
    if raw == "0x":
        return ""
    try:
        value = json.loads(bytes.fromhex(raw[2:]).decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as exc:
        raise QueryError(f"Undecodable view result: {exc}") from exc
    if value is None:
        return ""
    if not isinstance(value, str):
        raise QueryError(f"View result is not text: {value!r}")
    return value
