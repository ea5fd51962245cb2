import itertools
from typing import Any

import httpx

from ruleexplain.channel.exceptions import ChannelNetworkError, JsonRpcError
from ruleexplain.logging.logger import Log

_INTERNAL_ERROR = -32603


class JsonRpcClient:
    """Minimal JSON-RPC 2.0 client over HTTP, shared by channel and authority adapters."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._http = http_client or httpx.Client(timeout=timeout_seconds)
        self._ids = itertools.count(1)

    def call(self, method: str, params: list[Any]) -> Any:
        """Invoke a JSON-RPC method and return its `result` member.

        Raises:
            ChannelNetworkError: on transport failures, HTTP errors or a malformed body.
            JsonRpcError: when the node answers with an `error` object.
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        Log.debug(f"RPC request {method} (id {payload['id']})")
        try:
            response = self._http.post(self._url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ChannelNetworkError(
                f"RPC node returned HTTP {exc.response.status_code} for {method}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ChannelNetworkError(f"RPC node network error: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise ChannelNetworkError(f"RPC node returned invalid JSON for {method}") from exc
        if not isinstance(body, dict):
            raise ChannelNetworkError(f"RPC node returned a non-object body for {method}")

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                code = error.get("code")
                if not isinstance(code, int) or isinstance(code, bool):
                    code = _INTERNAL_ERROR
                raise JsonRpcError(code, str(error.get("message", "")))
            raise JsonRpcError(_INTERNAL_ERROR, str(error))
        return body.get("result")

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()
