"""JSON-RPC transport to a node and checking of its responses."""

from __future__ import annotations

import enum
import itertools
import json
import urllib.error
import urllib.request
from typing import Any, Mapping, Optional, Sequence

LOCALNET_ENDPOINT = "http://localhost:8899"


class Commitment(str, enum.Enum):
    """How settled the state a query reads from must be."""

    FINALIZED = "finalized"
    CONFIRMED = "confirmed"
    PROCESSED = "processed"


class RpcError(Exception):
    """Raised when a request fails or the node answers with an error."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class HttpTransport:
    """Sends JSON-RPC 2.0 requests to a node over HTTP."""

    def __init__(self, endpoint: str = LOCALNET_ENDPOINT, timeout: float = 30.0) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._ids = itertools.count(1)

    def call(self, method: str, params: Optional[Sequence[Any]] = None) -> dict:
        """Send one request and return the decoded response object."""
        payload: dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
        }
        if params:
            payload["params"] = list(params)
        request = urllib.request.Request(
            self.endpoint,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as reply:
                raw = reply.read()
        except urllib.error.HTTPError as exc:
            exc.close()
            raise RpcError(f"rpc request failed with status {exc.code}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise RpcError(f"rpc request failed: {exc}") from exc
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            raise RpcError(f"failed to decode rpc response: {exc}") from exc
        if not isinstance(decoded, dict):
            raise RpcError("rpc response is not a JSON object")
        return decoded


def check_rpc_result(response: Mapping[str, Any]) -> Any:
    """Return the response's result, or raise RpcError if it carries an error."""
    error = response.get("error")
    if error is not None:
        try:
            text = json.dumps(error, separators=(",", ":"))
        except (TypeError, ValueError):
            text = str(error)
        raise RpcError(f"rpc response error: {text}", error)
    return response.get("result")