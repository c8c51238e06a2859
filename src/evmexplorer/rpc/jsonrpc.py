"""JSON-RPC 2.0 chain client over HTTP."""

import itertools
import logging
from typing import Any, Optional

import httpx

from evmexplorer.rpc.base import ChainClient, RPCError

logger = logging.getLogger(__name__)

_request_ids = itertools.count(1)


class JsonRpcClient(ChainClient):
    """Chain client speaking plain JSON-RPC to a public endpoint.

    A fresh httpx client is opened per request, so one instance can be
    shared by every search running in the process.
    """

    def __init__(
        self,
        chain_id: int,
        rpc_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize JSON-RPC client.

        Args:
            chain_id: Chain id this endpoint serves
            rpc_url: HTTP(S) JSON-RPC endpoint
            timeout: Deadline in seconds for each request
            transport: Optional httpx transport (used by tests)
        """
        self._chain_id = chain_id
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._transport = transport

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def _request(self, method: str, params: list) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(_request_ids),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.rpc_url, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise RPCError(f"{method} timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise RPCError(f"{method} transport error: {e}") from e
        except ValueError as e:
            raise RPCError(f"{method} returned non-JSON response") from e

        if not isinstance(data, dict):
            raise RPCError(f"{method} returned malformed response")

        error = data.get("error")
        if error:
            if isinstance(error, dict):
                raise RPCError(str(error.get("message", "unknown error")), error.get("code"))
            raise RPCError(str(error))

        if "result" not in data:
            raise RPCError(f"{method} response has no result")

        return data["result"]

    async def get_code(self, address: str) -> str:
        result = await self._request("eth_getCode", [address, "latest"])
        if not isinstance(result, str):
            raise RPCError("eth_getCode returned non-string result")
        return result

    async def get_balance(self, address: str) -> int:
        result = await self._request("eth_getBalance", [address, "latest"])
        try:
            return int(result, 16)
        except (TypeError, ValueError) as e:
            raise RPCError(f"eth_getBalance returned invalid quantity: {result!r}") from e

    async def call(self, to: str, data: str) -> str:
        result = await self._request("eth_call", [{"to": to, "data": data}, "latest"])
        if not isinstance(result, str):
            raise RPCError("eth_call returned non-string result")
        return result

    def __repr__(self) -> str:
        return f"JsonRpcClient(chain_id={self._chain_id}, rpc_url={self.rpc_url!r})"
