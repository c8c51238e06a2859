"""Read-only JSON-RPC clients for EVM chains."""

from evmexplorer.rpc.base import ChainClient, RPCError
from evmexplorer.rpc.factory import build_chain_clients, get_chain_clients
from evmexplorer.rpc.jsonrpc import JsonRpcClient

__all__ = [
    "ChainClient",
    "RPCError",
    "JsonRpcClient",
    "build_chain_clients",
    "get_chain_clients",
]
