"""Factory for per-chain RPC clients.

The client map is built once and handed to the explorer; nothing mutates
it afterwards.
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional

from evmexplorer.chains import SUPPORTED_CHAINS, ChainConfig
from evmexplorer.config import Settings, get_settings
from evmexplorer.rpc.base import ChainClient
from evmexplorer.rpc.jsonrpc import JsonRpcClient

logger = logging.getLogger(__name__)


def build_chain_clients(
    chains: Iterable[ChainConfig] = SUPPORTED_CHAINS,
    settings: Optional[Settings] = None,
) -> dict[int, ChainClient]:
    """Create one JSON-RPC client per chain.

    Args:
        chains: Chains to build clients for
        settings: Settings holding RPC overrides and timeouts

    Returns:
        Mapping of chain id to client
    """
    settings = settings or get_settings()
    clients: dict[int, ChainClient] = {}

    for chain in chains:
        override = settings.get_rpc_url(chain.chain_id)
        rpc_url = override or chain.rpc_url
        if override:
            logger.info(f"Using RPC override for {chain.name}: {override}")
        clients[chain.chain_id] = JsonRpcClient(
            chain_id=chain.chain_id,
            rpc_url=rpc_url,
            timeout=settings.rpc_timeout_seconds,
        )

    return clients


@lru_cache
def get_chain_clients() -> dict[int, ChainClient]:
    """Get the process-wide client map for all supported chains."""
    return build_chain_clients(SUPPORTED_CHAINS, get_settings())
