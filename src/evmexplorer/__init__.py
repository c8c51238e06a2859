"""EVM Explorer - search addresses and tokens across EVM chains."""

from typing import Optional, Union

from evmexplorer.chains import (
    SUPPORTED_CHAINS,
    ChainConfig,
    NativeCurrency,
    get_chain_by_id,
    get_chain_by_name,
)
from evmexplorer.config import SearchMode
from evmexplorer.models import AccountRecord, SearchResult, SearchType, TokenInfo
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

__version__ = "0.1.0"


async def smart_search(
    query: str,
    mode: Optional[Union[SearchMode, str]] = None,
) -> SearchResult:
    """Search by address, symbol or name with the default explorer."""
    return await get_explorer().smart_search(query, mode=mode)


async def search_by_address(address: str) -> SearchResult:
    """Look up an address on every supported chain."""
    return await get_explorer().search_by_address(address)


async def search_by_token_name(name: str) -> SearchResult:
    """Find curated tokens whose name contains the query."""
    return await get_explorer().search_by_token_name(name)


async def search_by_token_symbol(symbol: str) -> SearchResult:
    """Find curated tokens whose symbol equals the query."""
    return await get_explorer().search_by_token_symbol(symbol)


def get_supported_chains() -> tuple[ChainConfig, ...]:
    return SUPPORTED_CHAINS


__all__ = [
    "SUPPORTED_CHAINS",
    "AccountRecord",
    "ChainConfig",
    "NativeCurrency",
    "SearchMode",
    "SearchResult",
    "SearchType",
    "TokenInfo",
    "UnifiedExplorer",
    "get_chain_by_id",
    "get_chain_by_name",
    "get_explorer",
    "get_supported_chains",
    "search_by_address",
    "search_by_token_name",
    "search_by_token_symbol",
    "smart_search",
]
