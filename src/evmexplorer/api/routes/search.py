"""Search API endpoints.

Searches never fail because of an individual chain; the worst outcome is
an empty result with found=false.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from evmexplorer.config import SearchMode
from evmexplorer.models import SearchResult
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

router = APIRouter(prefix="/search")


@router.get("", response_model=SearchResult)
async def smart_search(
    q: str = Query(..., description="Address, token symbol or token name"),
    mode: Optional[SearchMode] = Query(None, description="Name/symbol search policy"),
    explorer: UnifiedExplorer = Depends(get_explorer),
) -> SearchResult:
    """Search by address, or by token name/symbol for anything else."""
    return await explorer.smart_search(q, mode=mode)


@router.get("/address/{address}", response_model=SearchResult)
async def search_address(
    address: str,
    explorer: UnifiedExplorer = Depends(get_explorer),
) -> SearchResult:
    """Look up an address on every supported chain."""
    return await explorer.search_by_address(address)


@router.get("/symbol/{symbol}", response_model=SearchResult)
async def search_symbol(
    symbol: str,
    explorer: UnifiedExplorer = Depends(get_explorer),
) -> SearchResult:
    """Find curated tokens by exact symbol."""
    return await explorer.search_by_token_symbol(symbol)


@router.get("/name/{name}", response_model=SearchResult)
async def search_name(
    name: str,
    explorer: UnifiedExplorer = Depends(get_explorer),
) -> SearchResult:
    """Find curated tokens whose name contains the query."""
    return await explorer.search_by_token_name(name)
