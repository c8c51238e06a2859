"""Chain information API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from evmexplorer.api.contracts import ChainInfo, ChainListResponse
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

router = APIRouter(prefix="/chains")


@router.get("", response_model=ChainListResponse)
async def get_chains(explorer: UnifiedExplorer = Depends(get_explorer)) -> ChainListResponse:
    """Get list of supported blockchains in search order."""
    chains = [ChainInfo.from_config(chain) for chain in explorer.get_supported_chains()]
    return ChainListResponse(chains=chains, total=len(chains))


@router.get("/{chain_id}", response_model=ChainInfo)
async def get_chain(
    chain_id: int,
    explorer: UnifiedExplorer = Depends(get_explorer),
) -> ChainInfo:
    """Get information about a specific chain.

    Args:
        chain_id: Numeric EVM chain id
    """
    for chain in explorer.get_supported_chains():
        if chain.chain_id == chain_id:
            return ChainInfo.from_config(chain)
    raise HTTPException(status_code=404, detail=f"Chain not found: {chain_id}")
