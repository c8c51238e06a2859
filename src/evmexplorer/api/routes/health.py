"""Health check endpoints."""

from fastapi import APIRouter, Depends

from evmexplorer import __version__
from evmexplorer.config import get_settings
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "evm-explorer"}


@router.get("/health/detailed")
async def detailed_health(explorer: UnifiedExplorer = Depends(get_explorer)):
    """Detailed health check with the explorer's search setup.

    Lists each searched chain and whether it has an RPC client. Chains
    without one are skipped by every search, so the status is degraded.
    """
    chains = [
        {
            "chain_id": chain.chain_id,
            "name": chain.name,
            "has_client": chain.chain_id in explorer.clients,
            "curated_tokens": len(explorer.token_lists.get(chain.chain_id, ())),
        }
        for chain in explorer.get_supported_chains()
    ]
    missing = [c["chain_id"] for c in chains if not c["has_client"]]

    return {
        "status": "degraded" if missing else "healthy",
        "service": "evm-explorer",
        "version": __version__,
        "search_mode": explorer.mode.value,
        "chains": chains,
        "config": get_settings().get_safe_dict(),
    }
