"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from evmexplorer import __version__
from evmexplorer.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="EVM Explorer API",
        description="Multi-chain address and token search",
        version=__version__,
        debug=settings.debug,
    )

    # Browser UI runs on another origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from evmexplorer.api.routes import chains, health, search

    app.include_router(health.router, tags=["Health"])
    app.include_router(chains.router, prefix="/api/v1", tags=["Chains"])
    app.include_router(search.router, prefix="/api/v1", tags=["Search"])

    return app
