"""HTTP API for browser clients."""

from evmexplorer.api.app import create_app

__all__ = ["create_app"]
