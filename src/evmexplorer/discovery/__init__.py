"""External token discovery services."""

from evmexplorer.discovery.coingecko import (
    PLATFORM_CHAIN_IDS,
    CoinGeckoClient,
    CoinGeckoDiscovery,
)

__all__ = ["PLATFORM_CHAIN_IDS", "CoinGeckoClient", "CoinGeckoDiscovery"]
