"""CoinGecko token discovery.

Finds token contracts by free-text name or symbol through the CoinGecko
search index, then confirms each contract on-chain.
API docs: https://docs.coingecko.com/reference/search-data
"""

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, Optional

import httpx

from evmexplorer.chains import ChainConfig
from evmexplorer.models import AccountRecord, TokenInfo, dedupe_records

logger = logging.getLogger(__name__)

COINGECKO_API = "https://api.coingecko.com/api/v3"

# CoinGecko asset platform id -> EVM chain id
PLATFORM_CHAIN_IDS = {
    "ethereum": 1,
    "binance-smart-chain": 56,
    "polygon-pos": 137,
    "arbitrum-one": 42161,
    "optimism": 10,
    "avalanche": 43114,
    "fantom": 250,
    "base": 8453,
}

DEFAULT_MAX_CANDIDATES = 8

# Coin detail sections we never read
_DETAIL_PARAMS = {
    "localization": "false",
    "tickers": "false",
    "market_data": "false",
    "community_data": "false",
    "developer_data": "false",
    "sparkline": "false",
}

TokenResolver = Callable[[str, int], Awaitable[Optional[TokenInfo]]]


class CoinGeckoClient:
    """Minimal CoinGecko REST client (search + coin platforms)."""

    def __init__(
        self,
        base_url: str = COINGECKO_API,
        api_key: Optional[str] = None,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-cg-demo-api-key"] = self.api_key
        return headers

    async def _get(self, path: str, params: dict) -> dict:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            response = await client.get(
                f"{self.base_url}{path}",
                headers=self._get_headers(),
                params=params,
            )
            response.raise_for_status()
            data = response.json()
        return data if isinstance(data, dict) else {}

    async def search(self, query: str) -> list[dict]:
        """Search coins by name or symbol, best matches first."""
        data = await self._get("/search", {"query": query})
        coins = data.get("coins")
        return coins if isinstance(coins, list) else []

    async def get_platforms(self, coin_id: str) -> dict[str, str]:
        """Get a coin's contract address per asset platform."""
        data = await self._get(f"/coins/{coin_id}", _DETAIL_PARAMS)
        platforms = data.get("platforms")
        return platforms if isinstance(platforms, dict) else {}


class CoinGeckoDiscovery:
    """Discovers token contracts across supported chains via CoinGecko."""

    def __init__(
        self,
        client: Optional[CoinGeckoClient] = None,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ):
        self.client = client or CoinGeckoClient()
        self.max_candidates = max_candidates

    async def discover(
        self,
        query: str,
        chains: Iterable[ChainConfig],
        resolve_token: TokenResolver,
    ) -> list[AccountRecord]:
        """Find token contracts matching a name or symbol.

        Args:
            query: Free-text name or symbol
            chains: Chains eligible for results
            resolve_token: Fetches on-chain metadata for (address, chain_id)

        Returns:
            Token records, candidate order then platform order, deduplicated.
            Empty if the search service is unavailable.
        """
        chains_by_id = {chain.chain_id: chain for chain in chains}

        try:
            coins = await self.client.search(query)
        except Exception as e:
            logger.warning(f"CoinGecko search failed for {query!r}: {type(e).__name__}: {e}")
            return []

        candidates = [
            coin["id"]
            for coin in coins
            if isinstance(coin, dict) and coin.get("id")
        ][: self.max_candidates]

        logger.debug(f"CoinGecko candidates for {query!r}: {candidates}")

        per_candidate = await asyncio.gather(
            *(
                self._resolve_candidate(coin_id, chains_by_id, resolve_token)
                for coin_id in candidates
            )
        )

        records = [record for batch in per_candidate for record in batch]
        return dedupe_records(records)

    async def _resolve_candidate(
        self,
        coin_id: str,
        chains_by_id: dict[int, ChainConfig],
        resolve_token: TokenResolver,
    ) -> list[AccountRecord]:
        """Resolve one coin's platform contracts into token records."""
        try:
            platforms = await self.client.get_platforms(coin_id)
        except Exception as e:
            logger.warning(f"CoinGecko detail failed for {coin_id}: {type(e).__name__}: {e}")
            return []

        pairs = []
        for platform, address in platforms.items():
            chain_id = PLATFORM_CHAIN_IDS.get(platform)
            if chain_id is None or not address:
                continue
            chain = chains_by_id.get(chain_id)
            if chain is None:
                continue
            pairs.append((chain, address))

        infos = await asyncio.gather(
            *(resolve_token(address, chain.chain_id) for chain, address in pairs),
            return_exceptions=True,
        )

        records = []
        for (chain, address), info in zip(pairs, infos):
            if info is None or isinstance(info, BaseException):
                continue
            records.append(
                AccountRecord(
                    address=address,
                    chain=chain.name,
                    chain_id=chain.chain_id,
                    is_contract=True,
                    balance="0",
                    token_info=info,
                    explorer_url=chain.address_url(address),
                )
            )
        return records
