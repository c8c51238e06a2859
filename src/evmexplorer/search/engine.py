"""Multi-chain search engine.

Every search fans out to all registered chains at once and waits for all
of them. A chain that errors or times out contributes nothing; it never
fails the search. Results follow registry order, not completion order.
"""

import asyncio
import logging
from functools import lru_cache
from typing import Awaitable, Callable, Iterable, Mapping, Optional, Sequence, TypeVar, Union

from eth_utils import to_checksum_address

from evmexplorer.chains import SUPPORTED_CHAINS, ChainConfig
from evmexplorer.config import SearchMode, Settings, get_settings
from evmexplorer.discovery.coingecko import CoinGeckoClient, CoinGeckoDiscovery
from evmexplorer.models import (
    AccountRecord,
    SearchResult,
    SearchType,
    TokenInfo,
    dedupe_records,
)
from evmexplorer.rpc.base import ChainClient
from evmexplorer.rpc.factory import build_chain_clients, get_chain_clients
from evmexplorer.search.classifier import QueryKind, classify_query, is_valid_address
from evmexplorer.tokens.curated import KNOWN_TOKENS
from evmexplorer.tokens.erc20 import fetch_token_info
from evmexplorer.utils.units import format_units

logger = logging.getLogger(__name__)

T = TypeVar("T")

CODE_PREVIEW_LENGTH = 100
EMPTY_CODE = ("", "0x", "0x0")


class UnifiedExplorer:
    """Searches addresses and tokens across all supported EVM chains.

    Example:
        explorer = UnifiedExplorer()
        result = await explorer.smart_search("USDT")
        for record in result.results:
            print(record.chain, record.address)
    """

    def __init__(
        self,
        chains: Optional[Iterable[ChainConfig]] = None,
        clients: Optional[Mapping[int, ChainClient]] = None,
        discovery: Optional[CoinGeckoDiscovery] = None,
        settings: Optional[Settings] = None,
        mode: Optional[Union[SearchMode, str]] = None,
        token_lists: Optional[Mapping[int, Sequence[str]]] = None,
    ):
        """Initialize explorer.

        Args:
            chains: Chains to search (default: all supported chains)
            clients: Chain id -> client map (default: JSON-RPC clients)
            discovery: External token discovery (default: CoinGecko)
            settings: Settings (default: environment)
            mode: Smart search policy (default: settings.search_mode)
            token_lists: Curated token addresses per chain id
        """
        self.settings = settings or get_settings()
        self.chains: tuple[ChainConfig, ...] = (
            tuple(chains) if chains is not None else SUPPORTED_CHAINS
        )

        if clients is not None:
            self.clients = dict(clients)
        elif chains is None and settings is None:
            self.clients = get_chain_clients()
        else:
            self.clients = build_chain_clients(self.chains, self.settings)

        self.discovery = discovery or CoinGeckoDiscovery(
            CoinGeckoClient(
                base_url=self.settings.coingecko_api_url,
                api_key=self.settings.coingecko_api_key,
                timeout=self.settings.coingecko_timeout_seconds,
            ),
            max_candidates=self.settings.discovery_max_candidates,
        )
        self.mode = SearchMode(mode) if mode else self.settings.search_mode
        self.token_lists = token_lists if token_lists is not None else KNOWN_TOKENS

    def get_supported_chains(self) -> tuple[ChainConfig, ...]:
        """Get the chains this explorer searches, in search order."""
        return self.chains

    def _get_chain(self, chain_id: int) -> Optional[ChainConfig]:
        for chain in self.chains:
            if chain.chain_id == chain_id:
                return chain
        return None

    async def _run_branch(
        self,
        chain: ChainConfig,
        branch: Awaitable[T],
    ) -> Optional[T]:
        """Run one chain's branch under the chain deadline.

        Returns None when the branch fails or times out.
        """
        try:
            return await asyncio.wait_for(branch, timeout=self.settings.chain_timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                f"{chain.name} timed out after {self.settings.chain_timeout_seconds}s"
            )
        except Exception as e:
            logger.warning(f"{chain.name} search failed: {type(e).__name__}: {e}")
        return None

    # ======================
    # Token metadata
    # ======================

    async def get_token_info(self, address: str, chain_id: int) -> Optional[TokenInfo]:
        """Fetch ERC-20 metadata for a contract on one chain.

        Returns:
            TokenInfo, or None for unknown chains and non-token contracts
        """
        chain = self._get_chain(chain_id)
        client = self.clients.get(chain_id)
        if chain is None or client is None:
            return None
        return await fetch_token_info(client, chain, address)

    # ======================
    # Search by address
    # ======================

    async def search_by_address(self, address: str) -> SearchResult:
        """Look up an address on every chain.

        Invalid addresses return a non-matching result without any
        network call.
        """
        if not is_valid_address(address):
            logger.info(f"Not a valid address: {address!r}")
            return SearchResult.empty(address, SearchType.ADDRESS)

        checksum_address = to_checksum_address(address)
        logger.info(
            f"Searching for address {checksum_address} across {len(self.chains)} chains"
        )

        records = await asyncio.gather(
            *(
                self._run_branch(chain, self._lookup_address(chain, checksum_address))
                for chain in self.chains
            )
        )

        results = [record for record in records if record is not None]
        logger.info(f"Address {checksum_address} found on {len(results)} chain(s)")
        return SearchResult.from_records(results, address, SearchType.ADDRESS)

    async def _lookup_address(self, chain: ChainConfig, address: str) -> Optional[AccountRecord]:
        client = self.clients.get(chain.chain_id)
        if client is None:
            return None

        code, balance = await asyncio.gather(
            client.get_code(address),
            client.get_balance(address),
            return_exceptions=True,
        )
        for outcome in (code, balance):
            if isinstance(outcome, BaseException):
                raise outcome

        is_contract = code.lower() not in EMPTY_CODE

        token_info = None
        if is_contract:
            token_info = await fetch_token_info(client, chain, address)

        return AccountRecord(
            address=address,
            chain=chain.name,
            chain_id=chain.chain_id,
            is_contract=is_contract,
            balance=format_units(balance, chain.native_currency.decimals),
            code=code[:CODE_PREVIEW_LENGTH] + "..." if is_contract else None,
            token_info=token_info,
            explorer_url=chain.address_url(address),
        )

    # ======================
    # Search by symbol / name (curated lists)
    # ======================

    async def search_by_token_symbol(self, symbol: str) -> SearchResult:
        """Find curated tokens whose symbol equals the query (case-insensitive)."""
        wanted = symbol.strip().lower()
        return await self._search_curated(
            symbol,
            SearchType.TOKEN_SYMBOL,
            lambda token: token.symbol.lower() == wanted,
        )

    async def search_by_token_name(self, name: str) -> SearchResult:
        """Find curated tokens whose name contains the query (case-insensitive)."""
        wanted = name.strip().lower()
        return await self._search_curated(
            name,
            SearchType.TOKEN_NAME,
            lambda token: wanted in token.name.lower(),
        )

    async def _search_curated(
        self,
        term: str,
        search_type: SearchType,
        matches: Callable[[TokenInfo], bool],
    ) -> SearchResult:
        if not term.strip():
            return SearchResult.empty(term, search_type)

        logger.info(f"Searching for {search_type.value} {term.strip()!r} across all chains")

        batches = await asyncio.gather(
            *(
                self._run_branch(chain, self._match_curated(chain, matches))
                for chain in self.chains
            )
        )

        records = dedupe_records(record for batch in batches if batch for record in batch)
        logger.info(f"{search_type.value} {term.strip()!r}: {len(records)} match(es)")
        return SearchResult.from_records(records, term, search_type)

    async def _match_curated(
        self,
        chain: ChainConfig,
        matches: Callable[[TokenInfo], bool],
    ) -> list[AccountRecord]:
        tokens = await self._get_curated_tokens(chain)
        return [
            AccountRecord(
                address=token.address,
                chain=chain.name,
                chain_id=chain.chain_id,
                is_contract=True,
                balance="0",
                token_info=token,
                explorer_url=chain.address_url(token.address),
            )
            for token in tokens
            if matches(token)
        ]

    async def _get_curated_tokens(self, chain: ChainConfig) -> list[TokenInfo]:
        """Resolve a chain's curated token list to metadata."""
        client = self.clients.get(chain.chain_id)
        addresses = self.token_lists.get(chain.chain_id, ())
        if client is None or not addresses:
            return []

        infos = await asyncio.gather(
            *(fetch_token_info(client, chain, address) for address in addresses)
        )
        return [info for info in infos if info is not None]

    # ======================
    # External discovery
    # ======================

    async def discover_tokens(self, query: str) -> list[AccountRecord]:
        """Find tokens by name or symbol through the external index.

        Never raises; an unreachable or slow index yields an empty list.
        """
        try:
            return await asyncio.wait_for(
                self.discovery.discover(query, self.chains, self._resolve_discovered),
                timeout=self.settings.discovery_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Token discovery for {query!r} timed out after "
                f"{self.settings.discovery_timeout_seconds}s"
            )
        except Exception as e:
            logger.warning(f"Token discovery for {query!r} failed: {type(e).__name__}: {e}")
        return []

    async def _resolve_discovered(self, address: str, chain_id: int) -> Optional[TokenInfo]:
        """Fetch one candidate's metadata under its chain deadline."""
        chain = self._get_chain(chain_id)
        if chain is None:
            return None
        return await self._run_branch(chain, self.get_token_info(address, chain_id))

    # ======================
    # Smart search
    # ======================

    async def smart_search(
        self,
        query: str,
        mode: Optional[Union[SearchMode, str]] = None,
    ) -> SearchResult:
        """Search by address, or by token name/symbol for anything else.

        A syntactically valid address always wins. Other queries use the
        curated lists or the external index, depending on the mode.

        Args:
            query: Address, symbol or name
            mode: Override the explorer's search mode for this call
        """
        trimmed = query.strip()
        kind = classify_query(trimmed)

        if kind is QueryKind.ADDRESS:
            result = await self.search_by_address(trimmed)
            return result.model_copy(update={"search_term": query})

        if kind is QueryKind.EMPTY:
            return SearchResult.empty(query, SearchType.TOKEN_NAME_OR_SYMBOL)

        mode = SearchMode(mode) if mode else self.mode
        logger.info(f"Smart search {trimmed!r} (looks like {kind.value}, {mode.value} mode)")

        if mode is SearchMode.CURATED:
            by_symbol, by_name = await asyncio.gather(
                self.search_by_token_symbol(trimmed),
                self.search_by_token_name(trimmed),
            )
            records = dedupe_records([*by_symbol.results, *by_name.results])
        else:
            records = await self.discover_tokens(trimmed)

        return SearchResult.from_records(records, query, SearchType.TOKEN_NAME_OR_SYMBOL)


@lru_cache
def get_explorer() -> UnifiedExplorer:
    """Get the default explorer for all supported chains."""
    return UnifiedExplorer()
