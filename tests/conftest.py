"""Pytest configuration and fixtures."""

import asyncio
import os
from typing import Optional

import pytest
from eth_abi import encode

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "false"
os.environ["SEARCH_MODE"] = "external"

from evmexplorer.chains import get_chain_by_id
from evmexplorer.config import Settings, get_settings
from evmexplorer.rpc.base import ChainClient, RPCError
from evmexplorer.tokens.erc20 import (
    DECIMALS_SELECTOR,
    NAME_SELECTOR,
    SYMBOL_SELECTOR,
    TOTAL_SUPPLY_SELECTOR,
)

USDT_ETH = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
USDC_ETH = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI_ETH = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDT_BSC = "0x55d398326f99059fF775485246999027B3197955"
USDT_POLYGON = "0xc2132D05D31c914a87C6611C10748AEb04B58e8F"
WALLET = "0x" + "ab" * 20

TETHER = {"name": "Tether USD", "symbol": "USDT", "decimals": 6, "total_supply": 1000000000}
USD_COIN = {"name": "USD Coin", "symbol": "USDC", "decimals": 6, "total_supply": 25000000000000}
DAI = {"name": "Dai Stablecoin", "symbol": "DAI", "decimals": 18, "total_supply": 5 * 10**27}

TOKEN_CODE = "0x6080604052" + "00" * 200


def encode_result(abi_type: str, value) -> str:
    """ABI-encode a single return value as eth_call hex."""
    return "0x" + encode([abi_type], [value]).hex()


class FakeChainClient(ChainClient):
    """In-memory chain that records every call it receives."""

    def __init__(
        self,
        chain_id: int,
        codes: Optional[dict[str, str]] = None,
        balances: Optional[dict[str, int]] = None,
        tokens: Optional[dict[str, dict]] = None,
        fail: bool = False,
        delay: float = 0.0,
    ):
        self._chain_id = chain_id
        self.codes = {k.lower(): v for k, v in (codes or {}).items()}
        self.balances = {k.lower(): v for k, v in (balances or {}).items()}
        self.tokens = {k.lower(): v for k, v in (tokens or {}).items()}
        self.fail = fail
        self.delay = delay
        self.calls: list[tuple] = []

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def _enter(self, *call) -> None:
        self.calls.append(call)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RPCError("connection refused")

    async def get_code(self, address: str) -> str:
        await self._enter("eth_getCode", address)
        return self.codes.get(address.lower(), "0x")

    async def get_balance(self, address: str) -> int:
        await self._enter("eth_getBalance", address)
        return self.balances.get(address.lower(), 0)

    async def call(self, to: str, data: str) -> str:
        await self._enter("eth_call", to, data)
        token = self.tokens.get(to.lower())
        if token is None:
            return "0x"
        if data == NAME_SELECTOR:
            return encode_result("string", token["name"])
        if data == SYMBOL_SELECTOR:
            return encode_result("string", token["symbol"])
        if data == DECIMALS_SELECTOR:
            return encode_result("uint8", token["decimals"])
        if data == TOTAL_SUPPLY_SELECTOR:
            return encode_result("uint256", token["total_supply"])
        raise RPCError("execution reverted", code=3)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the test environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, chain_timeout_seconds=0.5, discovery_timeout_seconds=2.0)


@pytest.fixture
def test_chains():
    """Ethereum, BNB Smart Chain and Polygon, in registry order."""
    return [get_chain_by_id(1), get_chain_by_id(56), get_chain_by_id(137)]


@pytest.fixture
def token_lists():
    return {
        1: (USDT_ETH, USDC_ETH, DAI_ETH),
        56: (USDT_BSC,),
        137: (USDT_POLYGON,),
    }


@pytest.fixture
def fake_clients() -> dict[int, FakeChainClient]:
    """Chains where the USDT contracts exist and WALLET holds native coin."""
    return {
        1: FakeChainClient(
            1,
            codes={USDT_ETH: TOKEN_CODE, USDC_ETH: TOKEN_CODE, DAI_ETH: TOKEN_CODE},
            balances={USDT_ETH: 10**18, WALLET: 2 * 10**18},
            tokens={USDT_ETH: TETHER, USDC_ETH: USD_COIN, DAI_ETH: DAI},
        ),
        56: FakeChainClient(
            56,
            codes={USDT_BSC: TOKEN_CODE},
            balances={WALLET: 15 * 10**17},
            tokens={USDT_BSC: {**TETHER, "decimals": 18}},
        ),
        137: FakeChainClient(
            137,
            codes={USDT_POLYGON: TOKEN_CODE},
            tokens={USDT_POLYGON: {**TETHER, "name": "(PoS) Tether USD"}},
        ),
    }
