"""Registry of supported EVM chains.

Nine EVM-compatible networks, searched in the order listed here:
- Ethereum, BNB Smart Chain, Polygon
- Arbitrum One, Optimism, Base (L2s)
- Avalanche C-Chain, Fantom
- Roburna Testnet
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NativeCurrency:
    """Base-unit asset of a chain."""

    name: str
    symbol: str
    decimals: int = 18


@dataclass(frozen=True)
class ChainConfig:
    """Configuration for an EVM chain."""

    chain_id: int
    name: str
    rpc_url: str
    explorer_url: str
    native_currency: NativeCurrency

    def address_url(self, address: str) -> str:
        """Explorer page for an address or contract."""
        return f"{self.explorer_url.rstrip('/')}/address/{address}"


# ======================
# Chain Configurations
# ======================

SUPPORTED_CHAINS: tuple[ChainConfig, ...] = (
    ChainConfig(
        chain_id=1,
        name="Ethereum",
        rpc_url="https://eth.llamarpc.com",
        explorer_url="https://etherscan.io",
        native_currency=NativeCurrency(name="Ether", symbol="ETH"),
    ),
    ChainConfig(
        chain_id=56,
        name="BNB Smart Chain",
        rpc_url="https://bsc-dataseed.binance.org",
        explorer_url="https://bscscan.com",
        native_currency=NativeCurrency(name="BNB", symbol="BNB"),
    ),
    ChainConfig(
        chain_id=137,
        name="Polygon",
        rpc_url="https://polygon-rpc.com",
        explorer_url="https://polygonscan.com",
        native_currency=NativeCurrency(name="MATIC", symbol="MATIC"),
    ),
    ChainConfig(
        chain_id=42161,
        name="Arbitrum One",
        rpc_url="https://arb1.arbitrum.io/rpc",
        explorer_url="https://arbiscan.io",
        native_currency=NativeCurrency(name="Ether", symbol="ETH"),
    ),
    ChainConfig(
        chain_id=10,
        name="Optimism",
        rpc_url="https://mainnet.optimism.io",
        explorer_url="https://optimistic.etherscan.io",
        native_currency=NativeCurrency(name="Ether", symbol="ETH"),
    ),
    ChainConfig(
        chain_id=43114,
        name="Avalanche C-Chain",
        rpc_url="https://api.avax.network/ext/bc/C/rpc",
        explorer_url="https://snowtrace.io",
        native_currency=NativeCurrency(name="Avalanche", symbol="AVAX"),
    ),
    ChainConfig(
        chain_id=250,
        name="Fantom",
        rpc_url="https://rpc.ftm.tools",
        explorer_url="https://ftmscan.com",
        native_currency=NativeCurrency(name="Fantom", symbol="FTM"),
    ),
    ChainConfig(
        chain_id=8453,
        name="Base",
        rpc_url="https://mainnet.base.org",
        explorer_url="https://basescan.org",
        native_currency=NativeCurrency(name="Ether", symbol="ETH"),
    ),
    ChainConfig(
        chain_id=159,
        name="Roburna Testnet",
        rpc_url="https://preseed-testnet-1.roburna.com/",
        explorer_url="https://testnet.rbascan.com",
        native_currency=NativeCurrency(name="Roburna", symbol="RBA"),
    ),
)


def get_chain_by_id(chain_id: int) -> Optional[ChainConfig]:
    """Get chain configuration by numeric chain id."""
    for chain in SUPPORTED_CHAINS:
        if chain.chain_id == chain_id:
            return chain
    return None


def get_chain_by_name(name: str) -> Optional[ChainConfig]:
    """Get chain configuration by display name (case-insensitive)."""
    wanted = name.strip().lower()
    for chain in SUPPORTED_CHAINS:
        if chain.name.lower() == wanted:
            return chain
    return None
