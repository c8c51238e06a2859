"""Curated per-chain token allow-lists.

A handful of well-known token contracts per chain, used by the symbol and
name searches. Metadata is always read on-chain; only addresses live here.
"""

KNOWN_TOKENS: dict[int, tuple[str, ...]] = {
    # Ethereum
    1: (
        "0xdAC17F958D2ee523a2206206994597C13D831ec7",  # USDT
        "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",  # USDC
        "0x6B175474E89094C44Da98b954EedeAC495271d0F",  # DAI
        "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",  # WBTC
        "0x514910771AF9Ca656af840dff83E8264EcF986CA",  # LINK
        "0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9",  # AAVE
        "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",  # UNI
    ),
    # BNB Smart Chain
    56: (
        "0x55d398326f99059fF775485246999027B3197955",  # USDT
        "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d",  # USDC
        "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56",  # BUSD
        "0x2170Ed0880ac9A755fd29B2688956BD959F933F8",  # ETH
    ),
    # Polygon
    137: (
        "0xc2132D05D31c914a87C6611C10748AEb04B58e8F",  # USDT
        "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",  # USDC.e
        "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063",  # DAI
        "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619",  # WETH
    ),
    # Arbitrum One
    42161: (
        "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9",  # USDT
        "0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8",  # USDC.e
        "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",  # DAI
    ),
    # Optimism
    10: (
        "0x94b008aA00579c1307B0EF2c499aD98a8ce58e58",  # USDT
        "0x7F5c764cBc14f9669B88837ca1490cCa17c31607",  # USDC.e
        "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",  # DAI
    ),
    # Roburna Testnet
    159: (
        "0x67e67af2c0B5DAccf275F848BaFe509a71e8DAb0",  # ATT
    ),
}


def get_known_tokens(chain_id: int) -> tuple[str, ...]:
    """Get curated token addresses for a chain (empty if none)."""
    return KNOWN_TOKENS.get(chain_id, ())
