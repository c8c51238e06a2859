"""ERC-20 metadata fetching and curated token lists."""

from evmexplorer.tokens.curated import KNOWN_TOKENS, get_known_tokens
from evmexplorer.tokens.erc20 import fetch_token_info

__all__ = ["KNOWN_TOKENS", "fetch_token_info", "get_known_tokens"]
