"""Multi-chain search engine and query classification."""

from evmexplorer.search.classifier import QueryKind, classify_query, is_valid_address
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

__all__ = [
    "QueryKind",
    "UnifiedExplorer",
    "classify_query",
    "get_explorer",
    "is_valid_address",
]
