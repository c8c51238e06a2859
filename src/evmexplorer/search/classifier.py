"""Query classification for smart search."""

from enum import Enum

from eth_utils import is_checksum_address, is_hex_address, remove_0x_prefix

MAX_SYMBOL_LENGTH = 6


class QueryKind(str, Enum):
    """What a raw query looks like."""

    ADDRESS = "address"
    EMPTY = "empty"
    SYMBOL = "symbol"  # short and upper-case, e.g. "USDT"
    TEXT = "text"


def is_valid_address(value: str) -> bool:
    """Check hex format and, for mixed-case input, the EIP-55 checksum."""
    try:
        if not is_hex_address(value):
            return False
    except (TypeError, ValueError):
        return False

    digits = remove_0x_prefix(value)
    if digits == digits.lower() or digits == digits.upper():
        return True
    return is_checksum_address(value)


def classify_query(query: str) -> QueryKind:
    """Classify a query.

    The SYMBOL/TEXT split is a display hint only; smart search runs the
    same strategies for both.
    """
    trimmed = query.strip()
    if not trimmed:
        return QueryKind.EMPTY
    if is_valid_address(trimmed):
        return QueryKind.ADDRESS
    if (
        len(trimmed) <= MAX_SYMBOL_LENGTH
        and any(ch.isalpha() for ch in trimmed)
        and trimmed == trimmed.upper()
    ):
        return QueryKind.SYMBOL
    return QueryKind.TEXT
