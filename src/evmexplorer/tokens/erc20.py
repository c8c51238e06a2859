"""ERC-20 token metadata over eth_call.

Reads name(), symbol(), decimals() and totalSupply() concurrently. A token
descriptor is returned only when all four calls succeed and decode.
"""

import asyncio
import logging
from typing import Optional

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex, function_signature_to_4byte_selector

from evmexplorer.chains import ChainConfig
from evmexplorer.models import TokenInfo
from evmexplorer.rpc.base import ChainClient

logger = logging.getLogger(__name__)


def _selector(signature: str) -> str:
    return "0x" + function_signature_to_4byte_selector(signature).hex()


NAME_SELECTOR = _selector("name()")  # 0x06fdde03
SYMBOL_SELECTOR = _selector("symbol()")  # 0x95d89b41
DECIMALS_SELECTOR = _selector("decimals()")  # 0x313ce567
TOTAL_SUPPLY_SELECTOR = _selector("totalSupply()")  # 0x18160ddd

MAX_DECIMALS = 255  # uint8


def decode_string_result(result: str) -> str:
    """Decode a string return value.

    Legacy tokens (MKR, SAI) return bytes32 instead of string; a bare
    32-byte answer is read as right-padded UTF-8.
    """
    raw = decode_hex(result)
    try:
        (value,) = decode(["string"], raw)
        return value
    except DecodingError:
        if len(raw) != 32:
            raise
        return raw.rstrip(b"\x00").decode("utf-8")


def decode_uint_result(result: str) -> int:
    """Decode a uint return value (uint8 and uint256 share the encoding)."""
    (value,) = decode(["uint256"], decode_hex(result))
    return value


async def fetch_token_info(
    client: ChainClient,
    chain: ChainConfig,
    address: str,
) -> Optional[TokenInfo]:
    """Fetch ERC-20 metadata for a contract.

    Args:
        client: Client for the chain the contract lives on
        chain: Chain configuration (for display name)
        address: Contract address (not validated here)

    Returns:
        TokenInfo, or None if the address is not a conforming token
    """
    results = await asyncio.gather(
        client.call(address, NAME_SELECTOR),
        client.call(address, SYMBOL_SELECTOR),
        client.call(address, DECIMALS_SELECTOR),
        client.call(address, TOTAL_SUPPLY_SELECTOR),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        logger.debug(
            f"Token metadata unavailable for {address} on {chain.name}: "
            f"{type(failures[0]).__name__}: {failures[0]}"
        )
        return None

    name_raw, symbol_raw, decimals_raw, supply_raw = results

    try:
        decimals = decode_uint_result(decimals_raw)
        if decimals > MAX_DECIMALS:
            raise ValueError(f"decimals out of range: {decimals}")

        return TokenInfo(
            address=address,
            name=decode_string_result(name_raw),
            symbol=decode_string_result(symbol_raw),
            decimals=decimals,
            total_supply=str(decode_uint_result(supply_raw)),
            chain=chain.name,
            chain_id=chain.chain_id,
        )
    except (DecodingError, ValueError) as e:
        logger.debug(f"Token metadata for {address} on {chain.name} did not decode: {e}")
        return None
