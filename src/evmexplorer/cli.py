"""Command-line search across all supported EVM chains.

Usage:
    evm-explorer USDT
    evm-explorer Tether USD
    evm-explorer 0xdAC17F958D2ee523a2206206994597C13D831ec7
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from evmexplorer.chains import SUPPORTED_CHAINS, get_chain_by_id
from evmexplorer.config import SearchMode, get_settings
from evmexplorer.models import AccountRecord, SearchResult
from evmexplorer.search.engine import UnifiedExplorer

logger = logging.getLogger(__name__)

RULE = "=" * 80


def usage_text() -> str:
    """Help shown when no query is given."""
    chains = "\n".join(f"  • {chain.name}" for chain in SUPPORTED_CHAINS)
    return (
        "\n🔍 Unified EVM Explorer - Search across all EVM chains\n\n"
        "Usage:\n"
        "  evm-explorer <query>\n\n"
        "Examples:\n"
        "  evm-explorer USDT                                        # Search by token symbol\n"
        '  evm-explorer "Tether"                                    # Search by token name\n'
        "  evm-explorer 0xdAC17F958D2ee523a2206206994597C13D831ec7  # Search by address\n\n"
        f"Supported Chains:\n{chains}\n"
    )


def format_record(index: int, record: AccountRecord) -> str:
    """Format one result block."""
    chain = get_chain_by_id(record.chain_id)
    native_symbol = chain.native_currency.symbol if chain else "native"

    lines = [
        f"\n📍 Result #{index}",
        f"   Chain: {record.chain} (Chain ID: {record.chain_id})",
        f"   Address: {record.address}",
        f"   Is Contract: {'Yes' if record.is_contract else 'No'}",
        f"   Balance: {record.balance} {native_symbol}",
    ]
    if record.explorer_url:
        lines.append(f"   Explorer: {record.explorer_url}")

    if record.token_info:
        token = record.token_info
        lines.extend([
            "\n   📊 Token Information:",
            f"      Name: {token.name}",
            f"      Symbol: {token.symbol}",
            f"      Decimals: {token.decimals}",
            f"      Total Supply: {token.total_supply}",
        ])

    lines.append("   " + "-" * 76)
    return "\n".join(lines)


def format_result(result: SearchResult) -> str:
    """Format a full search report."""
    if not result.found or not result.results:
        return f"\n{RULE}\n❌ No results found"

    blocks = [
        f"\n{RULE}",
        f'✅ Found {len(result.results)} result(s) for "{result.search_term}"',
        f"Search Type: {result.search_type.value}",
    ]
    blocks.extend(format_record(i, record) for i, record in enumerate(result.results, start=1))
    blocks.append(f"\n{RULE}\n")
    return "\n".join(blocks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evm-explorer",
        description="Search an address, token symbol or token name across EVM chains",
    )
    parser.add_argument("query", nargs="*", help="Address, symbol or name (words are joined)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SearchMode],
        help="Name/symbol search policy (default: SEARCH_MODE setting)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def run(query: str, mode: Optional[str], as_json: bool) -> int:
    explorer = UnifiedExplorer(mode=mode)

    if not as_json:
        print(f'\n🚀 Starting search for: "{query}"\n')
        print("⏳ Searching across all EVM chains...")

    try:
        result = await explorer.smart_search(query)
    except Exception as e:
        logger.debug("Search failed", exc_info=True)
        print(f"❌ Error during search: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_result(result))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    settings = get_settings()

    log_level = logging.DEBUG if args.verbose else settings.effective_log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not args.verbose and not settings.debug:
        # Request lines from httpx drown out the report
        logging.getLogger("httpx").setLevel(logging.WARNING)

    if not args.query:
        print(usage_text())
        return 0

    query = " ".join(args.query)
    return asyncio.run(run(query, args.mode, args.json))


if __name__ == "__main__":
    sys.exit(main())
