"""Search result models.

All models are immutable. Quantities that can exceed 2**53 (native balances,
total supplies) are carried as decimal strings.
"""

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchType(str, Enum):
    """Strategy that produced a search result."""

    ADDRESS = "address"
    TOKEN_NAME = "token-name"
    TOKEN_SYMBOL = "token-symbol"
    TOKEN_NAME_OR_SYMBOL = "token-name-or-symbol"


class TokenInfo(BaseModel):
    """ERC-20 metadata of a token contract on one chain."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Token contract address")
    name: str = Field(..., description="Token name")
    symbol: str = Field(..., description="Token symbol")
    decimals: int = Field(..., ge=0, le=255, description="Token decimals")
    total_supply: str = Field(..., description="Total supply in base units (decimal string)")
    chain: str = Field(..., description="Chain display name")
    chain_id: int = Field(..., description="EVM chain ID")


class AccountRecord(BaseModel):
    """One chain's answer for one address."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Account or contract address")
    chain: str = Field(..., description="Chain display name")
    chain_id: int = Field(..., description="EVM chain ID")
    is_contract: bool = Field(..., description="Whether bytecode is deployed at the address")
    balance: str = Field(..., description="Native balance in human-readable units")
    code: Optional[str] = Field(None, description="Bytecode preview for contracts")
    token_info: Optional[TokenInfo] = Field(None, description="ERC-20 metadata if a token")
    explorer_url: Optional[str] = Field(None, description="Block explorer link")

    @model_validator(mode="after")
    def _accounts_carry_no_token(self) -> "AccountRecord":
        if not self.is_contract and self.token_info is not None:
            raise ValueError("token_info is only allowed on contract records")
        return self

    @property
    def dedup_key(self) -> tuple[int, str]:
        return (self.chain_id, self.address.lower())


class SearchResult(BaseModel):
    """Outcome of a search across all chains."""

    model_config = ConfigDict(frozen=True)

    found: bool = Field(..., description="Whether any record matched")
    results: list[AccountRecord] = Field(default_factory=list)
    search_term: str = Field(..., description="Query as given by the caller")
    search_type: SearchType = Field(..., description="Strategy used")

    @classmethod
    def empty(cls, search_term: str, search_type: SearchType) -> "SearchResult":
        """Non-matching result."""
        return cls(found=False, results=[], search_term=search_term, search_type=search_type)

    @classmethod
    def from_records(
        cls,
        records: list[AccountRecord],
        search_term: str,
        search_type: SearchType,
    ) -> "SearchResult":
        return cls(
            found=len(records) > 0,
            results=records,
            search_term=search_term,
            search_type=search_type,
        )


def dedupe_records(records: Iterable[AccountRecord]) -> list[AccountRecord]:
    """Keep the first record for each (chain_id, lower-cased address)."""
    seen: set[tuple[int, str]] = set()
    unique = []
    for record in records:
        if record.dedup_key in seen:
            continue
        seen.add(record.dedup_key)
        unique.append(record)
    return unique
