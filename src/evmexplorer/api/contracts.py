"""Chain information contracts."""

from typing import Optional

from pydantic import BaseModel, Field

from evmexplorer.chains import ChainConfig


class NativeCurrencyInfo(BaseModel):
    """Native currency of a chain."""

    name: str = Field(..., description="Currency name")
    symbol: str = Field(..., description="Currency symbol (ETH, BNB, etc.)")
    decimals: int = Field(..., description="Currency decimals")


class ChainInfo(BaseModel):
    """Information about a supported blockchain."""

    chain_id: int = Field(..., description="EVM chain ID (1 for Ethereum, etc.)")
    name: str = Field(..., description="Chain display name")
    rpc_url: Optional[str] = Field(None, description="Public RPC URL")
    explorer_url: Optional[str] = Field(None, description="Block explorer URL")
    native_currency: NativeCurrencyInfo

    @classmethod
    def from_config(cls, chain: ChainConfig) -> "ChainInfo":
        return cls(
            chain_id=chain.chain_id,
            name=chain.name,
            rpc_url=chain.rpc_url,
            explorer_url=chain.explorer_url,
            native_currency=NativeCurrencyInfo(
                name=chain.native_currency.name,
                symbol=chain.native_currency.symbol,
                decimals=chain.native_currency.decimals,
            ),
        )


class ChainListResponse(BaseModel):
    """Response containing list of supported chains."""

    success: bool = True
    chains: list[ChainInfo] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of chains")
