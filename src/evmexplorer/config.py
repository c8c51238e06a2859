"""Application configuration using pydantic-settings.

RPC endpoints default to the chain registry; any of them can be overridden
through the environment (ETH_RPC_URL, BSC_RPC_URL, ...) or a .env file.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchMode(str, Enum):
    """Fallback policy for free-text smart searches."""

    EXTERNAL = "external"  # CoinGecko index, then on-chain metadata
    CURATED = "curated"  # per-chain allow-lists only


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ======================
    # API
    # ======================
    api_host: str = Field(default="127.0.0.1", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Search
    # ======================
    search_mode: SearchMode = Field(
        default=SearchMode.EXTERNAL,
        description="Smart search fallback: external (CoinGecko) or curated lists",
    )
    rpc_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Deadline for a single RPC call"
    )
    chain_timeout_seconds: float = Field(
        default=20.0, gt=0, description="Deadline for one chain's search branch"
    )

    # ======================
    # Chain RPC Endpoints (empty = registry default)
    # ======================
    eth_rpc_url: str = Field(default="", description="Ethereum RPC URL")
    bsc_rpc_url: str = Field(default="", description="BNB Smart Chain RPC URL")
    polygon_rpc_url: str = Field(default="", description="Polygon RPC URL")
    arbitrum_rpc_url: str = Field(default="", description="Arbitrum One RPC URL")
    optimism_rpc_url: str = Field(default="", description="Optimism RPC URL")
    avalanche_rpc_url: str = Field(default="", description="Avalanche C-Chain RPC URL")
    fantom_rpc_url: str = Field(default="", description="Fantom RPC URL")
    base_rpc_url: str = Field(default="", description="Base RPC URL")
    roburna_rpc_url: str = Field(default="", description="Roburna Testnet RPC URL")

    # ======================
    # CoinGecko
    # ======================
    coingecko_api_url: str = Field(
        default="https://api.coingecko.com/api/v3", description="CoinGecko API base URL"
    )
    coingecko_api_key: Optional[str] = Field(
        default=None, description="CoinGecko demo API key"
    )
    coingecko_timeout_seconds: float = Field(
        default=15.0, gt=0, description="Deadline for a single CoinGecko request"
    )
    discovery_max_candidates: int = Field(
        default=8, ge=1, description="Maximum coins resolved per external search"
    )
    discovery_timeout_seconds: float = Field(
        default=45.0, gt=0, description="Deadline for the whole discovery path"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    def get_rpc_url(self, chain_id: int) -> str:
        """Get the RPC override for a chain id ("" when not overridden)."""
        rpc_map = {
            1: self.eth_rpc_url,
            56: self.bsc_rpc_url,
            137: self.polygon_rpc_url,
            42161: self.arbitrum_rpc_url,
            10: self.optimism_rpc_url,
            43114: self.avalanche_rpc_url,
            250: self.fantom_rpc_url,
            8453: self.base_rpc_url,
            159: self.roburna_rpc_url,
        }
        return rpc_map.get(chain_id, "")

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "search_mode": self.search_mode.value,
            "timeouts": {
                "rpc": self.rpc_timeout_seconds,
                "chain": self.chain_timeout_seconds,
                "coingecko": self.coingecko_timeout_seconds,
                "discovery": self.discovery_timeout_seconds,
            },
            "coingecko": {
                "url": self.coingecko_api_url,
                "api_key": "***" if self.coingecko_api_key else "(not set)",
                "max_candidates": self.discovery_max_candidates,
            },
            "rpc_overrides": {
                str(chain_id): url
                for chain_id in (1, 56, 137, 42161, 10, 43114, 250, 8453, 159)
                if (url := self.get_rpc_url(chain_id))
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
