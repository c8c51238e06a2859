"""Abstract chain client interface."""

from abc import ABC, abstractmethod
from typing import Optional


class RPCError(Exception):
    """A chain RPC call failed (transport, JSON-RPC error or bad payload)."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is not None:
            return f"[{self.code}] {self.message}"
        return self.message


class ChainClient(ABC):
    """Read-only access to a single EVM chain."""

    @property
    @abstractmethod
    def chain_id(self) -> int:
        """Numeric chain id served by this client."""
        pass

    @abstractmethod
    async def get_code(self, address: str) -> str:
        """
        Get the deployed bytecode at an address.

        Returns:
            Hex string, "0x" when no code is deployed
        """
        pass

    @abstractmethod
    async def get_balance(self, address: str) -> int:
        """Get the native balance of an address in base units (wei)."""
        pass

    @abstractmethod
    async def call(self, to: str, data: str) -> str:
        """
        Execute a read-only contract call (eth_call at latest block).

        Args:
            to: Contract address
            data: Hex-encoded calldata (selector + arguments)

        Returns:
            Hex-encoded return data
        """
        pass
