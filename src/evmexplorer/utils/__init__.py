"""Utility modules for EVM Explorer."""

from evmexplorer.utils.units import format_units

__all__ = ["format_units"]
