"""Exact rendering of integer base-unit quantities."""


def format_units(value: int, decimals: int = 18) -> str:
    """Render a base-unit integer as a decimal string.

    Always keeps at least one fractional digit and strips the rest of the
    trailing zeros: 10**18 with 18 decimals is "1.0", 15 * 10**17 is "1.5".

    Args:
        value: Quantity in base units (wei for native balances)
        decimals: Number of decimal places of the unit

    Returns:
        Human-readable decimal string
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)

    fraction_str = str(fraction).zfill(decimals).rstrip("0") if decimals else ""
    return f"{sign}{whole}.{fraction_str or '0'}"
