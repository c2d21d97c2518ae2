"""
Integer money helpers. All amounts are minor currency units (paise, cents).
"""
from decimal import Decimal
from typing import List, Optional
from splittrip.core.config import settings

# Largest amount a signed 64-bit BIGINT column can hold
MAX_AMOUNT = 2 ** 63 - 1


def split_equally(amount: int, parts: int) -> List[int]:
    """
    Split amount into parts shares that sum exactly to amount.
    The first (amount % parts) shares carry one extra minor unit.
    """
    if parts <= 0:
        raise ValueError("parts must be positive")
    share, remainder = divmod(amount, parts)
    return [share + 1 if i < remainder else share for i in range(parts)]


def to_major_units(amount: int, decimals: Optional[int] = None) -> Decimal:
    """Convert minor units to a Decimal in major units (12345 -> 123.45)."""
    if decimals is None:
        decimals = settings.CURRENCY_DECIMALS
    return Decimal(amount).scaleb(-decimals)


def format_amount(amount: int, signed: bool = False) -> str:
    """Format minor units for display, e.g. 12345 -> '₹123.45'."""
    decimals = settings.CURRENCY_DECIMALS
    value = to_major_units(abs(amount), decimals)
    text = f"{settings.CURRENCY_SYMBOL}{value:,.{decimals}f}"
    if amount < 0:
        return f"-{text}"
    if signed and amount > 0:
        return f"+{text}"
    return text
