"""
Entities module - Value types built on the fraction engine.

- CurrencyAmount: exact amounts bound to a currency, capped at MAX_UINT256
- Percentage: fractions of one, displayed x100
- Price: exchange rates between a base and a quote currency

All entities are re-exported here for convenience.
"""

from .amount import CurrencyAmount
from .percentage import Percentage
from .price import Price

__all__ = [
    "CurrencyAmount",
    "Percentage",
    "Price",
]
