"""
TripStats Billing Helpers
Coercion of the billed-amount field into a float

Trip data arrives with billedAmount as a number, as a string with thousands
separators ("1,234.50"), or missing. Anything that cannot be read as a number
contributes 0 to every sum it would otherwise affect.
"""

from typing import Any, Iterable
import math
import re

from tripstats.schemas.trips import TripRecord

# Plain decimal text once the thousands separators are gone
AMOUNT_PATTERN = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def normalize_billed_amount(value: Any) -> float:
    """
    Convert a raw billed amount to a float
    
    Args:
        value: billedAmount as received (number, string, None, anything)
        
    Returns:
        The numeric amount, or 0.0 when the value is not usable
    """
    # bool is an int subclass but is not an amount
    if isinstance(value, bool):
        return 0.0
    
    if isinstance(value, (int, float)):
        return value
    
    if isinstance(value, str):
        text = value.replace(",", "")
        if not AMOUNT_PATTERN.fullmatch(text):
            return 0.0
        amount = float(text)
        return amount if math.isfinite(amount) else 0.0
    
    return 0.0


def sum_billed(trips: Iterable[TripRecord]) -> float:
    """Sum of the normalized billed amounts of the given trips (unrounded)"""
    return sum(normalize_billed_amount(trip.billed_amount) for trip in trips)
