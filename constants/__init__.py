"""
Constants Package

Seed data and validation whitelists shared across the application.
"""

from .ingredients import DEFAULT_INGREDIENTS
from .validation import (
    VALID_INGREDIENT_TYPES,
    VALID_PAYMENT_METHODS,
    ORDER_STATUSES,
    VALID_ORDER_STATUSES,
    MAX_LENGTHS,
    MIN_LENGTHS,
    MAX_PLATE_INGREDIENTS,
    MAX_DB_ID,
    TOTALS_TOLERANCE,
)

__all__ = [
    'DEFAULT_INGREDIENTS',
    'VALID_INGREDIENT_TYPES',
    'VALID_PAYMENT_METHODS',
    'ORDER_STATUSES',
    'VALID_ORDER_STATUSES',
    'MAX_LENGTHS',
    'MIN_LENGTHS',
    'MAX_PLATE_INGREDIENTS',
    'MAX_DB_ID',
    'TOTALS_TOLERANCE',
]
