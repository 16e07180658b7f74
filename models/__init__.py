"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, commit_session

from .user import User
from .ingredient import Ingredient
from .plate import Plate
from .order import Order

__all__ = [
    'db',
    'commit_session',
    'User',
    'Ingredient',
    'Plate',
    'Order',
]
