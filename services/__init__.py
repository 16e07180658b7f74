"""
Services Package

Business logic modules for the plate ordering application.
"""

from .errors import ValidationError, NotFoundError

from .nutrition import (
    aggregate_nutrition,
    nutrition_progress,
    totals_match,
)

from .catalog import (
    seed_ingredients,
    list_ingredients,
    list_ingredients_by_type,
    get_ingredients_by_ids,
)

from .plates import (
    create_plate,
    get_plate,
    list_user_plates,
    list_favorite_plates,
)

from .orders import (
    next_status,
    create_order,
    get_order,
    list_orders,
    count_orders_by_status,
    update_order_status,
)

from .users import (
    create_user,
    seed_default_user,
    get_user,
    get_user_by_username,
)

__all__ = [
    # Errors
    'ValidationError',
    'NotFoundError',
    # Nutrition
    'aggregate_nutrition',
    'nutrition_progress',
    'totals_match',
    # Catalog
    'seed_ingredients',
    'list_ingredients',
    'list_ingredients_by_type',
    'get_ingredients_by_ids',
    # Plates
    'create_plate',
    'get_plate',
    'list_user_plates',
    'list_favorite_plates',
    # Orders
    'next_status',
    'create_order',
    'get_order',
    'list_orders',
    'count_orders_by_status',
    'update_order_status',
    # Users
    'create_user',
    'seed_default_user',
    'get_user',
    'get_user_by_username',
]
