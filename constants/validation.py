"""
Validation Constants

Contains whitelist values for validating request bodies and ensuring
data integrity before anything reaches the database.
"""

# Valid ingredient categories (whitelist)
VALID_INGREDIENT_TYPES = {'protein', 'carbohydrate', 'vegetable', 'sauce'}

# Valid payment methods for checkout
VALID_PAYMENT_METHODS = {'cash', 'online'}

# Order lifecycle, in the only order it may be advanced
ORDER_STATUSES = ('pending', 'confirmed', 'preparing', 'delivered')
VALID_ORDER_STATUSES = set(ORDER_STATUSES)

# Maximum field lengths
MAX_LENGTHS = {
    'plate_name': 200,
    'customer_name': 100,
    'customer_phone': 30,
    'delivery_address': 500,
    'notes': 1000,
    'username': 50,
}

# Minimum field lengths (mirrors the checkout form)
MIN_LENGTHS = {
    'customer_name': 2,
    'customer_phone': 10,
    'delivery_address': 5,
}

# Upper bound on ingredients a single plate may hold
MAX_PLATE_INGREDIENTS = 50

# Largest id a 64-bit INTEGER primary key can hold
MAX_DB_ID = 2 ** 63 - 1

# Tolerance when comparing client-computed totals with the server snapshot
TOTALS_TOLERANCE = 0.01
