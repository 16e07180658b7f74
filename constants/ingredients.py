"""
Ingredient Constants

Contains the built-in ingredient catalog used to seed an empty database.
"""

# Seed order defines the ingredient ids (1..6) on a fresh database
DEFAULT_INGREDIENTS = [
    {'name': 'Chicken Breast', 'type': 'protein', 'calories': 165, 'protein': 31.0, 'price': 0.7,
     'icon': 'fas fa-drumstick-bite', 'color': 'red'},
    {'name': 'Light Tuna', 'type': 'protein', 'calories': 120, 'protein': 25.0, 'price': 0.6,
     'icon': 'fas fa-fish', 'color': 'blue'},
    {'name': 'Brown Rice', 'type': 'carbohydrate', 'calories': 215, 'protein': 5.0, 'price': 0.4,
     'icon': 'fas fa-seedling', 'color': 'amber'},
    {'name': 'Boiled Potato', 'type': 'carbohydrate', 'calories': 130, 'protein': 3.0, 'price': 0.3,
     'icon': 'fas fa-cookie-bite', 'color': 'orange'},
    {'name': 'Green Salad', 'type': 'vegetable', 'calories': 25, 'protein': 1.0, 'price': 0.2,
     'icon': 'fas fa-leaf', 'color': 'green'},
    {'name': 'Diet Sauce', 'type': 'sauce', 'calories': 40, 'protein': 0.0, 'price': 0.2,
     'icon': 'fas fa-tint', 'color': 'purple'},
]
