"""
Nutrition Service

Pure functions for summing the nutrition and cost of a plate. The same
arithmetic runs in the browser for the live preview, so results must be
deterministic and free of side effects.
"""

from constants import TOTALS_TOLERANCE


def _value(item, key):
    """Read a field from an Ingredient model or a plain mapping."""
    if isinstance(item, dict):
        return item.get(key) or 0
    return getattr(item, key, 0) or 0


def aggregate_nutrition(ingredients):
    """
    Sum calories, protein and price across the selected ingredients.

    Duplicates count once per occurrence. An empty selection yields all zeros.

    Args:
        ingredients: Iterable of Ingredient objects or dicts

    Returns:
        dict with 'calories' (int), 'protein' (float) and 'price' (float)
    """
    calories = 0
    protein = 0.0
    price = 0.0
    for item in ingredients:
        calories += int(_value(item, 'calories'))
        protein += float(_value(item, 'protein'))
        price += float(_value(item, 'price'))

    # Round away binary float noise (0.7 + 0.4 == 1.0999999999999999)
    return {
        'calories': calories,
        'protein': round(protein, 2),
        'price': round(price, 2),
    }


def nutrition_progress(totals, calorie_goal=800, protein_goal=50):
    """
    Percentage of the per-meal goals reached by a plate, capped at 100.

    Args:
        totals: Result of aggregate_nutrition()
        calorie_goal: Target calories for one meal
        protein_goal: Target protein (grams) for one meal

    Returns:
        dict with 'calories' and 'protein' percentages
    """
    def _percent(value, goal):
        if not goal or goal <= 0:
            return 0.0
        return round(min(value / goal * 100, 100.0), 1)

    return {
        'calories': _percent(totals.get('calories', 0), calorie_goal),
        'protein': _percent(totals.get('protein', 0), protein_goal),
    }


def totals_match(expected, actual, tolerance=TOTALS_TOLERANCE):
    """Check that two totals dicts agree within tolerance on every field."""
    for key in ('calories', 'protein', 'price'):
        if abs(float(expected.get(key, 0)) - float(actual.get(key, 0))) > tolerance:
            return False
    return True
