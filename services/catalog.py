"""
Ingredient Catalog Service

Read access to the ingredient catalog plus the one-time seeding step.
"""

import logging

from constants import DEFAULT_INGREDIENTS, VALID_INGREDIENT_TYPES
from models import db, commit_session, Ingredient
from .errors import ValidationError

logger = logging.getLogger(__name__)


def seed_ingredients(items=None):
    """
    Insert the catalog (the built-in one by default) if the ingredient table is empty.

    Safe to call repeatedly: a populated table is left untouched.

    Returns:
        Number of ingredients inserted (0 when already seeded)

    Raises:
        ValueError: If a seed row carries an unknown ingredient type
    """
    if Ingredient.query.first() is not None:
        return 0

    if items is None:
        items = DEFAULT_INGREDIENTS

    unknown = {item["type"] for item in items} - VALID_INGREDIENT_TYPES
    if unknown:
        raise ValueError(f"Unknown ingredient type(s) in seed data: {', '.join(sorted(unknown))}")

    db.session.add_all(Ingredient(**item) for item in items)
    commit_session()
    logger.info("Seeded ingredient catalog with %d ingredients", len(items))
    return len(items)


def list_ingredients():
    """All catalog ingredients in id order."""
    return Ingredient.query.order_by(Ingredient.id).all()


def list_ingredients_by_type(ingredient_type):
    """Ingredients whose type exactly matches ingredient_type."""
    return Ingredient.query.filter_by(type=ingredient_type).order_by(Ingredient.id).all()


def get_ingredients_by_ids(ingredient_ids):
    """
    Resolve ingredient ids to Ingredient rows.

    Request order and duplicates are preserved, so a plate holding two
    portions of rice resolves to two rice rows.

    Raises:
        ValidationError: If any id is not in the catalog
    """
    unique_ids = set(ingredient_ids)
    found = {ing.id: ing for ing in Ingredient.query.filter(Ingredient.id.in_(unique_ids)).all()}

    missing = sorted(unique_ids - found.keys())
    if missing:
        raise ValidationError(f"Unknown ingredient id(s): {', '.join(str(i) for i in missing)}")

    return [found[i] for i in ingredient_ids]
