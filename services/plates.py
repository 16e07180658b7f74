"""
Plate Service

Creation and lookup of saved plates. Plates are write-once: totals are
snapshotted from the catalog at creation and never recomputed.
"""

import logging

from models import db, commit_session, Plate, User
from utils.sanitizer import sanitize_plate_name
from .catalog import get_ingredients_by_ids
from .errors import ValidationError
from .nutrition import aggregate_nutrition, totals_match

logger = logging.getLogger(__name__)


def create_plate(name, ingredient_ids, totals=None, is_favorite=False, user_id=None):
    """
    Persist a new plate.

    Args:
        name: Display name of the plate
        ingredient_ids: Ordered list of catalog ingredient ids (ints)
        totals: Optional client-computed totals dict ('calories', 'protein',
            'price'); when given it must match the server-side aggregation
        is_favorite: Whether the plate is saved as a favorite
        user_id: Optional owning user id

    Returns:
        The created Plate

    Raises:
        ValidationError: Unknown ingredient/user ids or mismatching totals
    """
    if not ingredient_ids:
        raise ValidationError('A plate needs at least one ingredient')

    ingredients = get_ingredients_by_ids(ingredient_ids)
    snapshot = aggregate_nutrition(ingredients)

    if totals is not None and not totals_match(snapshot, totals):
        logger.warning("Rejected plate totals %s, catalog gives %s", totals, snapshot)
        raise ValidationError('Plate totals do not match the selected ingredients')

    if user_id is not None and db.session.get(User, user_id) is None:
        raise ValidationError(f'User {user_id} does not exist')

    plate = Plate(
        user_id=user_id,
        name=sanitize_plate_name(name),
        ingredient_ids=[str(i) for i in ingredient_ids],
        total_calories=snapshot['calories'],
        total_protein=snapshot['protein'],
        total_price=snapshot['price'],
        is_favorite=bool(is_favorite),
    )
    db.session.add(plate)
    commit_session()

    logger.info("Created plate %s with %d ingredients", plate.id, len(ingredient_ids))
    return plate


def get_plate(plate_id):
    """Fetch a plate by id, or None."""
    return db.session.get(Plate, plate_id)


def list_user_plates(user_id):
    """All plates owned by user_id."""
    return Plate.query.filter_by(user_id=user_id).order_by(Plate.id).all()


def list_favorite_plates(user_id):
    """Plates owned by user_id that are flagged as favorites."""
    return Plate.query.filter_by(user_id=user_id, is_favorite=True).order_by(Plate.id).all()
