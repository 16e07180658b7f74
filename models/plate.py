"""
Plate Model

A named snapshot of chosen ingredients with precomputed totals.
"""

from .base import db


class Plate(db.Model):
    """
    Saved plate. Ingredient references are copied by value as strings and the
    totals are frozen at creation time; rows are never updated afterwards.
    """
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='SET NULL'), nullable=True, index=True)
    name = db.Column(db.String(200), nullable=False)
    ingredient_ids = db.Column(db.JSON, nullable=False, default=list)
    total_calories = db.Column(db.Integer, nullable=False, default=0)
    total_protein = db.Column(db.Float, nullable=False, default=0.0)
    total_price = db.Column(db.Float, nullable=False, default=0.0)
    is_favorite = db.Column(db.Boolean, nullable=False, default=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'name': self.name,
            'ingredientIds': list(self.ingredient_ids or []),
            'totalCalories': self.total_calories,
            'totalProtein': self.total_protein,
            'totalPrice': self.total_price,
            'isFavorite': bool(self.is_favorite),
        }
