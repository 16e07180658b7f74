"""
Ingredient Model

Catalog entries a plate is built from. Rows are written only by the
seeding step and are read-only for the rest of the application.
"""

from .base import db


class Ingredient(db.Model):
    """
    One selectable food component with its nutrition, cost and display data.

    Types:
    - protein
    - carbohydrate
    - vegetable
    - sauce
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(20), nullable=False, index=True)

    # Per-portion nutrition and cost
    calories = db.Column(db.Integer, nullable=False, default=0)
    protein = db.Column(db.Float, nullable=False, default=0.0)
    price = db.Column(db.Float, nullable=False, default=0.0)

    # Display metadata for the picker (icon class and color token)
    icon = db.Column(db.String(50), nullable=False, default='')
    color = db.Column(db.String(20), nullable=False, default='')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'calories': self.calories,
            'protein': self.protein,
            'price': self.price,
            'icon': self.icon,
            'color': self.color,
        }
