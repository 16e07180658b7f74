"""
Order Model

Delivery request for exactly one plate.
"""

from datetime import datetime, timezone

from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


def _as_utc(value):
    # SQLite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Order(db.Model):
    """
    Checkout record. Status moves pending -> confirmed -> preparing -> delivered;
    every other column is fixed once the order is created.
    """
    # "order" is a reserved word in SQL
    __tablename__ = 'orders'

    id = db.Column(db.Integer, primary_key=True)
    plate_id = db.Column(db.Integer, db.ForeignKey('plate.id'), nullable=False, index=True)

    customer_name = db.Column(db.String(100), nullable=False)
    customer_phone = db.Column(db.String(30), nullable=False)

    # Delivery location picked on the map
    delivery_address = db.Column(db.String(500), nullable=False)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)

    payment_method = db.Column(db.String(20), nullable=False)  # 'cash' or 'online'
    total_amount = db.Column(db.Float, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='pending', index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow, index=True)
    notes = db.Column(db.Text, nullable=True)

    plate = db.relationship('Plate')

    def to_dict(self, include_plate=False):
        data = {
            'id': self.id,
            'plateId': self.plate_id,
            'customerName': self.customer_name,
            'customerPhone': self.customer_phone,
            'deliveryAddress': self.delivery_address,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'paymentMethod': self.payment_method,
            'totalAmount': self.total_amount,
            'status': self.status,
            'createdAt': _as_utc(self.created_at).isoformat() if self.created_at else None,
            'notes': self.notes,
        }
        if include_plate:
            data['plate'] = self.plate.to_dict() if self.plate else None
        return data
