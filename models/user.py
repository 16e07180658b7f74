"""
User Model

Accounts exist only as the optional owner of saved plates.
"""

from werkzeug.security import check_password_hash

from .base import db


class User(db.Model):
    """Application user. The password column holds a werkzeug hash."""
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    plates = db.relationship('Plate', backref='user', lazy=True)

    def check_password(self, password):
        return check_password_hash(self.password, password)

    def to_dict(self):
        return {'id': self.id, 'username': self.username}
