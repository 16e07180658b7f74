"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from.
This is separate to avoid circular imports.
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Create the SQLAlchemy instance
# This is bound to the Flask app inside create_app() in app.py
db = SQLAlchemy()


def commit_session():
    """Commit the current session, rolling back and re-raising on failure."""
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
