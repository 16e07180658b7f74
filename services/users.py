"""
User Service

Minimal account storage. Users are only referenced as plate owners.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from models import db, commit_session, User
from utils.validators import parse_text
from .errors import ValidationError

logger = logging.getLogger(__name__)


def create_user(username, password):
    """
    Create a user with a hashed password.

    Raises:
        ValidationError: If the username is blank, too long or already taken
    """
    username = parse_text(username, 'username')
    if not password:
        raise ValidationError('password is required')

    if get_user_by_username(username) is not None:
        raise ValidationError(f'Username "{username}" is already taken')

    user = User(username=username, password=generate_password_hash(password))
    db.session.add(user)
    try:
        commit_session()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same username
        raise ValidationError(f'Username "{username}" is already taken')

    logger.info("Created user %s", user.id)
    return user


def seed_default_user(username, password):
    """
    Create the default plate owner if no user exists yet.

    The web client saves every plate for user 1, so a fresh database needs
    that account before the first save.

    Returns:
        The created User, or None when users already exist
    """
    if User.query.first() is not None:
        return None
    user = create_user(username, password)
    logger.info("Seeded default user %r with id %s", user.username, user.id)
    return user


def get_user(user_id):
    return db.session.get(User, user_id)


def get_user_by_username(username):
    return User.query.filter_by(username=username).first()
