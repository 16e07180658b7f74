"""Tests for user storage."""

import pytest
from sqlalchemy.exc import IntegrityError

from models import db, commit_session, User
from services.errors import ValidationError
from services.users import create_user, get_user, get_user_by_username, seed_default_user


def test_create_user_hashes_password(app):
    user = create_user('layla', 'pa55word')
    assert user.password != 'pa55word'
    assert user.check_password('pa55word')
    assert not user.check_password('wrong')


def test_lookup(app):
    user = create_user('omar', 'secret')
    assert get_user(user.id).username == 'omar'
    assert get_user_by_username('omar').id == user.id
    assert get_user_by_username('nobody') is None


def test_duplicate_username_rejected(app):
    create_user('noor', 'one')
    with pytest.raises(ValidationError):
        create_user('noor', 'two')


def test_blank_credentials_rejected(app):
    with pytest.raises(ValidationError):
        create_user('   ', 'secret')
    with pytest.raises(ValidationError):
        create_user('valid', '')


def test_default_user_is_seeded_at_startup(app):
    user = get_user(1)
    assert user.username == app.config['DEFAULT_USERNAME']
    assert user.check_password(app.config['DEFAULT_USER_PASSWORD'])


def test_default_user_seeding_is_idempotent(app):
    assert seed_default_user('someone', 'else') is None
    assert User.query.count() == 1


def test_default_user_seeded_into_empty_table(app):
    User.query.delete()
    user = seed_default_user('owner', 'secret')
    assert user.username == 'owner'
    assert seed_default_user('owner', 'secret') is None
    assert User.query.count() == 1


def test_create_user_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-user', 'huda', '--password', 's3cret'])
    assert result.exit_code == 0
    assert 'Created user "huda"' in result.output
    assert get_user_by_username('huda').check_password('s3cret')

    result = runner.invoke(args=['create-user', 'huda', '--password', 'again'])
    assert result.exit_code != 0
    assert 'already taken' in result.output


def test_failed_commit_leaves_session_usable(app):
    db.session.add(User(username=app.config['DEFAULT_USERNAME'], password='x'))
    with pytest.raises(IntegrityError):
        commit_session()
    assert User.query.count() == 1
    assert create_user('after', 'secret').id is not None
