"""
Shared pytest fixtures.

Each test gets a fresh app bound to an in-memory SQLite database with the
ingredient catalog already seeded.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def plate(client):
    """A saved plate of chicken breast and brown rice."""
    response = client.post('/api/plates', json={
        'name': 'Lunch',
        'ingredientIds': ['1', '3'],
        'totalCalories': 380,
        'totalProtein': 36,
        'totalPrice': 1.1,
        'isFavorite': False,
    })
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def order_payload(plate):
    return {
        'plateId': plate['id'],
        'customerName': 'Sara Ahmed',
        'customerPhone': '0501234567',
        'deliveryAddress': '12 Gulf Road, Salmiya',
        'latitude': 29.3375,
        'longitude': 48.0758,
        'paymentMethod': 'cash',
        'totalAmount': plate['totalPrice'],
        'notes': 'Ring the bell twice',
    }


@pytest.fixture
def order(client, order_payload):
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 200
    return response.get_json()
