"""Tests for checkout and order tracking."""

from datetime import datetime

import pytest

from services.errors import NotFoundError, ValidationError
from services.orders import next_status, update_order_status, count_orders_by_status


def test_create_order_starts_pending(order, plate):
    assert order['status'] == 'pending'
    assert order['plateId'] == plate['id']
    assert order['createdAt']
    datetime.fromisoformat(order['createdAt'])
    assert order['plate']['id'] == plate['id']
    assert order['notes'] == 'Ring the bell twice'


def test_create_order_ignores_client_status(client, order_payload):
    order_payload['status'] = 'delivered'
    order_payload['createdAt'] = '2000-01-01T00:00:00'
    data = client.post('/api/orders', json=order_payload).get_json()
    assert data['status'] == 'pending'
    assert not data['createdAt'].startswith('2000')


def test_create_order_defaults_total_to_plate_price(client, order_payload, plate):
    del order_payload['totalAmount']
    data = client.post('/api/orders', json=order_payload).get_json()
    assert data['totalAmount'] == plate['totalPrice']


def test_create_order_without_notes(client, order_payload):
    del order_payload['notes']
    data = client.post('/api/orders', json=order_payload).get_json()
    assert data['notes'] is None


def test_create_order_for_missing_plate(client, order_payload):
    order_payload['plateId'] = 9999
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 400


@pytest.mark.parametrize('field, value', [
    ('paymentMethod', 'card'),
    ('customerName', 'A'),
    ('customerPhone', '123'),
    ('deliveryAddress', 'x'),
    ('latitude', 91),
    ('longitude', 'east'),
    ('totalAmount', -1),
])
def test_create_order_rejects_invalid_fields(client, order_payload, field, value):
    order_payload[field] = value
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 400


def test_create_order_requires_customer_fields(client, order_payload):
    del order_payload['customerPhone']
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 400
    assert 'customerPhone' in response.get_json()['message']


def test_list_orders_newest_first(client, order_payload):
    first = client.post('/api/orders', json=order_payload).get_json()
    second = client.post('/api/orders', json=order_payload).get_json()
    orders = client.get('/api/orders').get_json()
    assert [o['id'] for o in orders] == [second['id'], first['id']]
    assert orders[0]['plate']['totalCalories'] == 380


def test_get_order(client, order):
    response = client.get(f"/api/orders/{order['id']}")
    assert response.status_code == 200
    assert response.get_json() == order


def test_get_missing_order(client):
    assert client.get('/api/orders/9999').status_code == 404


def test_status_update_changes_only_status(client, order):
    response = client.patch(f"/api/orders/{order['id']}/status", json={'status': 'confirmed'})
    assert response.status_code == 200
    updated = response.get_json()
    assert updated['status'] == 'confirmed'
    assert {k: v for k, v in updated.items() if k != 'status'} == \
        {k: v for k, v in order.items() if k != 'status'}


def test_status_walks_full_lifecycle(client, order):
    url = f"/api/orders/{order['id']}/status"
    for status in ('confirmed', 'preparing', 'delivered'):
        response = client.patch(url, json={'status': status})
        assert response.status_code == 200
        assert response.get_json()['status'] == status


def test_status_cannot_skip_steps(client, order):
    response = client.patch(f"/api/orders/{order['id']}/status", json={'status': 'delivered'})
    assert response.status_code == 400
    assert client.get(f"/api/orders/{order['id']}").get_json()['status'] == 'pending'


def test_status_cannot_go_backwards(client, order):
    url = f"/api/orders/{order['id']}/status"
    client.patch(url, json={'status': 'confirmed'})
    assert client.patch(url, json={'status': 'pending'}).status_code == 400


def test_status_resend_is_noop(client, order):
    url = f"/api/orders/{order['id']}/status"
    response = client.patch(url, json={'status': 'pending'})
    assert response.status_code == 200
    assert response.get_json()['status'] == 'pending'


def test_unknown_status_rejected(client, order):
    url = f"/api/orders/{order['id']}/status"
    assert client.patch(url, json={'status': 'shipped'}).status_code == 400
    assert client.patch(url, json={'status': 3}).status_code == 400
    assert client.patch(url, json={}).status_code == 400


def test_status_update_for_missing_order(client):
    response = client.patch('/api/orders/9999/status', json={'status': 'confirmed'})
    assert response.status_code == 404


def test_filter_orders_by_status(client, order, order_payload):
    other = client.post('/api/orders', json=order_payload).get_json()
    client.patch(f"/api/orders/{other['id']}/status", json={'status': 'confirmed'})

    pending = client.get('/api/orders?status=pending').get_json()
    assert [o['id'] for o in pending] == [order['id']]
    assert client.get('/api/orders?status=lost').status_code == 400


def test_orders_summary(client, order, order_payload):
    other = client.post('/api/orders', json=order_payload).get_json()
    client.patch(f"/api/orders/{other['id']}/status", json={'status': 'confirmed'})
    summary = client.get('/api/orders/summary').get_json()
    assert summary == {'pending': 1, 'confirmed': 1, 'preparing': 0, 'delivered': 0}


def test_next_status():
    assert next_status('pending') == 'confirmed'
    assert next_status('preparing') == 'delivered'
    assert next_status('delivered') is None
    assert next_status('unknown') is None


def test_service_errors(app):
    with pytest.raises(NotFoundError):
        update_order_status(1234, 'confirmed')


def test_service_rejects_unknown_status(app, order):
    with pytest.raises(ValidationError):
        update_order_status(order['id'], 'cancelled')


def test_empty_summary(app):
    assert count_orders_by_status() == {'pending': 0, 'confirmed': 0, 'preparing': 0, 'delivered': 0}


def test_oversized_order_id_is_not_found(client):
    assert client.get('/api/orders/99999999999999999999').status_code == 404
    response = client.patch('/api/orders/99999999999999999999/status', json={'status': 'confirmed'})
    assert response.status_code == 404


def test_create_order_rejects_oversized_plate_id(client, order_payload):
    order_payload['plateId'] = 99999999999999999999
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 400
    assert 'plateId' in response.get_json()['message']


def test_customer_text_is_stored_as_typed(client, order_payload):
    order_payload['customerName'] = "Sara O'Neil & Sons"
    order_payload['deliveryAddress'] = 'Flat 2 & 3, <Tower> "B"'
    order_payload['notes'] = 'Gate <2>\nLeave at "door"'
    response = client.post('/api/orders', json=order_payload)
    assert response.status_code == 200
    data = response.get_json()
    assert data['customerName'] == "Sara O'Neil & Sons"
    assert data['deliveryAddress'] == 'Flat 2 & 3, <Tower> "B"'
    assert data['notes'] == 'Gate <2>\nLeave at "door"'

    fetched = client.get(f"/api/orders/{data['id']}").get_json()
    assert fetched['deliveryAddress'] == 'Flat 2 & 3, <Tower> "B"'
