"""
Order Service

Checkout and order-tracking logic.

Status lifecycle (forward only, one step at a time):
    pending -> confirmed -> preparing -> delivered
"""

import logging

from sqlalchemy import func

from constants import ORDER_STATUSES, VALID_ORDER_STATUSES
from models import db, commit_session, Order, Plate
from utils.sanitizer import sanitize_text, sanitize_notes
from .errors import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


def next_status(status):
    """Return the status that follows status, or None for the final state."""
    try:
        index = ORDER_STATUSES.index(status)
    except ValueError:
        return None
    if index + 1 < len(ORDER_STATUSES):
        return ORDER_STATUSES[index + 1]
    return None


def create_order(plate_id, customer_name, customer_phone, delivery_address,
                 latitude, longitude, payment_method, total_amount=None, notes=None):
    """
    Create a pending order for an existing plate.

    The database assigns the id and creation timestamp. When total_amount
    is omitted the plate's snapshot price is charged.

    Raises:
        ValidationError: If the plate does not exist
    """
    plate = db.session.get(Plate, plate_id)
    if plate is None:
        raise ValidationError(f'Plate {plate_id} does not exist')

    if total_amount is None:
        total_amount = plate.total_price

    order = Order(
        plate_id=plate.id,
        customer_name=sanitize_text(customer_name),
        customer_phone=sanitize_text(customer_phone),
        delivery_address=sanitize_text(delivery_address),
        latitude=latitude,
        longitude=longitude,
        payment_method=payment_method,
        total_amount=round(total_amount, 2),
        status=ORDER_STATUSES[0],
        notes=sanitize_notes(notes),
    )
    db.session.add(order)
    commit_session()

    logger.info("Created order %s for plate %s (%s, %.2f)",
                order.id, plate.id, payment_method, order.total_amount)
    return order


def get_order(order_id):
    """Fetch an order by id, or None."""
    return db.session.get(Order, order_id)


def list_orders(status=None):
    """
    All orders, newest first.

    Args:
        status: Optional status to filter on

    Raises:
        ValidationError: If status is not a recognized order status
    """
    query = Order.query
    if status is not None:
        if status not in VALID_ORDER_STATUSES:
            raise ValidationError(f'Unknown order status: {status}')
        query = query.filter_by(status=status)
    return query.order_by(Order.created_at.desc(), Order.id.desc()).all()


def count_orders_by_status():
    """Number of orders in each status, including empty ones."""
    counts = dict.fromkeys(ORDER_STATUSES, 0)
    rows = db.session.query(Order.status, func.count(Order.id)).group_by(Order.status).all()
    for status, count in rows:
        counts[status] = count
    return counts


def update_order_status(order_id, new_status):
    """
    Advance an order to new_status.

    Only the next status in the lifecycle is accepted. Re-sending the
    current status is a no-op so a double-submitted dashboard click is
    harmless.

    Raises:
        NotFoundError: If the order does not exist
        ValidationError: Unknown status or a transition that skips or reverses
    """
    order = db.session.get(Order, order_id)
    if order is None:
        raise NotFoundError(f'Order {order_id} not found')

    if new_status not in VALID_ORDER_STATUSES:
        raise ValidationError(f'Unknown order status: {new_status}')

    if new_status == order.status:
        return order

    expected = next_status(order.status)
    if new_status != expected:
        logger.warning("Rejected status change for order %s: %s -> %s",
                       order.id, order.status, new_status)
        raise ValidationError(f'Cannot move order from {order.status} to {new_status}')

    previous = order.status
    order.status = new_status
    commit_session()

    logger.info("Order %s status %s -> %s", order.id, previous, new_status)
    return order
