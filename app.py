import logging
import sqlite3

import click
from flask import Flask, Blueprint, current_app, jsonify, request
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import get_config
from constants import MAX_DB_ID, MAX_PLATE_INGREDIENTS, VALID_PAYMENT_METHODS
from models import db
from services import (
    ValidationError, NotFoundError,
    aggregate_nutrition, nutrition_progress,
    seed_ingredients, list_ingredients, list_ingredients_by_type, get_ingredients_by_ids,
    create_plate, get_plate, list_user_plates, list_favorite_plates,
    create_order, get_order, list_orders, count_orders_by_status, update_order_status,
    create_user, seed_default_user,
)
from utils.validators import (
    require_fields, parse_text, parse_int, parse_id, parse_float, parse_bool, parse_choice
)

logger = logging.getLogger(__name__)

migrate = Migrate()

api = Blueprint('api', __name__, url_prefix='/api')


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # SQLite ignores foreign keys unless asked on every connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ============================================
# REQUEST PARSING
# ============================================

def parse_ingredient_ids(value):
    """Parse the ingredientIds list; ids may arrive as ints or numeric strings."""
    if not isinstance(value, list):
        raise ValidationError('ingredientIds must be a list')
    if len(value) > MAX_PLATE_INGREDIENTS:
        raise ValidationError(f'A plate can hold at most {MAX_PLATE_INGREDIENTS} ingredients')
    return [parse_id(v, 'ingredientIds') for v in value]


def parse_plate_totals(data):
    """Client-computed totals are optional, but all three must be sent together."""
    keys = ('totalCalories', 'totalProtein', 'totalPrice')
    present = [k for k in keys if data.get(k) is not None]
    if not present:
        return None
    if len(present) != len(keys):
        raise ValidationError('totalCalories, totalProtein and totalPrice must be sent together')
    return {
        'calories': parse_int(data['totalCalories'], 'totalCalories', min_val=0),
        'protein': parse_float(data['totalProtein'], 'totalProtein', min_val=0),
        'price': parse_float(data['totalPrice'], 'totalPrice', min_val=0),
    }


def check_path_id(value, label):
    """An id in the URL too large for the database cannot name an existing row."""
    if value > MAX_DB_ID:
        raise NotFoundError(f'{label} not found')
    return value


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@api.route('/ingredients')
def ingredients_list():
    return jsonify([ing.to_dict() for ing in list_ingredients()])


@api.route('/ingredients/<ingredient_type>')
def ingredients_by_type(ingredient_type):
    return jsonify([ing.to_dict() for ing in list_ingredients_by_type(ingredient_type)])


@api.route('/nutrition/preview', methods=['POST'])
def nutrition_preview():
    data = request.get_json(silent=True)
    require_fields(data, ['ingredientIds'])
    ingredients = get_ingredients_by_ids(parse_ingredient_ids(data['ingredientIds']))
    totals = aggregate_nutrition(ingredients)
    progress = nutrition_progress(
        totals,
        calorie_goal=current_app.config['MEAL_CALORIE_GOAL'],
        protein_goal=current_app.config['MEAL_PROTEIN_GOAL'],
    )
    return jsonify({'totals': totals, 'progress': progress})


# ============================================
# ROUTES - PLATES
# ============================================

@api.route('/plates', methods=['POST'])
def plate_create():
    data = request.get_json(silent=True)
    require_fields(data, ['name', 'ingredientIds'])

    user_id = data.get('userId')
    plate = create_plate(
        name=parse_text(data['name'], 'plate_name'),
        ingredient_ids=parse_ingredient_ids(data['ingredientIds']),
        totals=parse_plate_totals(data),
        is_favorite=parse_bool(data.get('isFavorite'), 'isFavorite'),
        user_id=parse_id(user_id, 'userId') if user_id is not None else None,
    )
    return jsonify(plate.to_dict())


@api.route('/plate/<int:plate_id>')
def plate_view(plate_id):
    plate = get_plate(check_path_id(plate_id, 'Plate'))
    if plate is None:
        raise NotFoundError('Plate not found')
    return jsonify(plate.to_dict())


@api.route('/plates/<int:user_id>')
def plates_by_user(user_id):
    check_path_id(user_id, 'User')
    return jsonify([p.to_dict() for p in list_user_plates(user_id)])


@api.route('/plates/<int:user_id>/favorites')
def plates_favorites(user_id):
    check_path_id(user_id, 'User')
    return jsonify([p.to_dict() for p in list_favorite_plates(user_id)])


# ============================================
# ROUTES - ORDERS
# ============================================

@api.route('/orders', methods=['POST'])
def order_create():
    data = request.get_json(silent=True)
    require_fields(data, [
        'plateId', 'customerName', 'customerPhone', 'deliveryAddress',
        'latitude', 'longitude', 'paymentMethod',
    ])

    total_amount = data.get('totalAmount')
    order = create_order(
        plate_id=parse_id(data['plateId'], 'plateId'),
        customer_name=parse_text(data['customerName'], 'customer_name'),
        customer_phone=parse_text(data['customerPhone'], 'customer_phone'),
        delivery_address=parse_text(data['deliveryAddress'], 'delivery_address'),
        latitude=parse_float(data['latitude'], 'latitude', min_val=-90, max_val=90),
        longitude=parse_float(data['longitude'], 'longitude', min_val=-180, max_val=180),
        payment_method=parse_choice(data['paymentMethod'], 'paymentMethod', VALID_PAYMENT_METHODS),
        total_amount=parse_float(total_amount, 'totalAmount', min_val=0) if total_amount is not None else None,
        notes=parse_text(data.get('notes'), 'notes', required=False),
    )
    return jsonify(order.to_dict(include_plate=True))


@api.route('/orders')
def orders_list():
    orders = list_orders(status=request.args.get('status') or None)
    return jsonify([o.to_dict(include_plate=True) for o in orders])


@api.route('/orders/summary')
def orders_summary():
    return jsonify(count_orders_by_status())


@api.route('/orders/<int:order_id>')
def order_view(order_id):
    order = get_order(check_path_id(order_id, 'Order'))
    if order is None:
        raise NotFoundError('Order not found')
    return jsonify(order.to_dict(include_plate=True))


@api.route('/orders/<int:order_id>/status', methods=['PATCH'])
def order_update_status(order_id):
    check_path_id(order_id, 'Order')
    data = request.get_json(silent=True)
    require_fields(data, ['status'])
    if not isinstance(data['status'], str):
        raise ValidationError('status must be a string')

    order = update_order_status(order_id, data['status'].strip())
    return jsonify(order.to_dict(include_plate=True))


@api.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ============================================
# ERROR HANDLERS
# ============================================

@api.errorhandler(ValidationError)
def handle_validation_error(error):
    logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'message': str(error)}), 400


@api.errorhandler(NotFoundError)
def handle_not_found(error):
    return jsonify({'message': str(error)}), 404


@api.errorhandler(SQLAlchemyError)
def handle_database_error(error):
    db.session.rollback()
    logger.exception("Database error on %s %s", request.method, request.path)
    return jsonify({'message': 'Internal server error'}), 500


def handle_http_error(error):
    # Unknown /api routes and bad methods answer in JSON like every other API error
    if error.code is None or error.code < 400:
        return error
    if request.path.startswith('/api'):
        return jsonify({'message': error.description}), error.code
    return error


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create tables, then seed the ingredient catalog and default owner once at startup."""
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_CATALOG', True):
            seed_ingredients()
        if app.config.get('SEED_DEFAULT_USER', True):
            seed_default_user(app.config['DEFAULT_USERNAME'], app.config['DEFAULT_USER_PASSWORD'])


def register_commands(app):
    @app.cli.command('init-db')
    def init_db_command():
        """Create tables and seed the ingredient catalog."""
        init_db(app)
        click.echo('Database initialized.')

    @app.cli.command('seed-catalog')
    def seed_catalog_command():
        """Seed the ingredient catalog if it is empty."""
        inserted = seed_ingredients()
        if inserted:
            click.echo(f'Seeded {inserted} ingredients.')
        else:
            click.echo('Ingredient catalog already populated.')

    @app.cli.command('create-user')
    @click.argument('username')
    @click.password_option()
    def create_user_command(username, password):
        """Create a user who can own saved plates."""
        try:
            user = create_user(username, password)
        except ValidationError as e:
            raise click.ClickException(str(e))
        click.echo(f'Created user "{user.username}" with id {user.id}.')


def create_app(env=None, config_overrides=None):
    """Application factory."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    if config_overrides:
        app.config.update(config_overrides)
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(api)
    app.register_error_handler(HTTPException, handle_http_error)
    register_commands(app)

    init_db(app)
    return app


if __name__ == '__main__':
    app = create_app()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
