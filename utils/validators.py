"""
Request Body Validation Module

Strict coercion helpers for JSON request bodies. Unlike form handling,
API input is rejected outright instead of being clamped to a default.
"""

import math

from constants import MAX_DB_ID, MAX_LENGTHS, MIN_LENGTHS


class ValidationError(Exception):
    """Raised when a request body does not match the expected shape."""
    pass


def require_fields(data, fields):
    """Ensure data is a JSON object containing every field in fields."""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    missing = [f for f in fields if data.get(f) is None]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


def parse_text(value, field, required=True):
    """Parse a string field, enforcing the configured min/max lengths."""
    if value is None:
        if required:
            raise ValidationError(f'{field} is required')
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')

    value = value.strip()
    min_length = MIN_LENGTHS.get(field, 1 if required else 0)
    if len(value) < min_length:
        raise ValidationError(f'{field} must be at least {min_length} characters')

    max_length = MAX_LENGTHS.get(field)
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return value


def parse_int(value, field, min_val=None, max_val=None):
    """Parse an integer field. Booleans and fractional numbers are rejected."""
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be an integer')
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError(f'{field} must be an integer')
    if not isinstance(value, int):
        raise ValidationError(f'{field} must be an integer')
    if min_val is not None and value < min_val:
        raise ValidationError(f'{field} must be >= {min_val}')
    if max_val is not None and value > max_val:
        raise ValidationError(f'{field} must be <= {max_val}')
    return value


def parse_id(value, field):
    """Parse a database id: a positive integer that fits a 64-bit column."""
    return parse_int(value, field, min_val=1, max_val=MAX_DB_ID)


def parse_float(value, field, min_val=None, max_val=None):
    """Parse a finite numeric field with optional bounds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f'{field} must be a number')
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f'{field} must be a finite number')
    if min_val is not None and value < min_val:
        raise ValidationError(f'{field} must be >= {min_val}')
    if max_val is not None and value > max_val:
        raise ValidationError(f'{field} must be <= {max_val}')
    return value


def parse_bool(value, field, default=False):
    """Parse an optional boolean field."""
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f'{field} must be a boolean')
    return value


def parse_choice(value, field, choices):
    """Parse a string field restricted to a whitelist."""
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(sorted(choices))}")
    return value
