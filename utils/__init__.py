# Utility modules for the plate ordering app
from .sanitizer import sanitize_text, sanitize_plate_name, sanitize_notes
from .validators import (
    ValidationError, require_fields, parse_text, parse_int, parse_id,
    parse_float, parse_bool, parse_choice
)
