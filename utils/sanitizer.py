"""
Input Sanitization Module

Cleans free-text fields from request bodies before they are stored. Text
is kept as the customer typed it; escaping is left to whoever renders it.
"""

import re

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text):
    """
    Sanitize a single-line text value.

    Removes control characters, strips surrounding whitespace and collapses
    runs of whitespace. Length limits are enforced by the validators.

    Args:
        text: The text to sanitize (can be None)

    Returns:
        Sanitized string
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()
    return re.sub(r'\s+', ' ', text)


def sanitize_plate_name(name):
    """Sanitize a plate name, falling back to a generic label when empty."""
    name = sanitize_text(name)
    if not name:
        return 'Custom Plate'
    return name


def sanitize_notes(notes):
    """
    Sanitize delivery notes.

    Preserves newlines for formatting. Returns None for blank notes so the
    column stays NULL.
    """
    if notes is None:
        return None

    if not isinstance(notes, str):
        notes = str(notes)

    notes = _CONTROL_CHARS.sub('', notes).strip()
    return notes or None
