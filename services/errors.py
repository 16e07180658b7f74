"""
Service Errors

Exceptions raised by the service layer and mapped to HTTP responses by
the API blueprint.
"""

from utils.validators import ValidationError


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""
    pass


__all__ = ['ValidationError', 'NotFoundError']
