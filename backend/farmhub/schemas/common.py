"""Shared schema helpers"""


def not_null(value):
    """Partial updates may omit a required column, never set it to null."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
