"""Exceptions raised by the entity name value type."""

from __future__ import annotations


class InvalidEntityError(ValueError):
    """Raised when input cannot describe a BEM entity.

    The offending field is kept on ``field`` so callers can report it
    without parsing the message.
    """

    def __init__(self, field: str, reason: str = "is undefined"):
        self.field = field
        self.reason = reason
        super().__init__(f"This is not valid BEM entity: the field `{field}` {reason}.")
