from typing import Optional


class InvariantViolation(Exception):
    """A domain rule was broken by otherwise well-formed input."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
