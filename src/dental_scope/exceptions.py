"""Error types raised by the scoring engine."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Structurally malformed calculator input.

    Raised for incomplete landmark records and unknown classification
    labels. Out-of-range numbers are never rejected.
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = list(fields or [])
