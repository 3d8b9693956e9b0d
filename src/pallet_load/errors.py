from __future__ import annotations


class InvalidDimension(ValueError):
    """Raised when a load input is missing, NaN, non-finite or out of range."""

    def __init__(self, field: str, reason: str, value=None) -> None:
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"{field}: {reason} (got {value!r})")
