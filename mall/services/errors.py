"""Exceptions raised by services and translated to HTTP responses by the app."""
from __future__ import annotations


class ServiceError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ValidationError(ServiceError):
    """A required field is missing or empty."""

    def __init__(self, message: str):
        super().__init__(message, "validation_error", 400)


class NotFoundError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message, "not_found", 404)


def require_text(payload: dict, field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def merge_fields(record: dict, payload: dict, editable: tuple[str, ...]) -> dict:
    """Shallow merge: supplied editable fields overwrite, everything else is kept."""
    for field in editable:
        if field in payload:
            record[field] = payload[field]
    return record
