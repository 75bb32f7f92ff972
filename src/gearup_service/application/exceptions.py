from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class ValidationError(AppError):
    pass


class InvalidCursorError(ValidationError):
    pass


class CacheError(AppError):
    pass


class CacheDeserializationError(CacheError):
    """A cache entry exists but its payload does not match the requested type."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        super().__init__(detail or f"Malformed cache entry for key {key!r}")
