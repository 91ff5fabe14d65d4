from __future__ import annotations

from typing import Iterable, Tuple

from gita_guide.insight.models import ErrorKind


class InsightError(Exception):
    """Base exception for insight retrieval errors"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(InsightError):
    """Raised when no usable backend credential is configured"""
    kind = ErrorKind.CONFIGURATION


class BackendError(InsightError):
    """Raised on a non-success status or a failed transport"""
    kind = ErrorKind.BACKEND

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(InsightError):
    """Raised when the backend answered but generated no content"""
    kind = ErrorKind.EMPTY_RESPONSE


class MalformedResponseError(InsightError):
    """Raised when the reply does not hold a JSON object"""
    kind = ErrorKind.MALFORMED_RESPONSE


class IncompleteResponseError(InsightError):
    """Raised when required insight fields are missing or empty"""
    kind = ErrorKind.INCOMPLETE_RESPONSE

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields: Tuple[str, ...] = tuple(missing_fields)
        super().__init__(
            "Incomplete response from the backend, missing field(s): "
            + ", ".join(self.missing_fields)
        )
