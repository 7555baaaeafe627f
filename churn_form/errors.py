"""
Error Taxonomy
==============

Failures raised by the prediction transport and the input coercion layer.
"""

from typing import Any, Optional

GENERIC_FAILURE_MESSAGE = "Failed to get prediction"


class PredictionError(Exception):
    """Base class for failures while obtaining a prediction."""

    user_message = GENERIC_FAILURE_MESSAGE


class TransportError(PredictionError):
    """The request could not complete (connectivity, DNS, refused connection)."""


class HttpStatusError(PredictionError):
    """The service answered with a non-success status code."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        self.user_message = f"HTTP error! status: {status_code}"
        super().__init__(self.user_message)


class DecodeError(PredictionError):
    """The response body did not match ``{prediction, probability}``."""


class InputCoercionError(ValueError):
    """Raw control output could not be converted to a FeatureSet value."""

    def __init__(self, field: str, raw: Any, reason: str):
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid value for {field}: {raw!r} ({reason})")
