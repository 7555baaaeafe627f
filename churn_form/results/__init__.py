"""Prediction result interpretation."""

from .interpreter import (
    ChurnCategory,
    PredictionOutcome,
    ResultView,
    Severity,
    format_percentage,
    format_raw,
    interpret,
    present,
    severity,
)

__all__ = [
    "ChurnCategory",
    "PredictionOutcome",
    "ResultView",
    "Severity",
    "interpret",
    "severity",
    "format_percentage",
    "format_raw",
    "present",
]
