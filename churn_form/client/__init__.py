"""Prediction service client."""

from .transport import PredictionClient, PredictionResponse

__all__ = ["PredictionClient", "PredictionResponse"]
