"""
Result Interpreter
==================

Maps a raw ``{prediction, probability}`` pair onto a categorical label,
a severity and the display strings shown in the results panel.

The label comes from the ``prediction`` string while the severity comes
from ``probability`` alone, so a response such as
``{"prediction": "No", "probability": 0.9}`` renders "Will Stay" with
high-risk styling. Both signals are shown as received.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union

from churn_form.client.transport import PredictionResponse

HIGH_RISK_THRESHOLD = 0.5


class ChurnCategory(str, Enum):
    WILL_CHURN = "WillChurn"
    WILL_STAY = "WillStay"

    @property
    def label(self) -> str:
        return "Will Churn" if self is ChurnCategory.WILL_CHURN else "Will Stay"


class Severity(str, Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class PredictionOutcome:
    """Decoded result of a successful prediction call."""

    category: ChurnCategory
    probability: float


@dataclass(frozen=True)
class ResultView:
    """Render model for the results panel."""

    label: str
    label_tone: str
    percentage: str
    raw: str
    severity: Severity
    bar_color: str
    bar_width: float


def interpret(raw: Union[PredictionResponse, Mapping[str, Any]]) -> PredictionOutcome:
    """Derive the outcome from a decoded response body."""
    if isinstance(raw, PredictionResponse):
        prediction, probability = raw.prediction, raw.probability
    else:
        prediction, probability = raw["prediction"], raw["probability"]

    # exact, case-sensitive match
    category = ChurnCategory.WILL_CHURN if prediction == "Yes" else ChurnCategory.WILL_STAY
    return PredictionOutcome(category=category, probability=float(probability))


def severity(probability: float) -> Severity:
    return Severity.HIGH if probability > HIGH_RISK_THRESHOLD else Severity.LOW


def _round_half_up(value: Decimal, places: int) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(value.quantize(quantum, rounding=ROUND_HALF_UP))


def _as_decimal(probability: float) -> Decimal:
    # repr gives the shortest round-tripping literal, so 0.6555 stays 0.6555
    return Decimal(repr(float(probability)))


def _non_finite(probability: float) -> Optional[str]:
    # spelled the way a browser prints these numbers
    if math.isnan(probability):
        return "NaN"
    if math.isinf(probability):
        return "Infinity" if probability > 0 else "-Infinity"
    return None


def format_percentage(probability: float) -> str:
    """Format as a percentage with one decimal place, e.g. ``"65.6%"``."""
    special = _non_finite(probability)
    if special is not None:
        return f"{special}%"
    return f"{_round_half_up(_as_decimal(probability) * 100, 1)}%"


def format_raw(probability: float) -> str:
    """Format the raw fraction with four decimal places, e.g. ``"0.6555"``."""
    special = _non_finite(probability)
    if special is not None:
        return special
    return _round_half_up(_as_decimal(probability), 4)


def present(outcome: PredictionOutcome) -> ResultView:
    """Build the results-panel view of an outcome."""
    level = severity(outcome.probability)
    churn = outcome.category is ChurnCategory.WILL_CHURN

    return ResultView(
        label=outcome.category.label,
        label_tone="red" if churn else "green",
        percentage=format_percentage(outcome.probability),
        raw=format_raw(outcome.probability),
        severity=level,
        bar_color="red" if level is Severity.HIGH else "green",
        bar_width=min(max(outcome.probability * 100, 0.0), 100.0),
    )
