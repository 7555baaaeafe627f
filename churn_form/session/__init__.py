"""Form session state and submission controller."""

from .state import Failed, FormState, Idle, Pending, SubmissionState, Succeeded
from .controller import SubmissionController

__all__ = [
    "FormState",
    "SubmissionState",
    "Idle",
    "Pending",
    "Succeeded",
    "Failed",
    "SubmissionController",
]
