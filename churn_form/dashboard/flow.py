"""
Submission flow across Streamlit reruns.

Clicking "Predict Churn" only records a request. The next run draws the form
disabled with the "Predicting..." label, runs the submission, then reruns so
the result is drawn with the controls enabled again.
"""

from typing import MutableMapping, Optional

from churn_form.session.controller import SubmissionController
from churn_form.session.state import SubmissionState

SUBMIT_REQUESTED = "submit_requested"


def request_submission(session: MutableMapping) -> None:
    """Button callback: ask for a submission on the next run."""
    session[SUBMIT_REQUESTED] = True


def submission_requested(session: MutableMapping) -> bool:
    return bool(session.get(SUBMIT_REQUESTED, False))


def is_busy(controller: SubmissionController, session: MutableMapping) -> bool:
    """Whether the controls must be drawn disabled."""
    return controller.is_pending or submission_requested(session)


def button_label(busy: bool) -> str:
    return "Predicting..." if busy else "Predict Churn"


def run_requested_submission(
    controller: SubmissionController, session: MutableMapping
) -> Optional[SubmissionState]:
    """Run a requested submission to completion and clear the request."""
    if not submission_requested(session):
        return None
    try:
        return controller.submit_blocking()
    finally:
        session.pop(SUBMIT_REQUESTED, None)
