"""
Form Session State
==================

Explicit state container for one form session and the pure transitions
that move it through the submission lifecycle.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from churn_form.form.features import FeatureSet, default_features, update_field
from churn_form.results.interpreter import PredictionOutcome


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Succeeded:
    outcome: PredictionOutcome


@dataclass(frozen=True)
class Failed:
    message: str


SubmissionState = Union[Idle, Pending, Succeeded, Failed]


@dataclass(frozen=True)
class FormState:
    """Current features, submission lifecycle and last successful outcome."""

    features: FeatureSet = field(default_factory=default_features)
    submission: SubmissionState = field(default_factory=Idle)
    outcome: Optional[PredictionOutcome] = None

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.submission, Failed):
            return self.submission.message
        return None

    @property
    def is_pending(self) -> bool:
        return isinstance(self.submission, Pending)


def initial_state() -> FormState:
    return FormState()


def with_field(state: FormState, name: str, value) -> FormState:
    return replace(state, features=update_field(state.features, name, value))


def submission_started(state: FormState) -> FormState:
    # the previous outcome stays visible while the request runs
    return replace(state, submission=Pending())


def submission_succeeded(state: FormState, outcome: PredictionOutcome) -> FormState:
    return replace(state, submission=Succeeded(outcome), outcome=outcome)


def submission_failed(state: FormState, message: str) -> FormState:
    return replace(state, submission=Failed(message))
