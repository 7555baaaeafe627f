"""
Submission Controller
=====================

Owns the form session: applies coerced input to the FeatureSet and runs the
Idle -> Pending -> Succeeded/Failed lifecycle of a prediction request.
"""

import asyncio
from typing import Any, Callable, List, Optional

from loguru import logger

from churn_form.client.transport import PredictionClient
from churn_form.errors import PredictionError
from churn_form.form.coercion import coerce_value
from churn_form.form.features import FeatureSet
from churn_form.results.interpreter import PredictionOutcome, interpret
from churn_form.session.state import (
    FormState,
    SubmissionState,
    initial_state,
    submission_failed,
    submission_started,
    submission_succeeded,
    with_field,
)

Listener = Callable[[FormState], None]


class SubmissionController:
    """
    Form session controller.

    A new ``submit`` while another is pending is not blocked; each flow writes
    its result when its response resolves, so the last one to resolve wins.
    """

    def __init__(
        self,
        client: PredictionClient,
        state: Optional[FormState] = None,
        strict_numeric: bool = False,
    ):
        self.client = client
        self.strict_numeric = strict_numeric
        self._state = state or initial_state()
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls, config: dict, **kwargs) -> "SubmissionController":
        form_config = config.get("form", {})
        return cls(
            client=PredictionClient.from_config(config),
            strict_numeric=bool(form_config.get("strict_numeric", False)),
            **kwargs,
        )

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def features(self) -> FeatureSet:
        return self._state.features

    @property
    def submission(self) -> SubmissionState:
        return self._state.submission

    @property
    def outcome(self) -> Optional[PredictionOutcome]:
        return self._state.outcome

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def is_pending(self) -> bool:
        return self._state.is_pending

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with every new state."""
        self._listeners.append(listener)

    def _set_state(self, state: FormState) -> None:
        self._state = state
        for listener in self._listeners:
            try:
                listener(state)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")

    def change_field(self, name: str, raw: Any) -> FeatureSet:
        """
        Coerce raw control output and replace that one field.

        Raises:
            InputCoercionError: the value was rejected; state is unchanged
        """
        value = coerce_value(name, raw, strict=self.strict_numeric)
        self._set_state(with_field(self._state, name, value))
        return self._state.features

    def reset(self) -> None:
        self._set_state(initial_state())

    async def submit(self, features: Optional[FeatureSet] = None) -> SubmissionState:
        """
        Submit a FeatureSet for prediction.

        Args:
            features: Record to submit, defaults to the current form features

        Returns:
            The submission state this flow wrote
        """
        features = features if features is not None else self._state.features
        self._set_state(submission_started(self._state))

        try:
            response = await self.client.predict(features)
        except PredictionError as e:
            logger.warning(f"Submission failed: {e.user_message}")
            self._set_state(submission_failed(self._state, e.user_message))
            return self._state.submission

        outcome = interpret(response)
        logger.info(f"Submission succeeded: {outcome.category.value} ({outcome.probability})")
        self._set_state(submission_succeeded(self._state, outcome))
        return self._state.submission

    def submit_blocking(self, features: Optional[FeatureSet] = None) -> SubmissionState:
        """Run ``submit`` to completion for synchronous callers."""
        return asyncio.run(self.submit(features))
