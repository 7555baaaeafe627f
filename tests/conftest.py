from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Ensure project root on sys.path for module imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from churn_form.client.transport import PredictionClient  # noqa: E402
from churn_form.form.features import FeatureSet, default_features  # noqa: E402
from churn_form.session.controller import SubmissionController  # noqa: E402


@pytest.fixture()
def features() -> FeatureSet:
    return default_features()


@pytest.fixture()
def make_client() -> Callable[..., PredictionClient]:
    """Client whose requests are answered by ``handler`` instead of the network."""

    def _make(handler, **kwargs) -> PredictionClient:
        return PredictionClient(
            base_url="http://predict.test",
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make


@pytest.fixture()
def make_controller(make_client) -> Callable[..., SubmissionController]:
    """Controller wired to a mocked prediction service, recording every state."""

    def _make(handler, **kwargs) -> SubmissionController:
        controller = SubmissionController(make_client(handler), **kwargs)
        controller.history = [controller.state]
        controller.subscribe(controller.history.append)
        return controller

    return _make
