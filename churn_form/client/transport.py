"""
Prediction Transport
====================

Single-shot HTTP call to the remote churn prediction service.
"""

from typing import Optional

import httpx
from loguru import logger
from pydantic import BaseModel, Field

from config import get_config
from churn_form.errors import DecodeError, HttpStatusError, TransportError
from churn_form.form.features import FeatureSet, to_payload

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_PREDICT_PATH = "/predict"


class PredictionResponse(BaseModel):
    """Schema for the prediction service response body."""

    prediction: str = Field(..., description="Churn label, 'Yes' or 'No'")
    probability: float = Field(..., description="Probability of churn")


class PredictionClient:
    """Posts a FeatureSet to the prediction endpoint and decodes the answer."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        predict_path: str = DEFAULT_PREDICT_PATH,
        timeout: Optional[float] = None,
        retries: int = 0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize PredictionClient.

        Args:
            base_url: Prediction service address
            predict_path: Path of the predict endpoint
            timeout: Seconds before giving up, None to wait indefinitely
            retries: Connection-level retries performed by the transport
            transport: Alternative httpx transport, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.predict_path = predict_path
        self.timeout = timeout
        self.retries = retries
        self._transport = transport

    @classmethod
    def from_config(cls, config: Optional[dict] = None, **kwargs) -> "PredictionClient":
        """Build a client from the ``api`` section of the configuration."""
        config = config if config is not None else get_config()
        api_config = config.get("api", {})

        return cls(
            base_url=api_config.get("url", DEFAULT_API_URL),
            predict_path=api_config.get("predict_path", DEFAULT_PREDICT_PATH),
            timeout=api_config.get("timeout"),
            retries=api_config.get("retries", 0) or 0,
            **kwargs,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{self.predict_path}"

    def _client(self) -> httpx.AsyncClient:
        transport = self._transport or httpx.AsyncHTTPTransport(retries=self.retries)
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
            # status is checked on the final response after redirects
            follow_redirects=True,
        )

    async def predict(self, features: FeatureSet) -> PredictionResponse:
        """
        Request a churn prediction.

        Args:
            features: Complete feature record

        Returns:
            Decoded response body

        Raises:
            TransportError: No response was received
            HttpStatusError: The service answered with a non-2xx status
            DecodeError: The body is not ``{prediction, probability}``
        """
        payload = to_payload(features)
        logger.info(f"Requesting prediction from {self.endpoint}")

        try:
            async with self._client() as client:
                response = await client.post(
                    self.predict_path,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.warning(f"Prediction request failed: {e!r}")
            raise TransportError(str(e)) from e

        if not response.is_success:
            logger.warning(f"Prediction service returned status {response.status_code}")
            raise HttpStatusError(response.status_code, detail=response.text)

        try:
            result = PredictionResponse.model_validate(response.json())
        except ValueError as e:
            logger.warning(f"Could not decode prediction response: {e}")
            raise DecodeError(str(e)) from e

        logger.info(f"Received prediction={result.prediction!r} probability={result.probability}")
        return result
