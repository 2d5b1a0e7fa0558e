"""OpenAI price suggester adapter."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from openai import OpenAI, OpenAIError

from autolink.domain.errors import ExternalServiceError
from autolink.domain.pricing import PriceSuggestion, PriceSuggestionRequest
from autolink.ports.price_suggester import PriceSuggester

logger = logging.getLogger(__name__)

SERVICE_NAME = "openai"

SYSTEM_PROMPT = (
    "You are an expert car appraiser. Given the details of a car, you will suggest "
    "a competitive listing price in US dollars and explain your reasoning. "
    'Reply with a JSON object: {"suggestedPrice": <number>, "reasoning": <string>}.'
)


class PriceSuggestionUnavailable(ExternalServiceError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(SERVICE_NAME, message, **context)


def build_user_prompt(request: PriceSuggestionRequest) -> str:
    return "\n".join(
        [
            f"Make: {request.make}",
            f"Model: {request.model}",
            f"Year: {request.year}",
            f"Mileage: {request.mileage}",
            f"Condition: {request.condition.value}",
            f"Additional Details: {request.additional_details or ''}",
            "",
            "Suggest a listing price and explain your reasoning. "
            "The suggested price should be in US dollars.",
        ]
    )


def parse_suggestion(content: str) -> PriceSuggestion:
    """
    Parse the model's JSON reply.

    Raises:
        PriceSuggestionUnavailable: If the reply is not the expected object
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise PriceSuggestionUnavailable("Price suggestion reply was not valid JSON") from e

    if not isinstance(payload, dict):
        raise PriceSuggestionUnavailable("Price suggestion reply was not a JSON object")

    raw_price = payload.get("suggestedPrice")
    reasoning = payload.get("reasoning")

    # bool is an int subclass; reject it explicitly
    if isinstance(raw_price, bool) or not isinstance(raw_price, (int, float, str)):
        raise PriceSuggestionUnavailable("Price suggestion reply has no numeric suggestedPrice")
    try:
        price = Decimal(str(raw_price))
    except InvalidOperation as e:
        raise PriceSuggestionUnavailable(
            "Price suggestion reply has no numeric suggestedPrice"
        ) from e
    if not price.is_finite() or price < 0:
        raise PriceSuggestionUnavailable("Price suggestion reply has an invalid suggestedPrice")

    if not isinstance(reasoning, str) or not reasoning.strip():
        raise PriceSuggestionUnavailable("Price suggestion reply has no reasoning")

    return PriceSuggestion(
        suggested_price=price.quantize(Decimal("0.01")),
        reasoning=reasoning.strip(),
    )


class OpenAIPriceSuggester(PriceSuggester):
    """Price suggester backed by the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout_seconds: float = 10,
        client: OpenAI | None = None,
    ) -> None:
        """
        Initialize the suggester.

        Args:
            api_key: OpenAI API key
            model: Chat model name
            timeout_seconds: Request timeout; a timeout is reported as a provider failure
            client: Pre-built client (tests)
        """
        if not api_key and client is None:
            raise ValueError("OpenAI API key is required")

        self._model = model
        self._client = client or OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,  # No automatic retries
        )

    def suggest(self, request: PriceSuggestionRequest) -> PriceSuggestion:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(request)},
        ]

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                response_format={"type": "json_object"},
                temperature=0.2,
                max_tokens=400,
            )
        except OpenAIError as e:
            logger.warning(
                "Price suggestion call failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise PriceSuggestionUnavailable(f"Price suggestion call failed: {e}") from e

        if not response.choices or response.choices[0].message.content is None:
            raise PriceSuggestionUnavailable("Empty response from price suggestion service")

        return parse_suggestion(response.choices[0].message.content)
