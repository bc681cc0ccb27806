# ABOUTME: Species chat assistant backed by Groq's OpenAI-compatible completions API
# ABOUTME: Stateless single-turn proxy: fixed system prompt plus the user's question

from typing import Any

import httpx

from species_catalog.config import get_config
from species_catalog.utils.logging import get_logger, log_api_call
from species_catalog.utils.retry import ChatServiceError, chat_retrying, convert_http_error

SYSTEM_PROMPT = (
    "You are a specialized species chatbot that answers questions about animals, plants, and other "
    "living organisms. You provide information about their habitat, diet, conservation status, behavior, "
    "and other relevant biological details. If asked about non-species related topics, politely redirect "
    "the conversation back to species-related questions. Keep responses informative but concise."
)

FALLBACK_ANSWER = "Sorry could not generate a response"


class SpeciesChatService:
    """Service for the species chat assistant."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        api_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        max_attempts: int | None = None,
        retry_wait: float = 1.0,
    ):
        config = get_config()
        # Missing key is reported at call time so the app can still start
        self.api_key = api_key if api_key is not None else config.groq_api_key
        self.model = model or config.groq_model
        self.api_url = api_url or config.groq_api_url
        self.max_attempts = max_attempts or config.chat_max_attempts
        self.retry_wait = retry_wait
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient()
        self.logger = get_logger(__name__)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def generate_response(self, question: str) -> str:
        """Answer a species question.

        Raises:
            ChatServiceError: If the key is missing or the API call ultimately fails
        """
        if not self.api_key:
            raise ChatServiceError("Groq API key not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": question},
            ],
        }

        async for attempt in chat_retrying(
            max_attempts=self.max_attempts,
            min_wait=self.retry_wait,
            max_wait=self.retry_wait * 10,
            multiplier=self.retry_wait * 2,
        ):
            with attempt:
                data = await self._complete(payload)

        return _first_choice_content(data) or FALLBACK_ANSWER

    @log_api_call("groq.chat_completions")
    async def _complete(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self.http_client.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise convert_http_error(e) from e
        except ValueError as e:
            raise ChatServiceError(f"Chat API returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ChatServiceError("Chat API returned an unexpected payload")
        return data


def _first_choice_content(data: dict[str, Any]) -> str | None:
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None
