"""Groq API client: implements the ChatProvider interface.

Groq exposes an OpenAI-compatible ``/chat/completions`` endpoint; this
adapter talks to it with httpx.
"""

import logging

import httpx

from app.application.interfaces.chat_provider import ChatProvider
from app.domain.entities import ChatCompletionResult, ChatMessage, TokenUsage
from app.domain.exceptions import ServiceProviderError

logger = logging.getLogger(__name__)


class GroqClient(ChatProvider):
    """Infrastructure adapter: connects to the Groq API.

    An ``http_client`` may be injected (tests use ``httpx.MockTransport``);
    otherwise a short-lived client is created per call.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "groq"

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> dict:
        payload: dict = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return payload

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        """Send a non-streaming chat completion to Groq."""
        if not self._api_key:
            raise ServiceProviderError(self.provider_name, 401, "GROQ_API_KEY is not configured")

        payload = self._build_payload(
            messages, model, temperature=temperature, max_tokens=max_tokens
        )
        url = f"{self._base_url}/chat/completions"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(url, headers=self._get_headers(), json=payload)

            if response.status_code != 200:
                self._raise_provider_error(response)

            return self._parse_completion_response(response.json())
        except httpx.HTTPError as e:
            raise ServiceProviderError(self.provider_name, 503, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

    def _parse_completion_response(self, data: dict) -> ChatCompletionResult:
        """Parse the Groq JSON response into a domain entity."""
        if "error" in data:
            error = data["error"]
            raise ServiceProviderError(
                provider=self.provider_name,
                status_code=500,
                message=error.get("message", "Unknown error"),
            )

        choices = data.get("choices", [])
        if not choices:
            raise ServiceProviderError(
                provider=self.provider_name,
                status_code=500,
                message="No choices in response",
            )

        choice = choices[0]
        message = choice.get("message", {})
        usage_data = data.get("usage", {})

        result = ChatCompletionResult(
            model=data.get("model", ""),
            content=message.get("content", "") or "",
            finish_reason=choice.get("finish_reason", "stop") or "stop",
            usage=TokenUsage(
                prompt_tokens=usage_data.get("prompt_tokens", 0),
                completion_tokens=usage_data.get("completion_tokens", 0),
                total_tokens=usage_data.get("total_tokens", 0),
            ),
            provider=self.provider_name,
        )
        logger.debug(
            "Groq completion: model=%s tokens=%d", result.model, result.usage.total_tokens
        )
        return result

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Raise ServiceProviderError from a non-200 httpx Response."""
        try:
            data = response.json()
            error = data.get("error", {})
            message = error.get("message", response.text)
        except ValueError:
            message = response.text

        raise ServiceProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
