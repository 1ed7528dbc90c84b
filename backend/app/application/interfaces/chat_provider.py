"""Abstract chat provider interface (port) used by the product LLM client."""

from abc import ABC, abstractmethod

from app.domain.entities import ChatCompletionResult, ChatMessage


class ChatProvider(ABC):
    """An OpenAI-style chat completion backend, such as Groq."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short name used in errors and logs (e.g. 'groq')."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        """Return a single, non-streamed completion of ``messages``.

        Options left as ``None`` are not sent, so the provider default applies.

        Raises:
            ServiceProviderError: On a missing API key, an error status, or
                a transport failure.
        """
        ...
