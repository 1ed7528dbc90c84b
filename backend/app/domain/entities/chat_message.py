"""Chat completion value objects shared by the LLM adapters."""

from dataclasses import dataclass, field
from typing import Literal

Role = Literal["system", "user", "assistant"]


@dataclass
class ChatMessage:
    role: Role
    content: str = ""

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class ChatCompletionResult:
    """One non-streaming completion; ``content`` is the first choice's text."""

    model: str
    content: str
    finish_reason: str = "stop"
    usage: TokenUsage = field(default_factory=TokenUsage)
    provider: str = ""
