"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when one or more field rules are violated.

    All violations are collected before raising, so ``errors`` holds one
    message per offending field and the exception message joins them.
    """

    def __init__(self, errors: dict[str, str] | list[str]):
        if isinstance(errors, dict):
            self.errors = dict(errors)
            messages = list(errors.values())
        else:
            self.errors = {str(i): message for i, message in enumerate(errors)}
            messages = list(errors)
        self.messages = messages
        super().__init__(", ".join(messages))


class TransientServiceError(Exception):
    """Raised for a temporary failure (simulated or from an external call)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ServiceProviderError(Exception):
    """Raised when a third-party service returns an error.

    Provider-agnostic: works for Groq, Browse AI, SerpAPI, remove.bg, Cloudinary.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class TaskTimeoutError(TimeoutError):
    """Raised when a bounded polling loop runs out of attempts."""

    def __init__(self, provider: str, attempts: int):
        self.provider = provider
        self.attempts = attempts
        super().__init__(f"[{provider}] task did not finish after {attempts} attempts")


class UnsupportedInputError(Exception):
    """Raised when an input is rejected before any work starts."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(reason)


class MalformedReplyError(Exception):
    """Raised when an LLM reply cannot be decoded into the expected schema."""

    def __init__(self, stage: str, reply_excerpt: str):
        self.stage = stage
        self.reply_excerpt = reply_excerpt
        super().__init__(f"Malformed {stage} reply: {reply_excerpt[:200]}")
