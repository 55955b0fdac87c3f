from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class GenerationError(RuntimeError):
    """A provider rejected, failed or timed out a completion request."""

    def __init__(self, message: str, *, code: str = "provider_error", status_code: int = 502):
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class AIClient(Protocol):
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> str: ...
