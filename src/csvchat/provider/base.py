"""Abstract answer provider.

The provider turns (CSV text, question, history) into a response document.
The abstraction hides:
- Which model answers and how it is called
- How the CSV and history are presented to the model
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import AnswerRequest


class AnswerProvider(ABC):
    """Single-call request/response boundary for one turn."""

    @abstractmethod
    async def answer(self, request: AnswerRequest) -> str:
        """Produce a response document.

        Args:
            request: CSV text, question and prior history

        Returns:
            Markdown document, optionally with ``chart`` fences

        Raises:
            QuotaExceededError: If the upstream service is rate limited
            ProviderError: For any other provider-level failure
        """

    async def close(self) -> None:
        """Release any held resources."""

    async def __aenter__(self) -> "AnswerProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
