"""Answer provider backed by a chat-completion LLM.

Hidden design decisions:
- The system prompt carries the document format contract
- Prior turns are replayed as plain chat history
- The CSV text travels only in the newest user message
"""

import logging

from ..errors import ProviderError
from ..llm import ChatMessage, LLMProvider
from ..prompts import get_system_prompt
from ..session.models import Message
from .base import AnswerProvider
from .models import AnswerRequest

logger = logging.getLogger(__name__)

QUESTION_TEMPLATE = """Here is the CSV data to analyze:

```csv
{document}
```

Question: {question}"""


def build_messages(request: AnswerRequest, system_prompt: str) -> list[ChatMessage]:
    """Convert a request into the chat transcript sent to the model."""
    messages = [ChatMessage(role="system", content=system_prompt)]
    messages.extend(_history_message(m) for m in request.history)
    messages.append(ChatMessage(
        role="user",
        content=QUESTION_TEMPLATE.format(
            document=request.document.rstrip("\n"),
            question=request.question.strip(),
        ),
    ))
    return messages


def _history_message(message: Message) -> ChatMessage:
    return ChatMessage(role=message.role.value, content=message.content)


class LLMAnswerProvider(AnswerProvider):
    """Answers questions with an LLMProvider."""

    def __init__(
        self,
        llm: LLMProvider,
        system_prompt: str | None = None,
        temperature: float = 0.3,
        max_tokens: int | None = None,
    ):
        self._llm = llm
        self._system_prompt = system_prompt
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        return self._llm.model

    @property
    def system_prompt(self) -> str:
        if self._system_prompt is None:
            self._system_prompt = get_system_prompt()
        return self._system_prompt

    async def answer(self, request: AnswerRequest) -> str:
        messages = build_messages(request, self.system_prompt)
        logger.info(
            "Requesting answer (%d history message(s), %d CSV characters)",
            len(request.history),
            len(request.document),
        )
        response = await self._llm.chat_completion(
            messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        if not response.content.strip():
            raise ProviderError("Model returned an empty response")
        if response.usage:
            logger.debug("Token usage: %s", response.usage)
        return response.content

    async def close(self) -> None:
        await self._llm.close()
