"""Request model for the answer provider."""

from pydantic import BaseModel, ConfigDict, Field

from ..session.models import Message


class AnswerRequest(BaseModel):
    """Everything the provider needs to answer one question."""

    model_config = ConfigDict(frozen=True)

    document: str = Field(description="Raw CSV text")
    question: str = Field(description="The user's question")
    history: tuple[Message, ...] = Field(
        default_factory=tuple,
        description="Prior turns, oldest first, excluding this question"
    )
