"""States and results of a question/answer turn."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..session.models import Message


class TurnState(str, Enum):
    """Lifecycle of a turn: IDLE -> SUBMITTING -> RESOLVED | FAILED -> IDLE."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    RESOLVED = "resolved"
    FAILED = "failed"


class TurnOutcome(BaseModel):
    """What a completed turn appended to the session."""

    model_config = ConfigDict(frozen=True)

    state: TurnState
    question: Message
    answer: Message
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == TurnState.RESOLVED
