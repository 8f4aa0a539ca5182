"""Question/answer turn orchestration."""

from .controller import (
    GENERIC_ERROR_REPLY,
    QUOTA_EXCEEDED_REPLY,
    TurnController,
    failure_reply,
)
from .models import TurnOutcome, TurnState

__all__ = [
    "GENERIC_ERROR_REPLY",
    "QUOTA_EXCEEDED_REPLY",
    "TurnController",
    "TurnOutcome",
    "TurnState",
    "failure_reply",
]
