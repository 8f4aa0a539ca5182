"""Data models for the TUI.

Hides how the session is turned into rows of the chat history: one row per
message plus a placeholder row while a turn is in flight.
"""

from dataclasses import dataclass

from ..session import Role, SessionState
from .config import PENDING_KEY


@dataclass(frozen=True)
class TranscriptEntry:
    """A row of the chat history."""

    key: str
    role: Role
    content: str
    timestamp: int | None = None
    pending: bool = False


def build_transcript(state: SessionState) -> list[TranscriptEntry]:
    """Rows to display for the current session, oldest first."""
    entries = [
        TranscriptEntry(
            key=str(message.timestamp),
            role=message.role,
            content=message.content,
            timestamp=message.timestamp,
        )
        for message in state.store.messages
    ]
    if state.is_awaiting_response:
        entries.append(TranscriptEntry(
            key=PENDING_KEY,
            role=Role.ASSISTANT,
            content="",
            pending=True,
        ))
    return entries
