"""Session context shared by the controller and the view.

Writers:
- ``pending_input`` belongs to the input binding (and is cleared on submit)
- ``is_awaiting_response`` belongs to TurnController
- ``document`` belongs to whoever handles uploads
"""

from dataclasses import dataclass, field

from ..upload import CsvDocument
from .store import MessageClock, SessionStore


@dataclass
class SessionState:
    """Process-local state of one conversation."""

    store: SessionStore = field(default_factory=SessionStore)
    clock: MessageClock = field(default_factory=MessageClock)
    document: CsvDocument | None = None
    pending_input: str = ""
    is_awaiting_response: bool = False

    @property
    def has_document(self) -> bool:
        return self.document is not None

    def can_submit(self) -> bool:
        """Whether the input affordance should be enabled."""
        return self.has_document and not self.is_awaiting_response

    def reset(self) -> None:
        """Back to an empty conversation (the loaded CSV is kept)."""
        self.store.clear()
        self.pending_input = ""
