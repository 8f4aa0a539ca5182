"""Chat session module for csvchat.

Holds the ordered message history and the per-session context.
"""

from .models import Message, Role
from .state import SessionState
from .store import MessageClock, SessionStore

__all__ = [
    "Message",
    "MessageClock",
    "Role",
    "SessionState",
    "SessionStore",
]
