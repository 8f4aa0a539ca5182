"""Terminal UI module for csvchat.

Provides a Textual-based TUI over a chat session.

Module structure (each module hides a design decision):
- models.py: Transcript rows derived from the session
- widgets.py: Custom widgets (message views, history, input bar, status line)
- formatting.py: Timestamp and header formatting
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (open CSV)
- app.py: Application orchestration (user interaction flow)
"""

from .app import CsvChatApp, run_textual_tui
from .models import TranscriptEntry, build_transcript
from .widgets import ChatHistoryWidget, ChatInputBar, CsvStatusBar, MessageView

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "CsvChatApp",
    "CsvStatusBar",
    "MessageView",
    "TranscriptEntry",
    "build_transcript",
    "run_textual_tui",
]
