"""Main Textual TUI application.

Binds a SessionState to the screen: the view re-renders from the session on
every store change and every turn transition, and never writes
``is_awaiting_response`` itself.
"""

import asyncio
import logging

from rich.markup import escape
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..document import DocumentRenderer
from ..errors import UploadError
from ..provider import AnswerProvider
from ..session import Role, SessionState
from ..turns import TurnController, TurnState
from ..upload import CsvDocument, load_csv
from .config import THEME_NAME
from .models import build_transcript
from .screens import OpenCsvScreen
from .styles import APP_CSS
from .themes import CSVCHAT_DARK
from .widgets import ChatHistoryWidget, ChatInputBar, CsvStatusBar

logger = logging.getLogger(__name__)


class CsvChatApp(App):
    """Textual TUI for chatting about a CSV file."""

    CSS = APP_CSS
    TITLE = "CSV Chat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+o", "open_csv", "Open CSV"),
        Binding("ctrl+u", "unload_csv", "Unload CSV"),
        Binding("ctrl+k", "clear_chat", "Clear Chat"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(
        self,
        provider: AnswerProvider,
        document: CsvDocument | None = None,
        session: SessionState | None = None,
        renderer: DocumentRenderer | None = None,
        subtitle: str | None = None,
    ) -> None:
        super().__init__()
        self.session = session or SessionState()
        if document is not None:
            self.session.document = document
        self.controller = TurnController(self.session, provider)
        self._renderer = renderer or DocumentRenderer()
        self._subtitle = subtitle
        self._view_ready = False

        self.session.store.subscribe(lambda _messages: self.refresh_view())
        self.controller.subscribe(self._on_turn_state)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield CsvStatusBar(id="csv-status")
        yield ChatHistoryWidget(self._renderer, id="chat-history")
        with Vertical(id="bottom-bar"):
            yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(CSVCHAT_DARK)
        self.theme = THEME_NAME
        if self._subtitle:
            self.sub_title = self._subtitle
        self._view_ready = True
        self.refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def refresh_view(self) -> None:
        """Re-derive every widget from the session."""
        if not self._view_ready:
            return
        session = self.session
        self.query_one("#csv-status", CsvStatusBar).show_document(session.document)
        self.query_one("#chat-history", ChatHistoryWidget).sync(
            build_transcript(session), session.has_document
        )
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_enabled(session.can_submit(), session.has_document)
        input_bar.set_text(session.pending_input)

    def _on_turn_state(self, state: TurnState) -> None:
        logger.debug("Turn state: %s", state.value)
        self.refresh_view()
        if state == TurnState.IDLE and self._view_ready:
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_chat_input_bar_draft_changed(self, event: ChatInputBar.DraftChanged) -> None:
        self.session.pending_input = event.value

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self.session.pending_input = event.value
        self._run_turn()

    @work(group="turns")
    async def _run_turn(self) -> None:
        """Run one turn as a background async worker.

        A second worker started while a turn is in flight returns at once:
        the controller ignores the submission.
        """
        outcome = await self.controller.submit()
        if outcome is not None and not outcome.succeeded:
            self.notify(f"Error: {escape((outcome.error or '')[:80])}", severity="error", timeout=5)

    def load_document(self, path: str) -> bool:
        """Load a CSV into the session, reporting problems as notifications."""
        try:
            document = load_csv(path)
        except UploadError as e:
            logger.warning("CSV load failed: %s", e)
            self.notify(escape(str(e)), severity="error", timeout=5)
            return False
        self.session.document = document
        self.refresh_view()
        self.notify(f"Loaded {escape(document.name)}", timeout=3)
        return True

    def action_open_csv(self) -> None:
        """Ask for a CSV path and load it."""
        def _on_path(path: str | None) -> None:
            if path:
                self.load_document(path)

        self.push_screen(OpenCsvScreen(), _on_path)

    def action_unload_csv(self) -> None:
        """Forget the loaded CSV."""
        if self.session.document is None:
            self.notify("No CSV loaded", severity="warning", timeout=2)
            return
        self.session.document = None
        self.refresh_view()
        self.notify("CSV unloaded", timeout=2)

    def action_clear_chat(self) -> None:
        """Clear the chat history."""
        self.session.reset()
        self.refresh_view()
        self.notify("Chat cleared", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        for message in reversed(self.session.store.messages):
            if message.role == Role.ASSISTANT:
                self.copy_to_clipboard(message.content)
                self.notify("Response copied")
                return
        self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    provider: AnswerProvider,
    document: CsvDocument | None = None,
    subtitle: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        provider: Answer provider used for every turn (closed on exit)
        document: CSV to preload, if any
        subtitle: Text shown under the title, e.g. the model name
    """
    app = CsvChatApp(provider=provider, document=document, subtitle=subtitle)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await provider.close()
