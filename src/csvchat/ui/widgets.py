"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering (user text as-is, assistant text as documents)
- Keyed reconciliation of the chat history against the session
- Input enable/disable and draft synchronisation
- CSV status display
"""

from rich.console import Group
from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Static, TextArea

from ..document import DocumentRenderer
from ..session import Role
from ..upload import CsvDocument
from .config import (
    ASSISTANT_LABEL,
    EMPTY_CHAT_TEXT,
    EMPTY_CHAT_WITH_CSV_TEXT,
    INPUT_DISABLED_PLACEHOLDER,
    INPUT_PLACEHOLDER,
    TYPING_PLACEHOLDER,
    USER_LABEL,
)
from .formatting import format_file_size, format_header
from .models import TranscriptEntry


class MessageView(Vertical):
    """One chat message; clicking it copies the raw content."""

    def __init__(self, entry: TranscriptEntry, renderer: DocumentRenderer, **kwargs) -> None:
        role_class = "user-message" if entry.role == Role.USER else "assistant-message"
        classes = f"chat-message {role_class}"
        if entry.pending:
            classes += " pending-message"
        super().__init__(classes=classes, **kwargs)
        self.entry = entry
        self._renderer = renderer

    def compose(self):
        label = USER_LABEL if self.entry.role == Role.USER else ASSISTANT_LABEL
        yield Static(format_header(label, self.entry.timestamp), classes="message-header")

        if self.entry.pending:
            yield Static(Text(TYPING_PLACEHOLDER, style="italic"), classes="message-content typing")
        elif self.entry.role == Role.USER:
            # Plain text; user input is never interpreted as markup
            yield Static(Text(self.entry.content), classes="message-content")
        else:
            body = Group(*self._renderer.render(self.entry.content))
            yield Static(body, classes="message-content")

    def on_click(self, event: Click) -> None:
        """Copy message content to the clipboard."""
        event.stop()
        if self.entry.pending:
            return
        self.app.copy_to_clipboard(self.entry.content)
        self.app.notify("Copied to clipboard", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history, reconciled against the session by message key."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, renderer: DocumentRenderer | None = None, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._renderer = renderer or DocumentRenderer()
        self._views: dict[str, MessageView] = {}
        self._empty = Static(EMPTY_CHAT_TEXT, id="chat-empty")

    def compose(self):
        yield self._empty

    def sync(self, entries: list[TranscriptEntry], has_document: bool) -> None:
        """Mount rows that are new and remove rows that are gone.

        Existing rows are keyed by timestamp and never re-rendered. The
        placeholder row is always re-mounted so it stays last.
        """
        wanted = {entry.key for entry in entries if not entry.pending}
        for key, view in list(self._views.items()):
            if view.entry.pending or key not in wanted:
                view.remove()
                del self._views[key]

        added = False
        for entry in entries:
            if entry.key in self._views:
                continue
            view = MessageView(entry, self._renderer)
            self._views[entry.key] = view
            self.mount(view)
            added = True

        self._empty.display = not entries
        self._empty.update(EMPTY_CHAT_WITH_CSV_TEXT if has_document else EMPTY_CHAT_TEXT)

        count = sum(1 for entry in entries if not entry.pending)
        self.border_subtitle = f"{count} messages" if count else "Conversation history"
        if added:
            self.scroll_end(animate=False)

    @property
    def message_count(self) -> int:
        return sum(1 for view in self._views.values() if not view.entry.pending)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class DraftChanged(Message):
        """Message sent whenever the draft text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.placeholder = INPUT_PLACEHOLDER

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        self.post_message(self.DraftChanged(event.text_area.text))

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self.disabled:
            return
        value = self.query_one("#chat-input", TextArea).text
        if not value.strip():
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
        self._history_index = -1
        self.post_message(self.Submitted(value))

    def set_text(self, value: str) -> None:
        """Replace the draft without moving through history."""
        text_area = self.query_one("#chat-input", TextArea)
        if text_area.text != value:
            text_area.text = value

    def set_enabled(self, enabled: bool, has_document: bool = True) -> None:
        """Enable or disable typing and sending."""
        self.disabled = not enabled
        text_area = self.query_one("#chat-input", TextArea)
        text_area.placeholder = INPUT_PLACEHOLDER if has_document else INPUT_DISABLED_PLACEHOLDER

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class CsvStatusBar(Static):
    """One-line summary of the loaded CSV."""

    def show_document(self, document: CsvDocument | None) -> None:
        if document is None:
            self.update(Text.assemble(
                ("No CSV loaded", "bold"),
                ("  press Ctrl+O to open a file", "dim"),
            ))
            self.remove_class("loaded")
            return
        self.update(Text.assemble(
            ("CSV ", "dim"),
            (document.name, "bold"),
            (f"  {document.row_count:,} rows, {format_file_size(document.size)}", "dim"),
        ))
        self.add_class("loaded")
