"""Modal screens for the TUI.

This module hides the design decisions about:
- How a CSV path is asked for
- Dialog appearance (CSS, layout)
- Keyboard shortcuts for dialogs
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static


class OpenCsvScreen(ModalScreen[str | None]):
    """Modal dialog asking for the path of a CSV file.

    Dismisses with the entered path, or None when cancelled.
    """

    CSS = """
    OpenCsvScreen {
        align: center middle;
        background: $background 70%;
    }

    #open-dialog {
        width: 70;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #open-title {
        width: 100%;
        height: auto;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #open-path {
        margin-bottom: 1;
    }

    #open-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #open-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, initial: str = "") -> None:
        super().__init__()
        self._initial = initial

    def compose(self) -> ComposeResult:
        with Vertical(id="open-dialog"):
            yield Static("Open CSV File", id="open-title")
            yield Input(value=self._initial, placeholder="path/to/data.csv", id="open-path")
            with Horizontal(id="open-buttons"):
                yield Button("Open", id="btn-open", variant="success")
                yield Button("Cancel", id="btn-cancel", variant="error")

    def on_mount(self) -> None:
        self.query_one("#open-path", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._accept(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-open":
            self._accept(self.query_one("#open-path", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _accept(self, value: str) -> None:
        path = value.strip()
        self.dismiss(path or None)
