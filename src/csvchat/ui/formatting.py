"""Text formatting utilities for the TUI.

Hides the details of timestamp display and message headers.
"""

from datetime import datetime

from rich.text import Text


def format_timestamp(timestamp_ms: int) -> str:
    """Format a millisecond timestamp as local ``h:mm AM/PM``."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000)
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_header(label: str, timestamp_ms: int | None) -> Text:
    """Header line for a chat message: label followed by the time."""
    header = Text(label, style="bold")
    if timestamp_ms is not None:
        header.append(f"  {format_timestamp(timestamp_ms)}", style="dim")
    return header


def format_file_size(size: int) -> str:
    """Human-readable character count of a loaded file."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
