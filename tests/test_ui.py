"""Unit tests for the TUI module."""
import re
from datetime import datetime

import pytest
from textual.widgets import Input

from csvchat.session import Message, Role
from csvchat.ui import CsvChatApp, MessageView, build_transcript
from csvchat.ui.config import PENDING_KEY
from csvchat.ui.formatting import format_file_size, format_timestamp
from csvchat.ui.screens import OpenCsvScreen
from csvchat.ui.widgets import ChatInputBar, CsvStatusBar


class TestFormatting:
    """Tests for display formatting."""

    def test_timestamp_format(self):
        """Test the h:mm AM/PM shape."""
        assert re.fullmatch(r"(1[0-2]|[1-9]):[0-5]\d (AM|PM)", format_timestamp(1_700_000_000_000))

    def test_timestamp_matches_local_time(self):
        """Test that the displayed time is the local wall-clock time."""
        ms = 1_700_000_000_000
        moment = datetime.fromtimestamp(ms / 1000)
        hour, minute = format_timestamp(ms).split(" ")[0].split(":")

        assert int(hour) % 12 == moment.hour % 12
        assert int(minute) == moment.minute

    @pytest.mark.parametrize(("size", "expected"), [
        (10, "10 B"),
        (2048, "2.0 KB"),
        (3 * 1024 * 1024, "3.0 MB"),
    ])
    def test_file_size(self, size, expected):
        """Test human-readable sizes."""
        assert format_file_size(size) == expected


class TestBuildTranscript:
    """Tests for build_transcript."""

    def test_rows_keyed_by_timestamp(self, session):
        """Test one row per message, keyed by timestamp."""
        session.store.append(Message(role=Role.USER, content="q", timestamp=10))
        session.store.append(Message(role=Role.ASSISTANT, content="a", timestamp=20))

        entries = build_transcript(session)

        assert [e.key for e in entries] == ["10", "20"]
        assert [e.role for e in entries] == [Role.USER, Role.ASSISTANT]
        assert not any(e.pending for e in entries)

    def test_pending_row_while_awaiting(self, session):
        """Test that a placeholder row is added during a turn."""
        session.store.append(Message(role=Role.USER, content="q", timestamp=10))
        session.is_awaiting_response = True

        entries = build_transcript(session)

        assert entries[-1].key == PENDING_KEY
        assert entries[-1].pending
        assert entries[-1].role == Role.ASSISTANT


class TestCsvChatApp:
    """Tests for the Textual app."""

    @pytest.mark.asyncio
    async def test_input_disabled_without_csv(self, fake_provider):
        """Test that the input bar is disabled until a CSV is loaded."""
        app = CsvChatApp(provider=fake_provider())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(ChatInputBar).disabled

    @pytest.mark.asyncio
    async def test_turn_renders_messages(self, fake_provider, csv_document):
        """Test that a completed turn shows the question and the answer."""
        app = CsvChatApp(provider=fake_provider(), document=csv_document)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert not app.query_one(ChatInputBar).disabled

            outcome = await app.controller.submit("How many rows?")
            await pilot.pause()

            assert outcome is not None and outcome.succeeded
            views = list(app.query(MessageView))
            assert [v.entry.role for v in views] == [Role.USER, Role.ASSISTANT]
            assert not any(v.entry.pending for v in views)

    @pytest.mark.asyncio
    async def test_clear_chat(self, fake_provider, csv_document):
        """Test that clearing removes every message view."""
        app = CsvChatApp(provider=fake_provider(), document=csv_document)
        async with app.run_test() as pilot:
            await app.controller.submit("q")
            await pilot.pause()

            app.action_clear_chat()
            await pilot.pause()

            assert len(app.session.store) == 0
            assert len(app.query(MessageView)) == 0
            assert app.session.document is csv_document

    @pytest.mark.asyncio
    async def test_startup_shows_loaded_csv(self, fake_provider, csv_document):
        """Test that the app mounts and the status line names the preloaded CSV."""
        app = CsvChatApp(provider=fake_provider(), document=csv_document)
        async with app.run_test() as pilot:
            await pilot.pause()

            status = app.query_one("#csv-status", CsvStatusBar)
            assert status.has_class("loaded")
            assert app.query_one("#chat-empty").display

    @pytest.mark.asyncio
    async def test_open_csv_dialog_loads_file(self, fake_provider, tmp_path, sample_csv_text):
        """Test that a path entered in the open dialog becomes the session CSV."""
        path = tmp_path / "sales.csv"
        path.write_text(sample_csv_text, encoding="utf-8")
        app = CsvChatApp(provider=fake_provider())
        async with app.run_test() as pilot:
            await pilot.pause()
            app.action_open_csv()
            await pilot.pause()

            assert isinstance(app.screen, OpenCsvScreen)
            app.screen.query_one("#open-path", Input).value = str(path)
            await pilot.press("enter")
            await pilot.pause()

            assert not isinstance(app.screen, OpenCsvScreen)
            assert app.session.document is not None
            assert app.session.document.name == "sales.csv"
            assert not app.query_one(ChatInputBar).disabled
