"""Unit tests for the session module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from csvchat.errors import DuplicateTimestampError
from csvchat.session import Message, MessageClock, Role, SessionState, SessionStore


def make_message(timestamp: int, role: Role = Role.USER, content: str = "hi") -> Message:
    return Message(role=role, content=content, timestamp=timestamp)


class TestMessage:
    """Tests for the Message model."""

    def test_message_is_frozen(self):
        """Test that messages cannot be edited."""
        message = make_message(1)
        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore[misc]

    def test_negative_timestamp_fails(self):
        """Test that timestamps must be non-negative."""
        with pytest.raises(ValidationError):
            make_message(-1)

    def test_role_values(self):
        """Test role enum values."""
        assert Role.USER == "user"
        assert Role.ASSISTANT == "assistant"


class TestMessageClock:
    """Tests for MessageClock."""

    def test_reads_wall_clock_in_ms(self):
        """Test conversion from seconds to milliseconds."""
        clock = MessageClock(source=lambda: 1.5)
        assert clock.now() == 1500

    def test_same_millisecond_is_bumped(self):
        """Test that a repeated reading still yields a new value."""
        clock = MessageClock(source=lambda: 10.0)
        assert [clock.now() for _ in range(3)] == [10000, 10001, 10002]

    @given(st.lists(st.floats(min_value=0, max_value=1e10), min_size=1, max_size=50))
    def test_strictly_increasing(self, readings: list[float]):
        """Property test: timestamps increase even if the wall clock does not."""
        clock = MessageClock(source=iter(readings).__next__)
        stamps = [clock.now() for _ in readings]

        assert all(a < b for a, b in zip(stamps, stamps[1:]))


class TestSessionStore:
    """Tests for SessionStore."""

    def test_starts_empty(self):
        """Test a new store."""
        store = SessionStore()

        assert store.messages == ()
        assert len(store) == 0
        assert store.last() is None

    def test_append_preserves_order(self):
        """Test that messages keep insertion order."""
        store = SessionStore()
        first = make_message(1)
        second = make_message(2, Role.ASSISTANT, "answer")

        store.append(first)
        store.append(second)

        assert store.messages == (first, second)
        assert store.last() == second
        assert len(store) == 2

    def test_duplicate_timestamp_rejected(self):
        """Test that a reused timestamp is refused and nothing changes."""
        store = SessionStore()
        store.append(make_message(5))

        with pytest.raises(DuplicateTimestampError):
            store.append(make_message(5, Role.ASSISTANT))

        assert len(store) == 1

    def test_duplicate_is_value_error(self):
        """Test that the duplicate error is also a ValueError."""
        assert issubclass(DuplicateTimestampError, ValueError)

    def test_snapshot_is_not_affected_by_later_appends(self):
        """Test that an earlier snapshot keeps its contents."""
        store = SessionStore()
        store.append(make_message(1))
        snapshot = store.snapshot()

        store.append(make_message(2))

        assert len(snapshot) == 1
        assert len(store.snapshot()) == 2

    def test_clear(self):
        """Test that clear removes all messages and frees timestamps."""
        store = SessionStore()
        store.append(make_message(1))
        store.append(make_message(2))

        store.clear()

        assert store.messages == ()
        store.append(make_message(1))
        assert len(store) == 1

    def test_listeners_receive_history(self):
        """Test that listeners see every change."""
        store = SessionStore()
        seen = []
        store.subscribe(seen.append)

        store.append(make_message(1))
        store.append(make_message(2))
        store.clear()

        assert [len(history) for history in seen] == [1, 2, 0]

    def test_unsubscribe(self):
        """Test that an unsubscribed listener is not called."""
        store = SessionStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        store.append(make_message(1))

        assert seen == []

    @given(st.lists(st.integers(min_value=0, max_value=10_000), max_size=30))
    def test_append_only(self, timestamps: list[int]):
        """Property test: accepted messages form a growing prefix-stable history."""
        store = SessionStore()
        previous: tuple[Message, ...] = ()
        for ts in timestamps:
            try:
                store.append(make_message(ts))
            except DuplicateTimestampError:
                assert store.messages == previous
                continue
            assert store.messages[:-1] == previous
            previous = store.messages

        assert len({m.timestamp for m in store.messages}) == len(store)


class TestSessionState:
    """Tests for SessionState."""

    def test_can_submit_requires_document(self, clock):
        """Test that submission needs a loaded CSV."""
        state = SessionState(clock=clock)
        assert not state.has_document
        assert not state.can_submit()

    def test_can_submit_blocked_while_awaiting(self, session):
        """Test that submission is blocked during a turn."""
        assert session.can_submit()
        session.is_awaiting_response = True
        assert not session.can_submit()

    def test_reset_keeps_document(self, session):
        """Test that reset clears history and draft but keeps the CSV."""
        session.store.append(make_message(1))
        session.pending_input = "draft"

        session.reset()

        assert len(session.store) == 0
        assert session.pending_input == ""
        assert session.document is not None
