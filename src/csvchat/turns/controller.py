"""Turn orchestration.

Hidden design decisions:
- One turn in flight at a time, enforced here rather than by the UI
- Provider failures never escape; they become an assistant message
- History sent to the provider excludes the question being asked
"""

import asyncio
import logging
from collections.abc import Callable

from ..errors import ProviderError, QuotaExceededError
from ..provider import AnswerProvider, AnswerRequest
from ..session.models import Message, Role
from ..session.state import SessionState
from .models import TurnOutcome, TurnState

logger = logging.getLogger(__name__)

QUOTA_EXCEEDED_REPLY = "API quota exceeded. Please try again in a few minutes."
GENERIC_ERROR_REPLY = "Sorry, there was an error processing your request."

StateListener = Callable[[TurnState], None]


def failure_reply(error: BaseException) -> str:
    """User-visible text for a failed turn."""
    if isinstance(error, QuotaExceededError):
        return QUOTA_EXCEEDED_REPLY
    return GENERIC_ERROR_REPLY


class TurnController:
    """Runs question/answer cycles against a session.

    Only this class writes ``session.is_awaiting_response`` and appends
    assistant messages.
    """

    def __init__(self, session: SessionState, provider: AnswerProvider):
        self._session = session
        self._provider = provider
        self._state = TurnState.IDLE
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def session(self) -> SessionState:
        return self._session

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener`` on every state transition."""
        self._listeners.append(listener)

    def _transition(self, state: TurnState) -> None:
        self._state = state
        for listener in list(self._listeners):
            # A failing observer must not leave the turn half-finished.
            try:
                listener(state)
            except Exception:
                logger.exception("Turn state listener failed on %s", state.value)

    def _accepts(self, question: str) -> bool:
        if self._state != TurnState.IDLE:
            logger.debug("Submission ignored: a turn is already in flight")
            return False
        if self._session.document is None:
            logger.debug("Submission ignored: no CSV loaded")
            return False
        if not question.strip():
            logger.debug("Submission ignored: empty question")
            return False
        return True

    async def submit(self, question: str | None = None) -> TurnOutcome | None:
        """Ask one question.

        Args:
            question: Question text; the session draft is used when None

        Returns:
            The outcome, or None when the submission was ignored
        """
        session = self._session
        text = session.pending_input if question is None else question
        if not self._accepts(text):
            return None

        # Claimed before any listener runs; nothing below suspends until the
        # provider call.
        self._state = TurnState.SUBMITTING
        history = session.store.snapshot()
        user_message = Message(role=Role.USER, content=text, timestamp=session.clock.now())
        try:
            session.store.append(user_message)
        except Exception:
            self._state = TurnState.IDLE
            raise
        session.pending_input = ""
        session.is_awaiting_response = True
        self._transition(TurnState.SUBMITTING)

        request = AnswerRequest(document=session.document.text, question=text, history=history)
        error: str | None = None
        try:
            content = await self._provider.answer(request)
            if not isinstance(content, str) or not content.strip():
                raise ProviderError("Provider returned no document")
            final_state = TurnState.RESOLVED
        except asyncio.CancelledError:
            session.is_awaiting_response = False
            self._transition(TurnState.IDLE)
            raise
        except Exception as e:
            logger.warning("Answer provider failed: %s", e, exc_info=True)
            content = failure_reply(e)
            error = str(e) or type(e).__name__
            final_state = TurnState.FAILED

        try:
            answer = Message(role=Role.ASSISTANT, content=content, timestamp=session.clock.now())
            session.store.append(answer)
        finally:
            session.is_awaiting_response = False
            self._transition(final_state)
            self._transition(TurnState.IDLE)

        return TurnOutcome(state=final_state, question=user_message, answer=answer, error=error)
