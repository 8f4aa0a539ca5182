"""Exception hierarchy for csvchat.

Chart decode problems are not exceptions: they travel as
``DecodeFailure`` values (see ``csvchat.charts``).
"""


class CsvChatError(Exception):
    """Base class for all csvchat errors."""


class ProviderError(CsvChatError):
    """The answer provider could not produce a document."""


class QuotaExceededError(ProviderError):
    """The upstream model rejected the call because of rate or quota limits."""

    def __init__(self, message: str = "API quota exceeded. Please try again later.") -> None:
        super().__init__(message)


class UploadError(CsvChatError):
    """A CSV file could not be loaded."""


class DuplicateTimestampError(CsvChatError, ValueError):
    """A message was appended with a timestamp already used in the session."""
