"""
Exception Types

Rejected submissions are returned as SubmissionResult values and never raised.
These exceptions cover the remaining failures a host can run into.
"""


class WordScrambleError(Exception):
    """Base class for all word scramble errors."""


class WordListUnavailableError(WordScrambleError):
    """Raised when a word list source cannot be read. Recoverable."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Word list unavailable: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RoundNotStartedError(WordScrambleError):
    """Raised when a word is submitted before any round was started."""
