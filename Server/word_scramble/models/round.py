"""
Round Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class RoundPhase(Enum):
    """Lifecycle phase of a round engine."""
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"


class SubmissionStatus(Enum):
    """Outcome of a single word submission."""
    ACCEPTED = "ACCEPTED"
    EMPTY_INPUT = "EMPTY_INPUT"
    DUPLICATE_WORD = "DUPLICATE_WORD"
    LETTERS_UNAVAILABLE = "LETTERS_UNAVAILABLE"
    NOT_A_REAL_WORD = "NOT_A_REAL_WORD"
    IS_ROOT_WORD = "IS_ROOT_WORD"
    TOO_SHORT = "TOO_SHORT"


@dataclass
class Round:
    """Root word, accepted words (most recent first) and running score."""
    root_word: str
    used_words: List[str] = field(default_factory=list)
    score: int = 0

    def copy(self) -> "Round":
        return Round(self.root_word, self.used_words.copy(), self.score)


@dataclass
class SubmissionResult:
    """Typed outcome of a submission, with display text for rejections."""
    status: SubmissionStatus
    word: str
    score: int
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is SubmissionStatus.ACCEPTED

    def to_dict(self) -> Dict:
        return {
            'status': self.status.value,
            'word': self.word,
            'score': self.score,
            'title': self.title,
            'message': self.message,
            'accepted': self.accepted
        }


@dataclass
class RoundState:
    """Client-facing round state representation."""
    round_id: str
    root_word: str
    used_words: List[str]
    score: int
    word_count: int
    entries: List[Dict] = field(default_factory=list)  # {word, letters, label} for list rendering
