"""
Round Engine

Contains the core rules for a word scramble round: root word selection and
the ordered validation pipeline for submitted words.
"""

import logging
import random
import threading
from typing import Iterable, List, Optional, Tuple

from ..config.game_settings import DEFAULT_LANGUAGE, FALLBACK_ROOT_WORD, MIN_WORD_LENGTH
from ..errors import RoundNotStartedError
from ..models.round import Round, RoundPhase, SubmissionResult, SubmissionStatus
from .dictionary import DictionaryChecker

logger = logging.getLogger(__name__)


def normalize_word(raw_input: str) -> str:
    return raw_input.strip().lower()


def is_original(word: str, used_words: List[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    Checks that every letter of word can be taken from root_word.

    Each letter of the root word can be used at most once, so "peel" cannot
    be spelled from "apple".
    """
    available = list(root_word)

    for letter in word:
        if letter not in available:
            return False
        available.remove(letter)

    return True


def is_real(word: str, checker: DictionaryChecker, language: str = DEFAULT_LANGUAGE) -> bool:
    return checker.is_valid(word, language)


def is_start_word(word: str, root_word: str) -> bool:
    return word == root_word


def is_too_short(word: str) -> bool:
    return len(word) < MIN_WORD_LENGTH


class RoundEngine:
    """
    Owns the state of one round and applies submissions to it.

    The engine starts IDLE and becomes ACTIVE on the first start_round call;
    later calls reset the round in place. Submissions never change the phase.
    A lock serializes start_round and submit so a submission is applied
    entirely or not at all.
    """

    def __init__(self, rng: Optional[random.Random] = None, language: str = DEFAULT_LANGUAGE):
        self.rng = rng or random.Random()
        self.language = language
        self._round: Optional[Round] = None
        self._lock = threading.Lock()

    @property
    def phase(self) -> RoundPhase:
        return RoundPhase.IDLE if self._round is None else RoundPhase.ACTIVE

    @property
    def round(self) -> Optional[Round]:
        """Snapshot of the current round, or None before the first start."""
        with self._lock:
            return self._round.copy() if self._round else None

    def start_round(self, candidates: Optional[Iterable[str]]) -> Round:
        """
        Starts a fresh round with a randomly chosen root word.

        Args:
            candidates: Candidate root words, one per entry. Entries are
                trimmed and lowercased and blank entries are skipped.

        Returns:
            Round: Snapshot of the new round
        """
        words = [normalize_word(word) for word in (candidates or [])]
        words = [word for word in words if word]

        if words:
            root_word = self.rng.choice(words)
        else:
            logger.warning("No usable start words, falling back to '%s'", FALLBACK_ROOT_WORD)
            root_word = FALLBACK_ROOT_WORD

        with self._lock:
            self._round = Round(root_word=root_word)
            return self._round.copy()

    def submit(self, raw_input: str, checker: DictionaryChecker) -> SubmissionResult:
        """
        Validates a submitted word and records it when every check passes.

        Checks run in a fixed order and the first failure is reported:
        originality, feasibility, realness, start word, minimum length.

        Args:
            raw_input: Text as typed by the player
            checker: Dictionary used for the realness check

        Returns:
            SubmissionResult describing the outcome

        Raises:
            RoundNotStartedError: If start_round has never been called
        """
        with self._lock:
            return self._apply(normalize_word(raw_input), checker)

    def submit_with_snapshot(self, raw_input: str,
                             checker: DictionaryChecker) -> Tuple[SubmissionResult, Round]:
        """Like submit, also returning the round as it stood right after this submission."""
        with self._lock:
            result = self._apply(normalize_word(raw_input), checker)
            return result, self._round.copy()

    def _apply(self, answer: str, checker: DictionaryChecker) -> SubmissionResult:
        # Caller holds self._lock
        current = self._round
        if current is None:
            raise RoundNotStartedError("Start a round before submitting words")

        if not answer:
            return SubmissionResult(SubmissionStatus.EMPTY_INPUT, answer, current.score)

        if not is_original(answer, current.used_words):
            return self._reject(current, answer, SubmissionStatus.DUPLICATE_WORD,
                                "Word used already", "Be more original!")

        if not is_possible(answer, current.root_word):
            return self._reject(current, answer, SubmissionStatus.LETTERS_UNAVAILABLE,
                                "Word not possible",
                                f"You can't spell that word from '{current.root_word}'!")

        # Root words come from the curated start list and count as real
        if not is_start_word(answer, current.root_word) and not is_real(answer, checker, self.language):
            return self._reject(current, answer, SubmissionStatus.NOT_A_REAL_WORD,
                                "Word not recognised", "You can't just make them up!")

        if is_start_word(answer, current.root_word):
            return self._reject(current, answer, SubmissionStatus.IS_ROOT_WORD,
                                "Start word used", "You can't use the start word")

        if is_too_short(answer):
            return self._reject(current, answer, SubmissionStatus.TOO_SHORT,
                                "Word too short",
                                f"Your answer must have at least {MIN_WORD_LENGTH} letters")

        current.used_words.insert(0, answer)
        current.score += len(answer)

        return SubmissionResult(SubmissionStatus.ACCEPTED, answer, current.score)

    def _reject(self, current: Round, answer: str, status: SubmissionStatus,
                title: str, message: str) -> SubmissionResult:
        logger.debug("Rejected '%s' for root '%s': %s", answer, current.root_word, status.value)
        return SubmissionResult(status, answer, current.score, title, message)
