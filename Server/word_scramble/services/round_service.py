"""
Round Service

Keeps the active word scramble rounds in memory and exposes them to the
HTTP and WebSocket layers.
"""

import logging
import random
import threading
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import DEFAULT_LANGUAGE
from ..errors import WordListUnavailableError
from ..models.round import Round, RoundState, SubmissionResult
from .dictionary import DictionaryChecker
from .round_engine import RoundEngine
from .word_sources import WordListSource

logger = logging.getLogger(__name__)


class RoundService:
    """
    Round session registry.

    This class handles:
    - Round creation with unique round IDs
    - Loading start words, falling back when the source is unavailable
    - Routing submissions to the owning round engine
    - Building client-facing state snapshots
    """

    def __init__(self,
                 word_source: WordListSource,
                 checker: DictionaryChecker,
                 language: str = DEFAULT_LANGUAGE,
                 rng: Optional[random.Random] = None):
        self.word_source = word_source
        self.checker = checker
        self.language = language
        self.rng = rng or random.Random()
        self.rounds: Dict[str, RoundEngine] = {}
        self._lock = threading.Lock()

    def _load_candidates(self) -> List[str]:
        try:
            return self.word_source.load()
        except WordListUnavailableError as e:
            logger.warning("Starting round without start words: %s", e)
            return []

    def _get_engine(self, round_id: str) -> Optional[RoundEngine]:
        with self._lock:
            return self.rounds.get(round_id)

    def create_round(self) -> str:
        """
        Creates a new round with a randomly selected root word.

        Returns:
            str: Unique round ID for this session
        """
        round_id = str(uuid.uuid4())
        engine = RoundEngine(rng=self.rng, language=self.language)
        engine.start_round(self._load_candidates())

        with self._lock:
            self.rounds[round_id] = engine
        return round_id

    def get_round_state(self, round_id: str) -> Optional[RoundState]:
        """
        Returns the current state of a round.

        Args:
            round_id: Unique round identifier

        Returns:
            RoundState object or None if round not found
        """
        engine = self._get_engine(round_id)
        if engine is None:
            return None
        return self._build_state(round_id, engine.round)

    def submit_word(self, round_id: str, raw_input: str) -> Optional[SubmissionResult]:
        """
        Submits a word to a round.

        Args:
            round_id: Unique round identifier
            raw_input: Word as typed by the player

        Returns:
            SubmissionResult, or None if round not found
        """
        engine = self._get_engine(round_id)
        if engine is None:
            return None
        return engine.submit(raw_input, self.checker)

    def submit_word_with_state(self, round_id: str,
                               raw_input: str) -> Optional[Tuple[SubmissionResult, RoundState]]:
        """
        Submits a word and returns the round state right after it.

        The state is taken under the same engine lock as the submission, so
        it never includes a word submitted concurrently by another client.

        Returns:
            (SubmissionResult, RoundState), or None if round not found
        """
        engine = self._get_engine(round_id)
        if engine is None:
            return None
        result, current = engine.submit_with_snapshot(raw_input, self.checker)
        return result, self._build_state(round_id, current)

    def reset_round(self, round_id: str) -> Optional[RoundState]:
        """Starts a new round on an existing round ID."""
        engine = self._get_engine(round_id)
        if engine is None:
            return None
        return self._build_state(round_id, engine.start_round(self._load_candidates()))

    def delete_round(self, round_id: str) -> bool:
        """
        Removes a round from memory.

        Returns:
            bool: True if round was deleted, False if not found
        """
        with self._lock:
            if round_id in self.rounds:
                del self.rounds[round_id]
                return True
        return False

    def active_round_count(self) -> int:
        with self._lock:
            return len(self.rounds)

    def _build_state(self, round_id: str, current: Round) -> RoundState:
        entries = [
            {'word': word, 'letters': len(word), 'label': f"{word}, {len(word)} letters"}
            for word in current.used_words
        ]
        return RoundState(
            round_id=round_id,
            root_word=current.root_word,
            used_words=current.used_words.copy(),
            score=current.score,
            word_count=len(current.used_words),
            entries=entries
        )


# Global service instance
_round_service = None


def get_round_service() -> Optional[RoundService]:
    """Get the global round service instance."""
    return _round_service


def initialize_round_service(word_source: WordListSource,
                             checker: DictionaryChecker,
                             language: str = DEFAULT_LANGUAGE,
                             rng: Optional[random.Random] = None) -> RoundService:
    """Initialize the global round service instance."""
    global _round_service
    _round_service = RoundService(word_source, checker, language, rng)
    return _round_service
