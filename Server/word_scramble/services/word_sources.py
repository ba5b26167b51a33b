"""
Word List Sources

Supply the pool of candidate root words a round is started from.
"""

import logging
from pathlib import Path
from typing import List

from ..config.game_settings import START_WORDS_PATH
from ..errors import WordListUnavailableError

logger = logging.getLogger(__name__)


class WordListSource:
    """Interface for anything that can produce candidate root words."""

    def load(self) -> List[str]:
        raise NotImplementedError


class FileWordListSource(WordListSource):
    """
    Reads a newline-delimited word list from disk.

    Entries are returned as they appear in the file, one per line; blank lines
    and surrounding whitespace are left for the round engine to discard.
    """

    def __init__(self, path: str = START_WORDS_PATH):
        self.path = Path(path)

    def load(self) -> List[str]:
        """
        Load the word list.

        Returns:
            List[str]: One entry per line of the file

        Raises:
            WordListUnavailableError: If the file cannot be read or decoded
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read start words from %s: %s", self.path, e)
            raise WordListUnavailableError(str(self.path), str(e)) from e

        return text.split('\n')


class StaticWordListSource(WordListSource):
    """Serves a fixed in-memory list, for tests and embedded use."""

    def __init__(self, words):
        self.words = list(words)

    def load(self) -> List[str]:
        return self.words.copy()
