"""
Dictionary Checkers

Answer "is this a real word in language L?" for the realness check.
"""

from typing import Iterable

from wordfreq import zipf_frequency

from ..config.game_settings import DEFAULT_LANGUAGE


class DictionaryChecker:
    """Interface for a local, synchronous dictionary lookup."""

    def is_valid(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError


class WordfreqDictionaryChecker(DictionaryChecker):
    """
    Treats a word as real when wordfreq has seen it often enough.

    wordfreq reports frequencies on the Zipf scale, where 0 means the word
    never appears in its corpora and everyday words sit between 3 and 7.
    A low threshold accepts rare but genuine words while rejecting strings
    that only show up as typos.
    """

    def __init__(self, min_zipf: float = 1.5):
        self.min_zipf = min_zipf

    def is_valid(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or not word.isalpha():
            return False
        return zipf_frequency(word, language) >= self.min_zipf


class WordSetDictionaryChecker(DictionaryChecker):
    """Looks words up in a fixed set. Only one language is held."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.words = {word.strip().lower() for word in words}
        self.language = language

    def is_valid(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word.lower() in self.words
