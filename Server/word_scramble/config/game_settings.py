"""
Game Rule Constants Module

All word scramble rule parameters are centralized here. Runtime settings that
vary per deployment live in app_config instead.
"""

import os
from typing import Dict, Final, Iterable, List

MIN_WORD_LENGTH: Final[int] = 3
"""
Shortest word length that can score.
"""

FALLBACK_ROOT_WORD: Final[str] = "silkworm"
"""
Root word used when the start word list is empty or cannot be read.
"""

DEFAULT_LANGUAGE: Final[str] = "en"

START_WORDS_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'start.txt'
)
"""
Bundled newline-delimited list of candidate root words.
"""


def validate_start_words(words: Iterable[str]) -> bool:
    """
    Validates a candidate root word list.

    Checks that the list is not empty and that every entry is a lowercase
    alphabetic word that can yield at least one scoring answer.

    Returns:
        bool: True if the list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise ValueError("Start word list cannot be empty")

    for index, word in enumerate(words):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

        # The root word itself never scores, so it must be longer than the minimum
        if len(word) <= MIN_WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is too short to be a root word")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in start word list: {duplicates}")

    return True


def get_start_word_statistics(words: Iterable[str]) -> Dict:
    """
    Summarizes a candidate root word list.

    Returns:
        dict: total_words, average_length, longest_word, letter_frequency
            and most_common_letters
    """
    words: List[str] = list(words)
    if not words:
        return {"error": "Start word list is empty"}

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "average_length": round(sum(len(word) for word in words) / len(words), 2),
        "longest_word": max(words, key=len),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
