"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import DictionaryChecker, WordfreqDictionaryChecker, WordSetDictionaryChecker
from .round_engine import RoundEngine, is_possible
from .round_service import RoundService, get_round_service, initialize_round_service
from .word_sources import FileWordListSource, StaticWordListSource, WordListSource

__all__ = [
    'DictionaryChecker', 'WordfreqDictionaryChecker', 'WordSetDictionaryChecker',
    'RoundEngine', 'is_possible',
    'RoundService', 'get_round_service', 'initialize_round_service',
    'FileWordListSource', 'StaticWordListSource', 'WordListSource'
]
