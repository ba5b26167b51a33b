import random
import threading
from collections import Counter

import pytest

from word_scramble.config.game_settings import FALLBACK_ROOT_WORD
from word_scramble.errors import RoundNotStartedError
from word_scramble.models.round import RoundPhase, SubmissionStatus
from word_scramble.services.dictionary import WordSetDictionaryChecker
from word_scramble.services.round_engine import RoundEngine, is_possible, is_too_short


def started_engine(root_word):
    engine = RoundEngine(rng=random.Random(0))
    engine.start_round([root_word])
    return engine


def test_silkworm_walkthrough(checker):
    engine = started_engine('silkworm')

    result = engine.submit('silk', checker)
    assert result.status is SubmissionStatus.ACCEPTED
    assert result.accepted
    assert result.score == 4
    assert engine.round.used_words == ['silk']

    result = engine.submit('silk', checker)
    assert result.status is SubmissionStatus.DUPLICATE_WORD
    assert result.title == 'Word used already'
    assert result.message == 'Be more original!'
    assert engine.round.score == 4

    result = engine.submit('silkworm', checker)
    assert result.status is SubmissionStatus.IS_ROOT_WORD
    assert result.title == 'Start word used'

    # no "n" in silkworm
    result = engine.submit('sworn', checker)
    assert result.status is SubmissionStatus.LETTERS_UNAVAILABLE

    result = engine.submit('worm', checker)
    assert result.accepted
    assert result.score == 8
    assert engine.round.used_words == ['worm', 'silk']


def test_letter_counts_are_enforced(checker):
    engine = started_engine('apple')

    result = engine.submit('peel', checker)

    assert result.status is SubmissionStatus.LETTERS_UNAVAILABLE
    assert result.title == 'Word not possible'
    assert result.message == "You can't spell that word from 'apple'!"
    assert engine.round.score == 0


def test_repeated_letters_available_in_root(checker):
    engine = started_engine('apple')

    assert engine.submit('app', checker).accepted


@pytest.mark.parametrize('word, root, expected', [
    ('silk', 'silkworm', True),
    ('worms', 'silkworm', True),
    ('wormss', 'silkworm', False),
    ('peel', 'apple', False),
    ('pale', 'apple', True),
    ('apple', 'apple', True),
    ('', 'apple', True),
    ('appple', 'apple', False),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_is_too_short():
    assert is_too_short('so')
    assert not is_too_short('sow')


def test_input_is_normalized(checker):
    engine = started_engine('silkworm')

    result = engine.submit('  SiLk \n', checker)

    assert result.accepted
    assert result.word == 'silk'
    assert engine.round.used_words == ['silk']


@pytest.mark.parametrize('raw', ['', '   ', '\n\t'])
def test_empty_input_is_ignored(checker, raw):
    engine = started_engine('silkworm')
    engine.submit('silk', checker)

    result = engine.submit(raw, checker)

    assert result.status is SubmissionStatus.EMPTY_INPUT
    assert not result.accepted
    assert result.title == ''
    assert engine.round.used_words == ['silk']
    assert engine.round.score == 4


def test_unknown_word_is_rejected(checker):
    engine = started_engine('silkworm')

    result = engine.submit('klim', checker)

    assert result.status is SubmissionStatus.NOT_A_REAL_WORD
    assert result.title == 'Word not recognised'
    assert result.message == "You can't just make them up!"


def test_short_word_is_rejected(checker):
    engine = started_engine('silkworm')

    result = engine.submit('so', checker)

    assert result.status is SubmissionStatus.TOO_SHORT
    assert result.message == 'Your answer must have at least 3 letters'


def test_first_failure_wins(checker):
    engine = started_engine('silkworm')
    engine.submit('silk', checker)

    # "zz" fails feasibility, realness and length; feasibility is checked first
    assert engine.submit('zz', checker).status is SubmissionStatus.LETTERS_UNAVAILABLE
    # "is" is real and feasible but too short
    assert engine.submit('is', checker).status is SubmissionStatus.TOO_SHORT
    # duplicates are reported before anything else
    assert engine.submit('silk', checker).status is SubmissionStatus.DUPLICATE_WORD


def test_root_word_rejected_even_when_not_in_dictionary():
    engine = started_engine('silkworm')
    empty_dictionary = WordSetDictionaryChecker([])

    result = engine.submit('silkworm', empty_dictionary)

    assert result.status is SubmissionStatus.IS_ROOT_WORD


def test_rejection_is_idempotent(checker):
    engine = started_engine('silkworm')
    engine.submit('milk', checker)
    before = engine.round

    first = engine.submit('klim', checker)
    second = engine.submit('klim', checker)

    assert first.status is second.status is SubmissionStatus.NOT_A_REAL_WORD
    assert engine.round == before


def test_submit_before_start_raises(checker):
    engine = RoundEngine()

    assert engine.phase is RoundPhase.IDLE
    assert engine.round is None
    with pytest.raises(RoundNotStartedError):
        engine.submit('silk', checker)


def test_start_round_resets_state(checker):
    engine = started_engine('silkworm')
    engine.submit('silk', checker)
    engine.submit('worm', checker)

    current = engine.start_round(['silkworm'])

    assert engine.phase is RoundPhase.ACTIVE
    assert current.root_word == 'silkworm'
    assert current.used_words == []
    assert current.score == 0
    assert engine.submit('silk', checker).accepted


@pytest.mark.parametrize('candidates', [None, [], [''], ['', '  ', '\n']])
def test_start_round_falls_back_to_default_word(candidates):
    engine = RoundEngine(rng=random.Random(0))

    current = engine.start_round(candidates)

    assert current.root_word == FALLBACK_ROOT_WORD
    assert current.score == 0
    assert current.used_words == []


def test_start_round_skips_blank_lines_and_normalizes():
    engine = RoundEngine(rng=random.Random(0))

    current = engine.start_round(['', '  Apple  ', ''])

    assert current.root_word == 'apple'


def test_seeded_rng_makes_selection_deterministic():
    candidates = ['silkworm', 'apple', 'elephant', 'notebook', 'keyboard']

    first = [RoundEngine(rng=random.Random(42)).start_round(candidates).root_word for _ in range(3)]
    second = [RoundEngine(rng=random.Random(42)).start_round(candidates).root_word for _ in range(3)]

    assert first == second
    assert all(word in candidates for word in first)


def test_round_snapshot_is_a_copy(checker):
    engine = started_engine('silkworm')
    engine.submit('silk', checker)

    snapshot = engine.round
    snapshot.used_words.append('worm')
    snapshot.score = 100

    assert engine.round.used_words == ['silk']
    assert engine.round.score == 4


def test_score_and_letters_invariants_hold_over_random_play(checker):
    rng = random.Random(7)
    roots = ['silkworm', 'apple']
    pool = list(checker.words) + ['zebra', 'klim', 'ow', 'SILK ', '']

    for root in roots:
        engine = started_engine(root)
        for _ in range(200):
            engine.submit(rng.choice(pool), checker)
            current = engine.round

            assert current.score == sum(len(word) for word in current.used_words)
            assert len(current.used_words) == len(set(current.used_words))
            assert root not in current.used_words
            root_letters = Counter(root)
            for word in current.used_words:
                assert not Counter(word) - root_letters
                assert len(word) >= 3


def run_in_threads(count, target):
    barrier = threading.Barrier(count)
    errors = []

    def worker(index):
        barrier.wait()
        try:
            target(index)
        except Exception as e:  # surfaced by the assertion below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert errors == []


def test_concurrent_submissions_are_applied_once(checker):
    words = ['silk', 'milk', 'worm', 'work', 'slow', 'owl', 'sow', 'mow', 'row', 'silo']

    for _ in range(20):
        engine = started_engine('silkworm')
        results = []

        def submit_all(index):
            order = words[index % len(words):] + words[:index % len(words)]
            for word in order:
                results.append(engine.submit(word, checker))

        run_in_threads(16, submit_all)
        current = engine.round

        assert sorted(current.used_words) == sorted(words)
        assert current.score == sum(len(word) for word in current.used_words)
        assert sum(1 for result in results if result.accepted) == len(words)


def test_snapshot_matches_its_own_submission(checker):
    words = ['silk', 'milk', 'worm', 'work', 'slow', 'owl', 'sow', 'mow', 'row', 'silo']
    engine = started_engine('silkworm')
    pairs = []

    def submit_one(index):
        pairs.append(engine.submit_with_snapshot(words[index], checker))

    run_in_threads(len(words), submit_one)

    for result, snapshot in pairs:
        assert result.accepted
        assert snapshot.used_words[0] == result.word
        assert snapshot.score == result.score == sum(len(word) for word in snapshot.used_words)
