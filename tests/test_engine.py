import pytest
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import (
    EmptyWordListError, RoundNotStartedError, ValidationOutcome, WordGameEngine,
)

WORDS = ["silk", "worm", "milk", "slim", "owl", "low", "silkworm", "soil"]


@pytest.fixture
def engine():
    e = WordGameEngine(WordListDictionary({"en": WORDS}), language="en", seed=1)
    e.start_round(["silkworm"])
    return e


def test_accepts_known_spellable_word(engine):
    assert engine.submit_guess("silk") is ValidationOutcome.ACCEPTED
    assert "silk" in engine.used_words


def test_second_submission_is_not_original(engine):
    assert engine.submit_guess("silk") is ValidationOutcome.ACCEPTED
    assert engine.submit_guess("silk") is ValidationOutcome.REJECTED_NOT_ORIGINAL
    assert engine.used_words == ("silk",)


@pytest.mark.parametrize("guess", ["silkworms", "xyz", "mom", "wormss"])
def test_letters_beyond_budget_not_possible(engine, guess):
    assert engine.submit_guess(guess) is ValidationOutcome.REJECTED_NOT_POSSIBLE


def test_spellable_but_unknown_is_not_real(engine):
    assert engine.submit_guess("wrom") is ValidationOutcome.REJECTED_NOT_REAL
    assert engine.used_words == ()


def test_target_word_itself_needs_dictionary(engine):
    assert engine.submit_guess("silkworm") is ValidationOutcome.ACCEPTED

    e = WordGameEngine(WordListDictionary({"en": ["silk"]}))
    e.start_round(["silkworm"])
    assert e.submit_guess("silkworm") is ValidationOutcome.REJECTED_NOT_REAL


def test_originality_checked_before_possibility(engine):
    engine.submit_guess("owl")
    assert engine.submit_guess(" OWL\n") is ValidationOutcome.REJECTED_NOT_ORIGINAL


def test_normalization_gives_identical_outcomes():
    d = WordListDictionary({"en": WORDS})
    a = WordGameEngine(d)
    b = WordGameEngine(d)
    a.start_round(["silkworm"])
    b.start_round(["silkworm"])
    assert a.submit_guess(" Silk ") == b.submit_guess("silk")
    assert a.used_words == b.used_words == ("silk",)


@pytest.mark.parametrize("raw", ["", "   ", "\n", " \t\n "])
def test_empty_input_is_noop(engine, raw):
    seen = []
    engine.subscribe(lambda g, o: seen.append((g, o)))
    assert engine.submit_guess(raw) is None
    assert engine.used_words == ()
    assert seen == []


def test_history_is_most_recent_first(engine):
    for w in ["silk", "worm", "owl"]:
        engine.submit_guess(w)
    assert engine.used_words == ("owl", "worm", "silk")


def test_start_round_clears_history(engine):
    engine.submit_guess("silk")
    engine.start_round(["silkworm"])
    assert engine.used_words == ()
    assert engine.submit_guess("silk") is ValidationOutcome.ACCEPTED


@pytest.mark.parametrize("words", [[], ["", "  ", "\n"]])
def test_start_round_with_empty_list_fails(words):
    e = WordGameEngine(WordListDictionary({"en": WORDS}))
    with pytest.raises(EmptyWordListError):
        e.start_round(words)
    assert e.target_word is None


def test_failed_start_keeps_previous_round(engine):
    engine.submit_guess("silk")
    with pytest.raises(EmptyWordListError):
        engine.start_round([])
    assert engine.target_word == "silkworm"
    assert engine.used_words == ("silk",)


def test_start_round_normalizes_and_is_seeded():
    d = WordListDictionary({"en": WORDS})
    pool = ["Alpha", "bravo ", "charlie", "delta"]
    picks_a = [WordGameEngine(d, seed=7).start_round(pool) for _ in range(3)]
    picks_b = [WordGameEngine(d, seed=7).start_round(pool) for _ in range(3)]
    assert picks_a == picks_b
    assert picks_a[0] in {"alpha", "bravo", "charlie", "delta"}


def test_submit_before_round_raises():
    e = WordGameEngine(WordListDictionary({"en": WORDS}))
    with pytest.raises(RoundNotStartedError):
        e.submit_guess("silk")
    with pytest.raises(RoundNotStartedError):
        e.snapshot()


def test_listeners_receive_each_evaluated_guess(engine):
    seen = []
    listener = lambda g, o: seen.append((g, o))  # noqa: E731
    engine.subscribe(listener)
    engine.submit_guess("Silk")
    engine.submit_guess("xyz")
    engine.unsubscribe(listener)
    engine.submit_guess("worm")
    assert seen == [
        ("silk", ValidationOutcome.ACCEPTED),
        ("xyz", ValidationOutcome.REJECTED_NOT_POSSIBLE),
    ]


def test_restore_and_snapshot(engine):
    engine.restore_round("SilkWorm", ["worm", "silk", "Worm", ""], started_at="2024-07-25T00:00:00+00:00")
    assert engine.target_word == "silkworm"
    assert engine.used_words == ("worm", "silk")
    assert engine.submit_guess("silk") is ValidationOutcome.REJECTED_NOT_ORIGINAL

    rec = engine.snapshot()
    assert rec.target == "silkworm"
    assert rec.used_words == ["worm", "silk"]
    assert rec.language == "en"
    assert rec.started_at == "2024-07-25T00:00:00+00:00"
    assert rec.finished_at is None


def test_restore_requires_target(engine):
    with pytest.raises(EmptyWordListError):
        engine.restore_round("  ")
