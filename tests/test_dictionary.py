import inspect
import logging
from pathlib import Path

import pytest
from wordscramble.config import DICTIONARY_PATHS
from wordscramble.dictionary import Dictionary, WordListDictionary
from wordscramble.engine import WordGameEngine, validate_guess
from wordscramble.engine.validation import is_real


def test_lookup_is_case_insensitive_and_per_language():
    d = WordListDictionary({"en": ["Silk", "worm"], "de": ["wurm"]})
    assert d.is_known_word("silk", "en")
    assert d.is_known_word(" SILK ", "en")
    assert not d.is_known_word("wurm", "en")
    assert d.is_known_word("wurm", "de")
    assert d.languages() == ["de", "en"]
    assert d.words("en") == ["silk", "worm"]
    assert len(d) == 3


def test_unknown_language_warns_once(caplog):
    d = WordListDictionary({"en": ["silk"]})
    with caplog.at_level(logging.WARNING):
        assert d.is_known_word("silk", "fr") is False
        assert d.is_known_word("silk", "fr") is False
    assert sum("fr" in r.getMessage() for r in caplog.records) == 1


def test_add_words_skips_non_alpha():
    d = WordListDictionary()
    assert d.add_words("en", ["silk", "silk", "o'clock", "", "x1"]) == 1
    assert d.words("en") == ["silk"]


def test_from_files(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("silk\nWORM\n\n", encoding="utf-8")
    d = WordListDictionary.from_files({"en": p})
    assert d.is_known_word("worm", "en")
    with pytest.raises(FileNotFoundError):
        WordListDictionary.from_files({"en": tmp_path / "missing.txt"})


def test_bundled_dictionary_covers_silkworm_scenarios():
    d = WordListDictionary.from_files(DICTIONARY_PATHS)
    assert d.is_known_word("silk", "en")
    assert d.is_known_word("silkworm", "en")
    assert not d.is_known_word("wrom", "en")


def test_word_list_dictionary_satisfies_protocol():
    assert isinstance(WordListDictionary(), Dictionary)
    assert not isinstance(object(), Dictionary)


@pytest.mark.parametrize("fn", [WordGameEngine.__init__, validate_guess, is_real])
def test_engine_takes_dictionary_protocol(fn):
    assert inspect.signature(fn).parameters["dictionary"].annotation == "Dictionary"
