"""
Word-list backed dictionary.

Holds one set of lowercase words per language code and answers
is_known_word(word, language). Lookups for a language that was never loaded
return False; a warning is logged the first time that language is asked for.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Protocol, Set, runtime_checkable

from wordscramble.datasets.io import read_lines

logger = logging.getLogger(__name__)


@runtime_checkable
class Dictionary(Protocol):
    def is_known_word(self, word: str, language: str) -> bool: ...


class WordListDictionary:
    def __init__(self, words_by_language: Mapping[str, Iterable[str]] | None = None):
        self._words: Dict[str, Set[str]] = {}
        self._warned: Set[str] = set()
        for lang, words in (words_by_language or {}).items():
            self.add_words(lang, words)

    @classmethod
    def from_files(cls, paths: Mapping[str, Path | str]) -> "WordListDictionary":
        """
        Load one UTF-8 word list per language (one word per line).
        Raises FileNotFoundError if any path is missing.
        """
        d = cls()
        for lang, p in paths.items():
            added = d.add_words(lang, read_lines(p))
            logger.info("loaded %d %s words from %s", added, lang, p)
        return d

    def add_words(self, language: str, words: Iterable[str]) -> int:
        """
        Add words for `language`; non-alphabetic entries are skipped.
        Returns the number of new words.
        """
        bucket = self._words.setdefault(language, set())
        before = len(bucket)
        for w in words:
            w = w.strip().lower()
            if w and w.isalpha():
                bucket.add(w)
        return len(bucket) - before

    def languages(self) -> List[str]:
        return sorted(self._words)

    def words(self, language: str) -> List[str]:
        return sorted(self._words.get(language, ()))

    def is_known_word(self, word: str, language: str) -> bool:
        bucket = self._words.get(language)
        if bucket is None:
            if language not in self._warned:
                logger.warning("no word list loaded for language %r", language)
                self._warned.add(language)
            return False
        return word.strip().lower() in bucket

    def __len__(self) -> int:
        return sum(len(b) for b in self._words.values())
