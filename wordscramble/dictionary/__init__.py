from .wordlist import Dictionary, WordListDictionary

__all__ = ["Dictionary", "WordListDictionary"]
