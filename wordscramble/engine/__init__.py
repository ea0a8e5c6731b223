from .letters import normalize, can_spell, spellable_words
from .outcomes import ValidationOutcome, describe
from .validation import validate_guess
from .game import WordGameEngine, EmptyWordListError, RoundNotStartedError

__all__ = [
    "normalize", "can_spell", "spellable_words",
    "ValidationOutcome", "describe", "validate_guess",
    "WordGameEngine", "EmptyWordListError", "RoundNotStartedError",
]
