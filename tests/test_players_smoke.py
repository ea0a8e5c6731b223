import pytest
from wordscramble.engine import can_spell
from wordscramble.players import create_player, get_player_ids
from wordscramble.players.base import BasePlayer, register

LEXICON = ["silk", "worm", "milk", "slim", "owl", "low", "silkworm", "cat"]


def _state(turn=1, used=()):
    spellable = [w for w in LEXICON if can_spell(w, "silkworm")]
    return {"turn": turn, "target": "silkworm", "used": list(used),
            "spellable": spellable, "last": None}


def test_registry_lists_players():
    assert {"random_subword", "longest_first", "scrambler"} <= set(get_player_ids())
    with pytest.raises(ValueError):
        create_player("nope")


def test_register_rejects_duplicates_and_missing_id():
    class Dup(BasePlayer):
        id = "random_subword"

    class NoId(BasePlayer):
        id = ""

    with pytest.raises(ValueError):
        register(Dup)
    with pytest.raises(ValueError):
        register(NoId)


def test_random_subword_avoids_used_and_gives_up():
    p = create_player("random_subword")
    p.reset(seed=3)
    used = [w for w in LEXICON if w not in ("owl", "cat")]
    assert p.next_guess(_state(used=used)) == "owl"
    assert p.next_guess(_state(used=used + ["owl"])) is None


def test_longest_first_prefers_long_words():
    p = create_player("longest_first")
    p.reset(seed=3)
    assert p.next_guess(_state()) == "silkworm"
    assert p.next_guess(_state(used=["silkworm"])) in {"silk", "worm", "milk", "slim"}


def test_scrambler_uses_target_letters_and_repeats():
    p = create_player("scrambler")
    p.reset(seed=11)
    g = p.next_guess(_state())
    assert 3 <= len(g) <= 8 and can_spell(g, "silkworm")
    assert p.next_guess(_state(turn=5, used=["owl"])) == "owl"


def test_scrambler_works_without_reset():
    p = create_player("scrambler")
    assert p.misses == 0
    g = p.next_guess(_state())
    assert can_spell(g, "silkworm")


@pytest.mark.parametrize("player_id", ["random_subword", "longest_first", "scrambler"])
def test_players_draw_only_from_state(player_id):
    p = create_player(player_id)
    p.reset(seed=2)
    assert not hasattr(p, "lexicon")
    g = p.next_guess(_state(turn=2))
    assert can_spell(g, "silkworm")
