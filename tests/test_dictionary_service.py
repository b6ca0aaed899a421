import random
import time
from itertools import product

import pytest

from wordchain.config.game_settings import CHAR_EQUIVALENTS
from wordchain.services.dictionary_service import Dictionary, normalize


def test_direct_hit_resolves_to_itself(turkish_dictionary):
    result = turkish_dictionary.resolve('elma')
    assert result.canonical == 'elma'
    assert result.found
    assert result.spelling_differs is False


def test_every_dictionary_word_resolves_to_itself(turkish_dictionary):
    for word in turkish_dictionary.words:
        result = turkish_dictionary.resolve(word)
        assert result.canonical == word
        assert result.spelling_differs is False


def test_input_is_trimmed_and_lowercased(turkish_dictionary):
    result = turkish_dictionary.resolve('  ELMA ')
    assert result.word == 'elma'
    assert result.canonical == 'elma'
    assert result.spelling_differs is False


def test_plain_letters_resolve_to_turkish_spelling(turkish_dictionary):
    assert turkish_dictionary.resolve('cicek').canonical == 'çiçek'
    assert turkish_dictionary.resolve('agac').canonical == 'ağaç'
    assert turkish_dictionary.resolve('isik').canonical == 'ışık'
    assert turkish_dictionary.resolve('seker').canonical == 'şeker'

    result = turkish_dictionary.resolve('kus')
    assert result.canonical == 'kuş'
    assert result.spelling_differs is True


def test_search_prefers_earlier_positions_and_first_equivalents(turkish_dictionary):
    # 'saç' and 'şac' both match; the first position keeps its own letter first
    assert turkish_dictionary.resolve('sac').canonical == 'saç'


def test_uppercase_dotless_input(turkish_dictionary):
    assert normalize('İz') == 'iz'
    result = turkish_dictionary.resolve('IŞIK')
    assert result.canonical == 'ışık'
    assert result.spelling_differs is True


def test_unknown_and_empty_words_are_not_found(turkish_dictionary):
    assert turkish_dictionary.resolve('xyz').canonical is None
    assert not turkish_dictionary.resolve('xyz').found
    assert turkish_dictionary.resolve('   ').canonical is None


def test_identity_table_never_substitutes():
    dictionary = Dictionary(['çiçek'])
    assert dictionary.resolve('cicek').canonical is None
    assert dictionary.resolve('çiçek').canonical == 'çiçek'


def test_search_space_grows_with_ambiguous_positions(turkish_dictionary):
    assert turkish_dictionary.search_space('elma') == 1
    assert turkish_dictionary.search_space('cicek') == 8
    assert turkish_dictionary.search_space('susuz') == 16


def test_characters_match_uses_equivalents(turkish_dictionary):
    assert turkish_dictionary.characters_match('ç', 'c')
    assert turkish_dictionary.characters_match('k', 'k')
    assert not turkish_dictionary.characters_match('c', 'ç')
    assert not turkish_dictionary.characters_match('k', 'g')


def test_random_opening_word_respects_length_bounds(turkish_dictionary):
    rng = random.Random(7)
    for _ in range(20):
        word = turkish_dictionary.random_opening_word(rng)
        assert word in turkish_dictionary
        assert 4 <= len(word) <= 8


def test_random_opening_word_without_candidates():
    with pytest.raises(ValueError):
        Dictionary(['ay', 'su']).random_opening_word(random.Random(1))


def test_default_dictionary_is_loaded():
    dictionary = Dictionary.default()
    assert len(dictionary) > 100
    assert 'elma' in dictionary
    assert dictionary.resolve('cicek').canonical == 'çiçek'


def first_product_match(dictionary, word):
    """Walk every spelling in itertools.product order and return the first hit."""
    for letters in product(*(dictionary.candidates_for(char) for char in word)):
        if ''.join(letters) in dictionary.words:
            return ''.join(letters)
    return None


@pytest.mark.parametrize('word', ['sac', 'cicek', 'agac', 'isik', 'seker', 'kus', 'sis', 'susuz', 'cocuk'])
def test_pruned_search_matches_full_search(word):
    dictionary = Dictionary(
        ['saç', 'şac', 'sac', 'çiçek', 'ağaç', 'ışık', 'şeker', 'kuş', 'şiş', 'sis', 'çocuk', 'çoçuk', 'susuz'],
        CHAR_EQUIVALENTS,
    )
    assert dictionary.resolve(word).canonical == first_product_match(dictionary, word)


def test_unmatched_length_is_rejected_without_searching(turkish_dictionary):
    started = time.perf_counter()
    result = turkish_dictionary.resolve('c' * 60)
    assert result.canonical is None
    assert time.perf_counter() - started < 0.5


def test_long_ambiguous_word_resolves_quickly():
    # Every position is ambiguous and the match is the last spelling in product order
    target = 'ç' * 39 + 'a'
    dictionary = Dictionary([target, 'ç' * 39 + 'e'], CHAR_EQUIVALENTS)

    started = time.perf_counter()
    assert dictionary.resolve('c' * 39 + 'a').canonical == target
    assert dictionary.resolve('c' * 39 + 'b').canonical is None
    assert time.perf_counter() - started < 0.5
