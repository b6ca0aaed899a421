"""
Game Configuration Constants Module

This module defines all game configuration constants: round counts, clock
limits, the built-in game modes, the Turkish character equivalence table and
the dictionary word list. All game parameters are centralized here to enable
easy modification.
"""

import json
import os
from typing import Dict, Final, List

from ..models.game import GameMode

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 5
"""Rounds per match; a round is one word from each player."""

DEFAULT_TIME_LIMIT: Final[int] = 15
MIN_TIME_LIMIT: Final[int] = 1
MAX_TIME_LIMIT: Final[int] = 120
"""Per-turn clock bounds in seconds for the timed mode (inclusive)."""

CLOCK_WARNING_SECONDS: Final[int] = 5
"""The clock raises its warning once this many seconds or fewer remain."""

OPENING_WORD_MIN_LENGTH: Final[int] = 4
OPENING_WORD_MAX_LENGTH: Final[int] = 8

SPELLING_SEARCH_WARN_THRESHOLD: Final[int] = 256
"""Spelling searches with more candidates than this are logged (never capped)."""

CLASSIC_MODE: Final[GameMode] = GameMode(
    id='klasik',
    name='Klasik',
    description=f'{MAX_ROUNDS} tur, süre sınırı yok',
    round_count=MAX_ROUNDS,
    turn_time_limit=None,
)

TIMED_MODE: Final[GameMode] = GameMode(
    id='zamanli',
    name='Zamanlı',
    description=f'{MAX_ROUNDS} tur, kullanıcı belirli süre',
    round_count=MAX_ROUNDS,
    turn_time_limit=DEFAULT_TIME_LIMIT,
)

GAME_MODES: Final[Dict[str, GameMode]] = {
    CLASSIC_MODE.id: CLASSIC_MODE,
    TIMED_MODE.id: TIMED_MODE,
}

# Plain characters users type in place of Turkish letters. Candidates are
# tried in the listed order.
CHAR_EQUIVALENTS: Final[Dict[str, List[str]]] = {
    'c': ['c', 'ç'],
    'g': ['g', 'ğ'],
    'i': ['i', 'ı'],
    'o': ['o', 'ö'],
    's': ['s', 'ş'],
    'u': ['u', 'ü'],
}


def _load_word_list() -> List[str]:
    """
    Load the dictionary from words.json.

    Returns:
        List[str]: List of lowercase Turkish words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = [word.strip() for word in word_list]
    for word in words:
        if len(word) < 2:
            raise ValueError(f"Word '{word}' is shorter than 2 characters")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return words


# Dictionary loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Character validation: Only alphabetic characters allowed
    2. Format validation: Consistent lowercase formatting
    3. Uniqueness validation: No duplicate entries
    4. Seeding validation: At least one word fits the opening word length

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if word != word.lower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(WORD_LIST) != len(set(WORD_LIST)):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    if not any(OPENING_WORD_MIN_LENGTH <= len(word) <= OPENING_WORD_MAX_LENGTH for word in WORD_LIST):
        raise ValueError("No word is suitable as an opening word")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes the word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_length: Average characters per word
            - first_letter_frequency: How many words start with each letter
            - dead_end_letters: Final letters no word starts with
            - max_ambiguous_positions: Largest number of substitutable characters in one word
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    first_letters: Dict[str, int] = {}
    for word in WORD_LIST:
        first_letters[word[0]] = first_letters.get(word[0], 0) + 1

    last_letters = {word[-1] for word in WORD_LIST}

    return {
        "total_words": len(WORD_LIST),
        "avg_length": round(sum(len(word) for word in WORD_LIST) / len(WORD_LIST), 2),
        "first_letter_frequency": first_letters,
        "dead_end_letters": sorted(last_letters - set(first_letters)),
        "max_ambiguous_positions": max(
            sum(1 for char in word if char in CHAR_EQUIVALENTS) for word in WORD_LIST
        ),
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
