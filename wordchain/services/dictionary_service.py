"""
Dictionary Service

Holds the set of valid words and the character equivalence table, and
resolves what a player typed to its canonical dictionary spelling.
"""

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..config.game_settings import (
    CHAR_EQUIVALENTS,
    OPENING_WORD_MAX_LENGTH,
    OPENING_WORD_MIN_LENGTH,
    SPELLING_SEARCH_WARN_THRESHOLD,
    WORD_LIST,
)
from ..utils.game_logger import game_logger


@dataclass(frozen=True)
class SpellingResult:
    """Result of resolving raw input against the dictionary."""
    word: str  # normalized input
    canonical: Optional[str]
    spelling_differs: bool

    @property
    def found(self) -> bool:
        return self.canonical is not None


def normalize(raw: str) -> str:
    """Lower-case and trim user input. Turkish capital İ becomes a plain i."""
    return raw.replace('İ', 'i').lower().strip()


class Dictionary:
    """
    Word set plus character equivalence table.

    The equivalence table maps a character to the ordered list of characters
    it may stand for. Characters missing from the table only stand for
    themselves.
    """

    def __init__(self, words: Iterable[str], equivalents: Optional[Mapping[str, Sequence[str]]] = None):
        self.words = frozenset(normalize(word) for word in words)
        self.lengths = frozenset(len(word) for word in self.words)
        self.prefixes = frozenset(word[:end] for word in self.words for end in range(1, len(word) + 1))
        self.equivalents: Dict[str, List[str]] = {
            char: list(candidates) for char, candidates in (equivalents or {}).items()
        }

    @classmethod
    def default(cls) -> "Dictionary":
        """Dictionary built from the configured word list and Turkish equivalents."""
        return cls(WORD_LIST, CHAR_EQUIVALENTS)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self.words

    def __len__(self) -> int:
        return len(self.words)

    def candidates_for(self, char: str) -> List[str]:
        return self.equivalents.get(char, [char])

    def characters_match(self, required: str, typed: str) -> bool:
        """True when the typed character may stand for the required one."""
        return typed == required or required in self.candidates_for(typed)

    def search_space(self, word: str) -> int:
        """
        Number of spellings the fuzzy search may try for a word.

        This is the product of the candidate list lengths, so it grows as
        2^k for k ambiguous positions with the Turkish table.
        """
        total = 1
        for char in normalize(word):
            total *= len(self.candidates_for(char))
        return total

    def resolve(self, raw: str) -> SpellingResult:
        """
        Resolve input to its canonical dictionary spelling.

        A direct hit wins. Otherwise substitutions are tried depth first,
        left to right, each position's candidates in table order (the order
        of itertools.product over the candidate lists), and the first
        spelling found in the dictionary is returned. Inputs whose length no
        dictionary word has are rejected outright, and a branch is dropped
        as soon as its partial spelling stops being a dictionary prefix, so
        the cost stays proportional to the matching dictionary entries
        rather than search_space(word).
        """
        word = normalize(raw)
        if not word or len(word) not in self.lengths:
            return SpellingResult(word=word, canonical=None, spelling_differs=False)

        if word in self.words:
            return SpellingResult(word=word, canonical=word, spelling_differs=False)

        space = self.search_space(word)
        if space > SPELLING_SEARCH_WARN_THRESHOLD:
            game_logger.logger.warning(
                f"Spelling search for '{word}' may cover up to {space} candidate spellings"
            )

        candidate = self._first_spelling(word)
        return SpellingResult(
            word=word,
            canonical=candidate,
            spelling_differs=candidate is not None and has_spelling_difference(word, candidate),
        )

    def _first_spelling(self, word: str) -> Optional[str]:
        options = [self.candidates_for(char) for char in word]
        chosen: List[str] = []
        stack = [iter(options[0])]
        while stack:
            char = next(stack[-1], None)
            if char is None:
                stack.pop()
                if chosen:
                    chosen.pop()
                continue

            spelling = ''.join(chosen) + char
            if spelling not in self.prefixes:
                continue
            if len(spelling) == len(word):
                if spelling in self.words:
                    return spelling
                continue

            chosen.append(char)
            stack.append(iter(options[len(chosen)]))
        return None

    def random_opening_word(self, rng: Optional[random.Random] = None,
                            min_length: int = OPENING_WORD_MIN_LENGTH,
                            max_length: int = OPENING_WORD_MAX_LENGTH) -> str:
        """Pick a random word whose length lies within the given bounds."""
        rng = rng or random.Random()
        pool = sorted(word for word in self.words if min_length <= len(word) <= max_length)
        if not pool:
            raise ValueError(
                f"No dictionary word between {min_length} and {max_length} characters"
            )
        return rng.choice(pool)


def has_spelling_difference(raw: str, canonical: str) -> bool:
    return raw.lower() != canonical.lower()
