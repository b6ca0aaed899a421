"""
Chain Validator

Decides whether a submitted word may extend the chain. Rules are checked in
order and the first failing rule wins:

1. the input is not empty
2. the typed first letter matches the previous word's last letter
3. the word resolves to a dictionary spelling
4. the canonical spelling has not been played yet

Rule 2 looks at the raw input while rule 4 looks at the canonical spelling.
"""

from dataclasses import dataclass
from typing import Optional

from ..models.game import MatchState, RejectReason
from .dictionary_service import Dictionary, normalize


@dataclass(frozen=True)
class Verdict:
    """Validator decision for one submission."""
    word: str
    accepted: bool
    reason: Optional[RejectReason] = None
    canonical: Optional[str] = None
    spelling_differs: bool = False


def validate_submission(state: MatchState, raw: str, dictionary: Dictionary) -> Verdict:
    """Check a raw submission against the chain, the dictionary and the history."""
    word = normalize(raw or '')

    if not word:
        return Verdict(word=word, accepted=False, reason=RejectReason.EMPTY_INPUT)

    if state.last_letter and not dictionary.characters_match(state.last_letter, word[0]):
        return Verdict(word=word, accepted=False, reason=RejectReason.WRONG_START_LETTER)

    spelling = dictionary.resolve(word)
    if not spelling.found:
        return Verdict(word=word, accepted=False, reason=RejectReason.NOT_IN_DICTIONARY)

    if state.has_used(spelling.canonical):
        return Verdict(word=word, accepted=False, reason=RejectReason.ALREADY_USED,
                       canonical=spelling.canonical)

    return Verdict(
        word=word,
        accepted=True,
        canonical=spelling.canonical,
        spelling_differs=spelling.spelling_differs,
    )
