"""
Player-facing Messages

The fixed Turkish message set shown by the front end. The engine picks the
message; the presentation layer only renders it.
"""

from typing import Final

from ..models.game import RejectReason

EMPTY_INPUT: Final[str] = 'Lütfen bir kelime girin.'
WRONG_START_LETTER: Final[str] = 'Kelime "{letter}" harfi ile başlamalı!'
NOT_IN_DICTIONARY: Final[str] = 'Bu kelime sözlükte bulunamadı. Başka bir kelime deneyin.'
ALREADY_USED: Final[str] = 'Bu kelime daha önce kullanıldı!'
GAME_ALREADY_OVER: Final[str] = 'Oyun bitti. Yeni bir oyun başlatın.'

ACCEPTED: Final[str] = 'Doğru!'
SPELLING_NOTE: Final[str] = 'Doğru yazılışı: {word}'

INSTRUCTION_FIRST_WORD: Final[str] = 'Bir kelime girin'
INSTRUCTION_CHAIN: Final[str] = 'Şu harfle başlayan bir kelime girin:'

GAME_COMPLETED: Final[str] = 'Tebrikler! Oyunu başarıyla tamamladınız!'
GAME_OVER: Final[str] = 'Oyun bitti!'
TIME_UP: Final[str] = 'Süre doldu! Oyuncu {player} kaybetti.'
TIMED_OUT: Final[str] = 'Oyuncu {player} süreyi aştı!'
WINNER: Final[str] = 'Oyuncu {player} kazandı!'
TIE: Final[str] = 'Berabere!'
SCORE_LINE: Final[str] = 'Skor: {player1} - {player2}'

REJECTION_MESSAGES: Final[dict] = {
    RejectReason.EMPTY_INPUT: EMPTY_INPUT,
    RejectReason.WRONG_START_LETTER: WRONG_START_LETTER,
    RejectReason.NOT_IN_DICTIONARY: NOT_IN_DICTIONARY,
    RejectReason.ALREADY_USED: ALREADY_USED,
    RejectReason.GAME_OVER: GAME_ALREADY_OVER,
}


def turkish_upper(text: str) -> str:
    """Upper-case with Turkish dotted/dotless i rules."""
    return text.replace('i', 'İ').replace('ı', 'I').upper()


def rejection_message(reason: RejectReason, required_letter: str = '') -> str:
    return REJECTION_MESSAGES[reason].format(letter=turkish_upper(required_letter))
