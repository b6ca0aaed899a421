"""
Services Package

Contains the word chain engine (dictionary, validator, clock, scoring,
match state machine) and the service that hosts running matches.
"""

from .dictionary_service import Dictionary, SpellingResult
from .chain_validator import Verdict, validate_submission
from .clock import TurnClock
from .match_engine import MatchEngine, normalize_time_limit
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'Dictionary', 'SpellingResult',
    'Verdict', 'validate_submission',
    'TurnClock',
    'MatchEngine', 'normalize_time_limit',
    'GameService', 'get_game_service', 'initialize_game_service'
]
