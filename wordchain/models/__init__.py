"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    ClockTick,
    EndReason,
    GameMode,
    GameSnapshot,
    MatchState,
    PlayerId,
    RejectReason,
    SubmitResult,
    WordHistoryEntry,
)

__all__ = [
    'ClockTick', 'EndReason', 'GameMode', 'GameSnapshot', 'MatchState',
    'PlayerId', 'RejectReason', 'SubmitResult', 'WordHistoryEntry'
]
