"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional


class PlayerId(IntEnum):
    """Author of a word in the chain. SYSTEM marks a seeded opening word."""
    SYSTEM = 0
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def opponent(self) -> "PlayerId":
        if self is PlayerId.PLAYER1:
            return PlayerId.PLAYER2
        if self is PlayerId.PLAYER2:
            return PlayerId.PLAYER1
        raise ValueError("SYSTEM has no opponent")


class RejectReason(Enum):
    """Why a submitted word was not accepted."""
    EMPTY_INPUT = "empty-input"
    WRONG_START_LETTER = "wrong-start-letter"
    NOT_IN_DICTIONARY = "not-in-dictionary"
    ALREADY_USED = "already-used"
    GAME_OVER = "game-over"


class EndReason(Enum):
    """How a match reached game over."""
    ROUNDS_EXHAUSTED = "rounds-exhausted"
    TIMEOUT = "timeout"
    FORCED = "forced"


@dataclass(frozen=True)
class GameMode:
    """Immutable description of a game mode."""
    id: str
    name: str
    description: str
    round_count: int
    turn_time_limit: Optional[int] = None  # Seconds per turn, None disables the clock

    @property
    def is_timed(self) -> bool:
        return self.turn_time_limit is not None


@dataclass(frozen=True)
class WordHistoryEntry:
    """A word accepted into the chain, in canonical spelling."""
    word: str
    player: PlayerId


@dataclass
class MatchState:
    """Mutable session state owned by a single match engine."""
    mode: GameMode
    current_player: PlayerId = PlayerId.PLAYER1
    round: int = 1
    turns_in_round: int = 0
    last_letter: Optional[str] = None
    history: List[WordHistoryEntry] = field(default_factory=list)
    scores: Dict[PlayerId, int] = field(
        default_factory=lambda: {PlayerId.PLAYER1: 0, PlayerId.PLAYER2: 0}
    )
    is_over: bool = False
    end_reason: Optional[EndReason] = None
    winner: Optional[PlayerId] = None
    timed_out_player: Optional[PlayerId] = None
    outcome_message: Optional[str] = None

    def has_used(self, word: str) -> bool:
        lowered = word.lower()
        return any(entry.word.lower() == lowered for entry in self.history)


@dataclass
class GameSnapshot:
    """Read-only game state representation handed to the presentation layer."""
    game_id: Optional[str]
    mode: str
    mode_name: str
    time_limit: Optional[int]
    current_player: int
    round: int
    max_rounds: int
    turns_in_round: int
    last_letter: Optional[str]
    required_letter: Optional[str]
    instruction: str
    history: List[Dict]  # [{"word": ..., "player": ...}] oldest first
    scores: Optional[Dict[str, int]]  # Keyed by player number as string for JSON serialization
    game_over: bool
    end_reason: Optional[str]
    winner: Optional[int]
    timed_out_player: Optional[int]
    outcome_message: Optional[str]
    remaining_seconds: Optional[int]  # None while the clock is inactive
    warning: bool
    scoring_enabled: bool
    seed_opening_word: bool


@dataclass
class SubmitResult:
    """Outcome of a single word submission."""
    outcome: str  # "accepted" or "rejected"
    word: str
    canonical: Optional[str]
    spelling_differs: bool
    reason: Optional[str]
    message: str
    spelling_note: Optional[str]
    state: GameSnapshot

    @property
    def accepted(self) -> bool:
        return self.outcome == "accepted"


@dataclass
class ClockTick:
    """Observable effect of one clock tick."""
    remaining_seconds: Optional[int]
    warning: bool
    timed_out: bool
    message: Optional[str] = None  # set on the tick that times out
