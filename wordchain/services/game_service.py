"""
Game Service

Keeps one match engine per game id and runs every event for a match
(submissions, clock ticks, restarts) one at a time.
"""

import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Optional

from ..config.game_settings import GAME_MODES
from ..models.game import ClockTick, GameSnapshot, SubmitResult
from .dictionary_service import Dictionary
from .match_engine import MatchEngine, normalize_time_limit


class GameService:
    """
    In-memory registry of running matches.

    This class handles:
    - Match creation with unique game IDs
    - Routing submissions, ticks, mode switches and restarts to the right engine
    - Serializing those events so each one runs to completion before the next
    """

    def __init__(self, dictionary: Optional[Dictionary] = None,
                 scoring_enabled: bool = False,
                 seed_opening_word: bool = False):
        self.games: Dict[str, MatchEngine] = {}  # Active engines by game_id
        self.dictionary = dictionary or Dictionary.default()
        self.scoring_enabled = scoring_enabled
        self.seed_opening_word = seed_opening_word
        self._lock = threading.RLock()

    def create_new_game(self,
                        mode_id: str = 'klasik',
                        time_limit: Any = None,
                        scoring_enabled: Optional[bool] = None,
                        seed_opening_word: Optional[bool] = None) -> str:
        """
        Creates a new match.

        Args:
            mode_id: Game mode id ("klasik" or "zamanli")
            time_limit: Per-turn limit for the timed mode, normalized by the engine
            scoring_enabled: Overrides the service default when given
            seed_opening_word: Overrides the service default when given

        Returns:
            str: Unique game ID for this match

        Raises:
            ValueError: If the mode id is unknown
        """
        if mode_id not in GAME_MODES:
            raise ValueError(f"Unknown game mode: {mode_id}")

        mode = GAME_MODES[mode_id]
        if mode.is_timed and time_limit is not None:
            mode = replace(mode, turn_time_limit=normalize_time_limit(time_limit))

        game_id = str(uuid.uuid4())
        engine = MatchEngine(
            mode=mode,
            dictionary=self.dictionary,
            scoring_enabled=self.scoring_enabled if scoring_enabled is None else scoring_enabled,
            seed_opening_word=self.seed_opening_word if seed_opening_word is None else seed_opening_word,
            game_id=game_id,
        )
        with self._lock:
            self.games[game_id] = engine
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """Returns the current snapshot for a match, or None if not found."""
        with self._lock:
            engine = self.games.get(game_id)
            return engine.snapshot() if engine else None

    def submit_word(self, game_id: str, word: str) -> Optional[SubmitResult]:
        with self._lock:
            engine = self.games.get(game_id)
            return engine.submit_word(word) if engine else None

    def tick(self, game_id: str) -> Optional[ClockTick]:
        with self._lock:
            engine = self.games.get(game_id)
            return engine.tick() if engine else None

    def tick_if_current(self, game_id: str, generation: int) -> Optional[ClockTick]:
        """
        Tick only while the clock still runs the countdown started at `generation`.

        Returns None once the match is gone, the clock was disarmed or re-armed
        for a later turn, which tells a background ticker to stop.
        """
        with self._lock:
            engine = self.games.get(game_id)
            if not engine or not engine.clock.armed or engine.clock.generation != generation:
                return None
            return engine.tick()

    def set_mode(self, game_id: str, mode_id: str, time_limit: Any = None) -> Optional[GameSnapshot]:
        """Switch mode and restart. Raises ValueError for an unknown mode."""
        with self._lock:
            engine = self.games.get(game_id)
            return engine.set_mode(mode_id, time_limit) if engine else None

    def restart(self, game_id: str) -> Optional[GameSnapshot]:
        with self._lock:
            engine = self.games.get(game_id)
            return engine.restart() if engine else None

    def end_game(self, game_id: str, message: Optional[str] = None) -> Optional[GameSnapshot]:
        with self._lock:
            engine = self.games.get(game_id)
            return engine.end_game(message) if engine else None

    def clock_generation(self, game_id: str) -> Optional[int]:
        """Generation of the running countdown, or None when no clock is armed."""
        with self._lock:
            engine = self.games.get(game_id)
            if not engine or not engine.clock.armed:
                return None
            return engine.clock.generation

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a match from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            engine = self.games.pop(game_id, None)
            if engine is None:
                return False
            engine.clock.reset()
            return True


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(scoring_enabled: bool = False,
                            seed_opening_word: bool = False,
                            dictionary: Optional[Dictionary] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(
        dictionary=dictionary,
        scoring_enabled=scoring_enabled,
        seed_opening_word=seed_opening_word,
    )
    return _game_service
