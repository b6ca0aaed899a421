"""
Match Engine

Turn/round state machine for one word chain match. The engine owns its
MatchState, dictionary and clock; callers feed it submissions, clock ticks
and restarts and render the snapshots it returns.
"""

import random
from dataclasses import replace
from typing import Any, Optional

from ..config import messages
from ..config.game_settings import (
    DEFAULT_TIME_LIMIT,
    GAME_MODES,
    MAX_TIME_LIMIT,
    MIN_TIME_LIMIT,
)
from ..models.game import (
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
from ..utils.game_logger import game_logger
from .chain_validator import validate_submission
from .clock import TurnClock
from .dictionary_service import Dictionary, normalize
from .scoring import add_word_score, decide_outcome


def normalize_time_limit(value: Any) -> int:
    """
    Turn a user-supplied per-turn limit into seconds.

    Anything that is not a whole number between MIN_TIME_LIMIT and
    MAX_TIME_LIMIT falls back to DEFAULT_TIME_LIMIT.
    """
    if isinstance(value, bool):
        return DEFAULT_TIME_LIMIT
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    try:
        limit = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_TIME_LIMIT
    if MIN_TIME_LIMIT <= limit <= MAX_TIME_LIMIT:
        return limit
    return DEFAULT_TIME_LIMIT


class MatchEngine:
    """
    State machine for a single match.

    States: awaiting input from the current player, or game over. An
    accepted word hands the turn to the other player; the second word of a
    round starts the next round, and finishing the last round ends the game
    without switching players. A timeout ends the game as a loss for the
    player on turn.

    Two capability flags cover the game's variants:
    - scoring_enabled: accepted words earn points and the game names a winner
    - seed_opening_word: a random SYSTEM word opens the chain
    """

    def __init__(self,
                 dictionary: Optional[Dictionary] = None,
                 mode: Optional[GameMode] = None,
                 scoring_enabled: bool = False,
                 seed_opening_word: bool = False,
                 game_id: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        self.dictionary = dictionary or Dictionary.default()
        self.mode = mode or GAME_MODES['klasik']
        self.scoring_enabled = scoring_enabled
        self.seed_opening_word = seed_opening_word
        self.game_id = game_id
        self.rng = rng or random.Random()
        self.custom_time_limit = self.mode.turn_time_limit if self.mode.is_timed else DEFAULT_TIME_LIMIT
        self.clock = TurnClock()
        self.state: MatchState
        self._start()

    def _start(self) -> None:
        """Discard the current match and set up round 1 under the current mode."""
        self.clock.reset()
        self.state = MatchState(mode=self.mode)

        opening = None
        if self.seed_opening_word:
            opening = self.dictionary.random_opening_word(self.rng)
            self.state.history.append(WordHistoryEntry(word=opening, player=PlayerId.SYSTEM))
            self.state.last_letter = opening[-1]

        game_logger.log_game_event(
            self.game_id, 'game_started',
            mode=self.mode.id, time_limit=self.mode.turn_time_limit,
            scoring_enabled=self.scoring_enabled,
            opening_word=opening,
        )
        self._arm_clock()

    def _arm_clock(self) -> None:
        if self.mode.is_timed and not self.state.is_over:
            self.clock.arm(self.mode.turn_time_limit)

    def _reject(self, word: str, reason: RejectReason) -> SubmitResult:
        game_logger.log_game_event(
            self.game_id, 'word_rejected',
            word=word, reason=reason.value, player=int(self.state.current_player),
        )
        return SubmitResult(
            outcome='rejected',
            word=word,
            canonical=None,
            spelling_differs=False,
            reason=reason.value,
            message=messages.rejection_message(reason, self.state.last_letter or ''),
            spelling_note=None,
            state=self.snapshot(),
        )

    def submit_word(self, raw: str) -> SubmitResult:
        """
        Validate and play a word for the current player.

        Rejections never change the match; the running countdown, if any,
        keeps going. An accepted word stops the countdown and the next turn
        gets a fresh one.
        """
        if self.state.is_over:
            return self._reject(normalize(raw or ''), RejectReason.GAME_OVER)

        verdict = validate_submission(self.state, raw, self.dictionary)
        if not verdict.accepted:
            return self._reject(verdict.word, verdict.reason)

        self.clock.disarm()
        state = self.state
        player = state.current_player
        canonical = verdict.canonical

        state.history.append(WordHistoryEntry(word=canonical, player=player))
        state.last_letter = canonical[-1]
        points = add_word_score(state.scores, player, canonical) if self.scoring_enabled else 0

        game_logger.log_game_event(
            self.game_id, 'word_accepted',
            word=verdict.word, canonical=canonical, player=int(player),
            round=state.round, points=points,
        )

        state.turns_in_round += 1
        if state.turns_in_round >= 2:
            state.round += 1
            state.turns_in_round = 0

        if state.round > state.mode.round_count:
            self._finish(EndReason.ROUNDS_EXHAUSTED)
        else:
            state.current_player = player.opponent
            self._arm_clock()

        spelling_note = None
        if verdict.spelling_differs:
            spelling_note = messages.SPELLING_NOTE.format(word=canonical)

        return SubmitResult(
            outcome='accepted',
            word=verdict.word,
            canonical=canonical,
            spelling_differs=verdict.spelling_differs,
            reason=None,
            message=messages.ACCEPTED,
            spelling_note=spelling_note,
            state=self.snapshot(),
        )

    def tick(self) -> ClockTick:
        """One second of the turn clock. Reaching zero ends the game."""
        result = self.clock.tick()
        if result.timed_out and not self.state.is_over:
            loser = self.state.current_player
            game_logger.log_game_event(
                self.game_id, 'turn_timed_out', source='clock',
                player=int(loser), round=self.state.round,
            )
            self._finish(EndReason.TIMEOUT, timed_out_player=loser)
            result = replace(result, message=messages.TIME_UP.format(player=int(loser)))
        return result

    def end_game(self, message: Optional[str] = None) -> GameSnapshot:
        """Force the match into game over."""
        if not self.state.is_over:
            self._finish(EndReason.FORCED, message=message)
        return self.snapshot()

    def _finish(self, reason: EndReason,
                timed_out_player: Optional[PlayerId] = None,
                message: Optional[str] = None) -> None:
        self.clock.disarm()
        state = self.state
        state.is_over = True
        state.end_reason = reason
        state.timed_out_player = timed_out_player

        if self.scoring_enabled:
            outcome = decide_outcome(state.scores, timed_out_player)
            state.winner = outcome.winner
            state.outcome_message = message or outcome.message
        elif reason is EndReason.TIMEOUT:
            state.outcome_message = messages.TIMED_OUT.format(player=int(timed_out_player))
        elif reason is EndReason.ROUNDS_EXHAUSTED:
            state.outcome_message = messages.GAME_COMPLETED
        else:
            state.outcome_message = message or messages.GAME_OVER

        game_logger.log_game_event(
            self.game_id, 'game_over',
            end_reason=reason.value,
            winner=int(state.winner) if state.winner is not None else None,
            scores={int(player): score for player, score in state.scores.items()} if self.scoring_enabled else None,
            words_played=len(state.history),
        )

    def set_mode(self, mode_id: str, custom_time_limit: Any = None) -> GameSnapshot:
        """
        Switch game mode and restart.

        The timed mode takes its per-turn limit from `custom_time_limit`,
        normalized by normalize_time_limit; without one the previously chosen
        limit is kept.
        """
        if mode_id not in GAME_MODES:
            raise ValueError(f"Unknown game mode: {mode_id}")

        mode = GAME_MODES[mode_id]
        if mode.is_timed:
            if custom_time_limit is not None:
                self.custom_time_limit = normalize_time_limit(custom_time_limit)
            mode = replace(mode, turn_time_limit=self.custom_time_limit)

        self.mode = mode
        self._start()
        return self.snapshot()

    def restart(self) -> GameSnapshot:
        """Start a fresh match under the current mode."""
        self._start()
        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        state = self.state
        last_letter = state.last_letter

        return GameSnapshot(
            game_id=self.game_id,
            mode=self.mode.id,
            mode_name=self.mode.name,
            time_limit=self.mode.turn_time_limit,
            current_player=int(state.current_player),
            round=min(state.round, state.mode.round_count),
            max_rounds=state.mode.round_count,
            turns_in_round=state.turns_in_round,
            last_letter=last_letter,
            required_letter=messages.turkish_upper(last_letter) if last_letter else None,
            instruction=messages.INSTRUCTION_CHAIN if last_letter else messages.INSTRUCTION_FIRST_WORD,
            history=[{'word': entry.word, 'player': int(entry.player)} for entry in state.history],
            scores={str(int(player)): score for player, score in state.scores.items()} if self.scoring_enabled else None,
            game_over=state.is_over,
            end_reason=state.end_reason.value if state.end_reason else None,
            winner=int(state.winner) if state.winner is not None else None,
            timed_out_player=int(state.timed_out_player) if state.timed_out_player is not None else None,
            outcome_message=state.outcome_message,
            remaining_seconds=self.clock.remaining_seconds if self.clock.armed else None,
            warning=self.clock.warning,
            scoring_enabled=self.scoring_enabled,
            seed_opening_word=self.seed_opening_word,
        )
