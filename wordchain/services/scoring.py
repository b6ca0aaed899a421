"""Scoring: per-word points and the end-of-game verdict."""

from dataclasses import dataclass
from typing import Dict, Optional

from ..config import messages
from ..models.game import PlayerId


@dataclass(frozen=True)
class Outcome:
    winner: Optional[PlayerId]
    tie: bool
    message: str


def word_points(canonical: str) -> int:
    """A word is worth one point per character of its canonical spelling."""
    return len(canonical)


def add_word_score(scores: Dict[PlayerId, int], player: PlayerId, canonical: str) -> int:
    """Credit `player` for an accepted word and return the points awarded."""
    points = word_points(canonical)
    scores[player] = scores.get(player, 0) + points
    return points


def score_line(scores: Dict[PlayerId, int]) -> str:
    return messages.SCORE_LINE.format(
        player1=scores.get(PlayerId.PLAYER1, 0),
        player2=scores.get(PlayerId.PLAYER2, 0),
    )


def decide_outcome(scores: Dict[PlayerId, int], timed_out_player: Optional[PlayerId] = None) -> Outcome:
    """
    Decide the winner of a scored game.

    A player who ran out of time loses whatever the score; otherwise the
    higher total wins and equal totals are a tie.
    """
    if timed_out_player is not None:
        winner = timed_out_player.opponent
        message = ' '.join([
            messages.TIMED_OUT.format(player=int(timed_out_player)),
            messages.WINNER.format(player=int(winner)),
            score_line(scores),
        ])
        return Outcome(winner=winner, tie=False, message=message)

    player1 = scores.get(PlayerId.PLAYER1, 0)
    player2 = scores.get(PlayerId.PLAYER2, 0)
    if player1 == player2:
        return Outcome(winner=None, tie=True, message=f"{messages.TIE} {score_line(scores)}")

    winner = PlayerId.PLAYER1 if player1 > player2 else PlayerId.PLAYER2
    return Outcome(
        winner=winner,
        tie=False,
        message=f"{messages.WINNER.format(player=int(winner))} {score_line(scores)}",
    )
