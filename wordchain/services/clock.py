"""
Turn Clock

Per-turn countdown for timed games. The clock does not schedule anything by
itself: an external ticker calls tick() once per second while it is armed.
"""

from typing import Optional

from ..config.game_settings import CLOCK_WARNING_SECONDS
from ..models.game import ClockTick


class TurnClock:
    """
    Countdown with an explicit armed/disarmed state.

    Every arm() bumps `generation`, so a ticker started for an earlier turn
    can tell that it has been superseded and stop.
    """

    def __init__(self, warning_seconds: int = CLOCK_WARNING_SECONDS):
        self.warning_seconds = warning_seconds
        self.armed = False
        self.remaining_seconds: Optional[int] = None
        self.warning = False
        self.generation = 0

    def arm(self, limit: int) -> None:
        """Start a fresh countdown from `limit` seconds."""
        self.generation += 1
        self.armed = True
        self.remaining_seconds = limit
        self.warning = False

    def disarm(self) -> None:
        """Stop the countdown and clear the warning. Safe to call repeatedly."""
        self.armed = False
        self.warning = False

    def reset(self) -> None:
        self.disarm()
        self.remaining_seconds = None

    def tick(self) -> ClockTick:
        """
        Advance the countdown by one second.

        The tick that reaches zero reports timed_out and disarms the clock, so
        a timeout fires exactly once. Ticks while disarmed change nothing.
        """
        if not self.armed:
            return ClockTick(remaining_seconds=self.remaining_seconds, warning=self.warning, timed_out=False)

        self.remaining_seconds = max(0, self.remaining_seconds - 1)
        if self.remaining_seconds <= self.warning_seconds:
            self.warning = True

        if self.remaining_seconds == 0:
            self.disarm()
            return ClockTick(remaining_seconds=0, warning=True, timed_out=True)

        return ClockTick(remaining_seconds=self.remaining_seconds, warning=self.warning, timed_out=False)
