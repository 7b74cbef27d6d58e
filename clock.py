# Fixed-period tick driver for anything exposing Tk-style after()/after_cancel().
from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

try:
    from .game_logic import SnakeGame, TickResult
except ImportError:
    from game_logic import SnakeGame, TickResult

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class GameClock:
    """Calls game.tick() every period_ms while the game is running.

    At most one callback is pending, so pause/resume can never double-apply a tick.
    """
    def __init__(
        self,
        scheduler: Scheduler,
        game: SnakeGame,
        period_ms: int,
        on_tick: Callable[[TickResult], None] | None = None,
    ) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be > 0")
        self.scheduler = scheduler
        self.game = game
        self.period_ms = period_ms
        self.on_tick = on_tick
        self.after_id: Any = None  # pending scheduler callback id

    @property
    def active(self) -> bool:
        return self.after_id is not None

    def start(self) -> None:
        """Schedule the next tick if the game is running and nothing is pending."""
        if self.after_id is None and self.game.is_running:
            self.after_id = self.scheduler.after(self.period_ms, self._fire)

    def stop(self) -> None:
        """Cancel scheduled tick callback if one exists."""
        if self.after_id is not None:
            self.scheduler.after_cancel(self.after_id)
            self.after_id = None

    def _fire(self) -> None:
        self.after_id = None
        if not self.game.is_running:
            return
        result = self.game.tick()
        if self.on_tick is not None:
            self.on_tick(result)
        if result.game_over:
            logger.debug("Clock stopped: game over")
        self.start()
