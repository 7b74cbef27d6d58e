# Input adapter: turns key names and swipe gestures into engine commands.
from __future__ import annotations

import logging

try:
    from .game_logic import DOWN, GAME_OVER, IDLE, LEFT, RIGHT, UP, SnakeGame
except ImportError:
    from game_logic import DOWN, GAME_OVER, IDLE, LEFT, RIGHT, UP, SnakeGame

logger = logging.getLogger(__name__)


# Tk keysyms and browser KeyboardEvent.key names.
KEY_DIRECTIONS = {
    "Up": UP,
    "Down": DOWN,
    "Left": LEFT,
    "Right": RIGHT,
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}
PAUSE_KEYS = {"space", " "}
START_KEYS = {"Return", "Enter"}
RESET_KEYS = {"r", "Escape"}


def swipe_direction(dx: float, dy: float, threshold: float = 0.0) -> str | None:
    """Map a swipe vector (screen coordinates, y grows downward) to a direction.

    The dominant axis wins; equal magnitudes resolve vertically.
    """
    if max(abs(dx), abs(dy)) < threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    if dy == 0:
        return None
    return DOWN if dy > 0 else UP


class InputAdapter:
    """Owns the input policy (implicit start, space toggles) on top of the engine."""
    def __init__(self, game: SnakeGame, swipe_threshold: float = 0.0) -> None:
        self.game = game
        self.swipe_threshold = swipe_threshold

    def direction(self, direction: str) -> str:
        # A direction before the game starts just starts it.
        if self.game.phase in (IDLE, GAME_OVER):
            self.game.start()
            return "start"
        return "turn" if self.game.set_direction(direction) else "ignored"

    def press(self, key: str) -> str:
        """Handle one key press and report what it did."""
        if key in KEY_DIRECTIONS:
            return self.direction(KEY_DIRECTIONS[key])
        if key.lower() in KEY_DIRECTIONS and len(key) == 1:
            return self.direction(KEY_DIRECTIONS[key.lower()])
        if key in PAUSE_KEYS:
            if self.game.phase in (IDLE, GAME_OVER):
                self.game.start()
                return "start"
            if self.game.pause():
                return "pause"
            return "resume" if self.game.resume() else "ignored"
        if key in START_KEYS:
            return "start" if self.game.start() else "ignored"
        if key in RESET_KEYS:
            self.game.reset()
            return "reset"
        logger.debug("Unmapped key %r", key)
        return "ignored"

    def swipe(self, dx: float, dy: float) -> str:
        """Handle a finished touch gesture; a tap while not started starts the game."""
        if self.game.phase in (IDLE, GAME_OVER):
            self.game.start()
            return "start"
        direction = swipe_direction(dx, dy, self.swipe_threshold)
        if direction is None:
            return "ignored"
        return self.direction(direction)
