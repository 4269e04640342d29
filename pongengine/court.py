"""Court dimensions and gameplay constants.

All values in screen units (pixels, seconds). The y axis grows downward,
so a negative velocity moves a paddle up.
"""

from dataclasses import dataclass, replace
from typing import Optional

# Court
COURT_WIDTH = 800.0
COURT_HEIGHT = 600.0

# Paddles
PADDLE_WIDTH = 20.0
PADDLE_HEIGHT = 100.0
PADDLE_MARGIN = 20.0  # gap between the paddle and its court edge
PADDLE_SPEED = 500.0  # px/s

# Ball
BALL_SIZE = 20.0
BALL_INIT_SPEED = 150.0  # px/s
BALL_ACCEL = 10.0  # px/s^2, linear ramp for the whole round
MAX_BALL_SPEED = None  # no cap, paddle contact is swept instead

# Match
WIN_SCORE = 5
WINNER_HOLD = 1.0  # seconds the winner banner ignores input

# Collision
CONTACT_SLAB_WIDTH = 1.0  # thickness of the paddle's ball-facing contact strip


@dataclass(frozen=True)
class Rules:
    """Tunable constants for one match, injected at construction."""
    court_width: float = COURT_WIDTH
    court_height: float = COURT_HEIGHT
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_margin: float = PADDLE_MARGIN
    paddle_speed: float = PADDLE_SPEED
    ball_size: float = BALL_SIZE
    ball_init_speed: float = BALL_INIT_SPEED
    ball_accel: float = BALL_ACCEL
    max_ball_speed: Optional[float] = MAX_BALL_SPEED
    win_score: int = WIN_SCORE
    winner_hold: float = WINNER_HOLD
    slab_width: float = CONTACT_SLAB_WIDTH

    def __post_init__(self):
        positive = (
            "court_width", "court_height", "paddle_width", "paddle_height",
            "paddle_speed", "ball_size", "ball_init_speed", "slab_width",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.paddle_margin < 0:
            raise ValueError(f"paddle_margin must be >= 0, got {self.paddle_margin}")
        if self.ball_accel < 0:
            raise ValueError(f"ball_accel must be >= 0, got {self.ball_accel}")
        if self.paddle_height > self.court_height:
            raise ValueError("paddle_height cannot exceed court_height")
        if self.ball_size > self.court_height:
            raise ValueError("ball_size cannot exceed court_height")
        if self.max_ball_speed is not None and self.max_ball_speed < self.ball_init_speed:
            raise ValueError("max_ball_speed must be at least ball_init_speed")
        if self.win_score < 1:
            raise ValueError(f"win_score must be at least 1, got {self.win_score}")
        if self.winner_hold < 0:
            raise ValueError(f"winner_hold must be >= 0, got {self.winner_hold}")

    def with_overrides(self, **overrides) -> "Rules":
        """Return a validated copy with some constants replaced."""
        return replace(self, **overrides)


DEFAULT_RULES = Rules()
