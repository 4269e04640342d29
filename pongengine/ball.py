"""The ball: spawn at centre court, then integrate with a linear speed ramp."""

import random
from dataclasses import dataclass, field
from typing import Optional

from pongengine.court import Rules
from pongengine.types import Rect, Side, Vec2


@dataclass
class Ball:
    """Ball state. `direction` is not normalised; only sign and ratio matter."""
    pos: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=lambda: Vec2(1.0, 0.0))
    speed: float = 0.0

    @classmethod
    def spawn(
        cls,
        rules: Rules,
        rng: random.Random,
        serving_side: Optional[Side] = None,
    ) -> "Ball":
        """Centre the ball for a new round.

        With a serving side the ball moves away from it: NewRound(LEFT)
        serves toward the right (direction.x > 0). Without one (kickoff)
        the horizontal direction is drawn from `rng`. The vertical
        direction is always drawn from `rng`.
        """
        x = rules.court_width * 0.5 - rules.ball_size * 0.5
        y = rules.court_height * 0.5 - rules.ball_size * 0.5
        if serving_side is None:
            dir_x = rng.choice((-1.0, 1.0))
        else:
            dir_x = 1.0 if serving_side is Side.LEFT else -1.0
        dir_y = rng.choice((-1.0, 1.0))
        return cls(pos=Vec2(x, y), direction=Vec2(dir_x, dir_y), speed=rules.ball_init_speed)

    def integrate(self, elapsed: float, accel: float, max_speed: Optional[float] = None) -> None:
        """Advance by one tick: move along direction, then ramp speed."""
        self.pos = self.pos + self.direction * (self.speed * elapsed)
        self.speed += accel * elapsed
        if max_speed is not None:
            self.speed = min(self.speed, max_speed)

    def rect(self, size: float) -> Rect:
        return Rect(self.pos.x, self.pos.y, size, size)

    def copy(self) -> "Ball":
        return Ball(pos=self.pos.copy(), direction=self.direction.copy(), speed=self.speed)
