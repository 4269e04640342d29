"""Paddles: one per side, sliding along a vertical track."""

from dataclasses import dataclass

from pongengine.court import Rules
from pongengine.types import Rect, Side, Vec2


@dataclass
class Paddle:
    """A player's paddle. `pos` is the top-left corner."""
    side: Side
    pos: Vec2
    width: float
    height: float

    @classmethod
    def create(cls, side: Side, rules: Rules) -> "Paddle":
        """Paddle at its side's margin, centred vertically."""
        if side is Side.LEFT:
            x = rules.paddle_margin
        else:
            x = rules.court_width - rules.paddle_margin - rules.paddle_width
        y = rules.court_height * 0.5 - rules.paddle_height * 0.5
        return cls(side=side, pos=Vec2(x, y), width=rules.paddle_width, height=rules.paddle_height)

    def slide(self, velocity: float, elapsed: float) -> None:
        """Move vertically by velocity * elapsed. Bounds are not enforced here."""
        self.pos.y += velocity * elapsed

    def clamp_to_court(self, court_height: float) -> None:
        """Keep the paddle fully inside [0, court_height]."""
        if self.pos.y < 0:
            self.pos.y = 0.0
        elif self.pos.y + self.height > court_height:
            self.pos.y = court_height - self.height

    @property
    def center_y(self) -> float:
        return self.pos.y + self.height * 0.5

    @property
    def inner_x(self) -> float:
        """x coordinate of the ball-facing edge."""
        return self.pos.x + self.width if self.side is Side.LEFT else self.pos.x

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, self.width, self.height)

    def contact_slab(self, slab_width: float) -> Rect:
        """Thin strip flush with the ball-facing edge, inside the paddle."""
        if self.side is Side.LEFT:
            return Rect(self.inner_x - slab_width, self.pos.y, slab_width, self.height)
        return Rect(self.inner_x, self.pos.y, slab_width, self.height)

    def copy(self) -> "Paddle":
        return Paddle(side=self.side, pos=self.pos.copy(), width=self.width, height=self.height)
