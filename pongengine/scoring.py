"""Score keeping: per-side counters, point history and the win threshold."""

from dataclasses import dataclass, field
from typing import Optional

from pongengine.types import Side


@dataclass
class Scoreboard:
    """Score pair for one match. Counters only ever go up."""
    left: int = 0
    right: int = 0
    history: list = field(default_factory=list)

    def award(self, side: Side, t: float = 0.0) -> int:
        """Credit one point to `side` and return its new score."""
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1
        self.history.append({
            "side": side.value,
            "left": self.left,
            "right": self.right,
            "t": t,
        })
        return self.score(side)

    def score(self, side: Side) -> int:
        return self.left if side is Side.LEFT else self.right

    def winner(self, win_score: int) -> Optional[Side]:
        """Side that reached `win_score`, if any."""
        if self.left >= win_score:
            return Side.LEFT
        if self.right >= win_score:
            return Side.RIGHT
        return None

    def as_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"{self.left} - {self.right}"
