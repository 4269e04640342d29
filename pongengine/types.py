"""Core data types for the Pong simulation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass
class Vec2:
    """2D vector for positions and directions (y grows downward)."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def intersects(self, other: "Rect") -> bool:
        """Strict overlap test; rectangles sharing only an edge do not intersect."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def intersect(self, other: "Rect") -> Optional["Rect"]:
        """Return the overlapping region, or None."""
        if not self.intersects(other):
            return None
        x = max(self.left, other.left)
        y = max(self.top, other.top)
        return Rect(x, y, min(self.right, other.right) - x, min(self.bottom, other.bottom) - y)


class Side(str, Enum):
    """One half of the court, and the player defending it."""
    LEFT = "left"
    RIGHT = "right"

    def toggle(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT

    def __str__(self) -> str:
        return self.name


# --- Intents (input collaborator -> core) ---


@dataclass(frozen=True)
class MoveUp:
    side: Side


@dataclass(frozen=True)
class MoveDown:
    side: Side


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Confirm:
    """Replay prompt acknowledgement; also any-key input on the winner screen."""
    pass


Intent = Union[MoveUp, MoveDown, Quit, Confirm]


# --- Match states ---


@dataclass(frozen=True)
class NewRound:
    """Ball is about to be served away from `side` (the side that conceded)."""
    side: Side


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class WallBounce:
    pass


@dataclass(frozen=True)
class RacketBounce:
    pass


@dataclass(frozen=True)
class Point:
    """`side` won the point; its score is credited on the next tick."""
    side: Side


@dataclass(frozen=True)
class Winner:
    side: Side
    at: float  # match clock when the winning point was credited


@dataclass(frozen=True)
class Exit:
    pass


MatchState = Union[NewRound, Playing, WallBounce, RacketBounce, Point, Winner, Exit]


# --- Collision events ---


@dataclass
class WallEvent:
    """Ball rebounded off the top or bottom wall."""
    pos: Vec2
    t: float
    wall: str  # "top" or "bottom"


@dataclass
class RacketEvent:
    """Ball rebounded off a paddle."""
    pos: Vec2
    t: float
    side: Side
    offset: float  # strike position, -1 (top edge) .. 1 (bottom edge)


@dataclass
class OutEvent:
    """Ball left the court past `side`'s edge."""
    pos: Vec2
    t: float
    side: Side


Event = Union[WallEvent, RacketEvent, OutEvent]


@dataclass
class TraceSample:
    """Ball state recorded by physics.trace() after one step."""
    t: float
    pos: Vec2
    speed: float


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a match for the renderer and audio collaborators."""
    left_paddle: tuple[float, float]
    right_paddle: tuple[float, float]
    ball: tuple[float, float]
    scores: tuple[int, int]
    state: MatchState
    events: tuple = field(default_factory=tuple)
    cue: Optional[str] = None  # "wall", "racket" or "point"
    t: float = 0.0
