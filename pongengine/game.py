"""Match orchestration: the per-tick state machine.

One `update()` call per rendered frame:
- Quit in the tick's intents ends the match (Exit) from any state
- NewRound serves a fresh ball away from the side that conceded
- Playing applies paddle intents, clamps paddles, integrates the ball and
  resolves collisions (a paddle on the ball's path first, else scoring, then walls)
- WallBounce / RacketBounce / Point last exactly one tick so collaborators
  can react to them once
- Point credits the score, then starts a new round or declares a winner
- Winner holds for `Rules.winner_hold` seconds, then any input restarts
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from pongengine.ball import Ball
from pongengine.court import DEFAULT_RULES, Rules
from pongengine.paddle import Paddle
from pongengine.physics import resolve_collisions
from pongengine.scoring import Scoreboard
from pongengine.types import (
    Confirm,
    Exit,
    MatchState,
    MoveDown,
    MoveUp,
    NewRound,
    Playing,
    Point,
    Quit,
    RacketBounce,
    Side,
    Snapshot,
    WallBounce,
    Winner,
)

logger = logging.getLogger(__name__)

# Audio/visual cue raised on the single tick a state is active
CUES = {
    WallBounce: "wall",
    RacketBounce: "racket",
    Point: "point",
}


@dataclass
class Match:
    """Everything one game needs. Several matches can run side by side."""
    rules: Rules
    rng: random.Random
    paddles: tuple[Paddle, Paddle]
    ball: Ball
    scores: Scoreboard = field(default_factory=Scoreboard)
    state: MatchState = field(default_factory=Playing)
    clock: float = 0.0
    events: list = field(default_factory=list)  # events raised by the last tick

    @classmethod
    def create(cls, rules: Optional[Rules] = None, seed: Optional[int] = None) -> "Match":
        """Fresh match: centred paddles, kickoff ball, 0-0, Playing."""
        rules = rules or DEFAULT_RULES
        rng = random.Random(seed)
        return cls(
            rules=rules,
            rng=rng,
            paddles=(Paddle.create(Side.LEFT, rules), Paddle.create(Side.RIGHT, rules)),
            ball=Ball.spawn(rules, rng),
        )

    def paddle(self, side: Side) -> Paddle:
        return self.paddles[0] if side is Side.LEFT else self.paddles[1]

    def reset(self) -> None:
        """Start over in place. The RNG and clock carry on."""
        self.paddles = (Paddle.create(Side.LEFT, self.rules), Paddle.create(Side.RIGHT, self.rules))
        self.ball = Ball.spawn(self.rules, self.rng)
        self.scores = Scoreboard()
        self.state = Playing()
        self.events = []


def _apply_intents(match: Match, elapsed: float, intents: Iterable) -> None:
    """Slide paddles in the order the intents arrived; unknown values are ignored."""
    speed = match.rules.paddle_speed
    for intent in intents:
        if isinstance(intent, MoveUp):
            match.paddle(intent.side).slide(-speed, elapsed)
        elif isinstance(intent, MoveDown):
            match.paddle(intent.side).slide(speed, elapsed)
    for paddle in match.paddles:
        paddle.clamp_to_court(match.rules.court_height)


def _play(match: Match, elapsed: float, intents: list) -> MatchState:
    _apply_intents(match, elapsed, intents)

    prev_pos = match.ball.pos.copy()
    match.ball.integrate(elapsed, match.rules.ball_accel, match.rules.max_ball_speed)

    state, events = resolve_collisions(match.ball, prev_pos, match.paddles, match.rules, match.clock)
    match.events = events
    return state


def _credit_point(match: Match, side: Side) -> MatchState:
    match.scores.award(side, match.clock)
    logger.info(f"Point {side}: {match.scores}")
    winner = match.scores.winner(match.rules.win_score)
    if winner is not None:
        logger.info(f"{winner} wins {match.scores}")
        return Winner(winner, match.clock)
    return NewRound(side.toggle())


def _wants_restart(intents: list) -> bool:
    return any(isinstance(i, (MoveUp, MoveDown, Confirm)) for i in intents)


def update(match: Match, elapsed: float, intents: Iterable = ()) -> Match:
    """Advance the match by one frame.

    Args:
        match: The match to advance; it is updated in place.
        elapsed: Seconds since the previous frame (>= 0).
        intents: MoveUp / MoveDown / Quit / Confirm values for this frame,
            in the order received. Duplicates and conflicts are summed,
            anything else is ignored.

    Returns:
        The same match, for chaining.
    """
    if elapsed < 0:
        raise ValueError(f"elapsed must be >= 0, got {elapsed}")

    intents = list(intents)
    match.clock += elapsed
    match.events = []
    state = match.state

    if isinstance(state, Exit):
        return match

    if any(isinstance(i, Quit) for i in intents):
        logger.info("Quit requested")
        match.state = Exit()
        return match

    if isinstance(state, NewRound):
        match.ball = Ball.spawn(match.rules, match.rng, serving_side=state.side)
        logger.debug(f"New round, serving away from {state.side}")
        match.state = Playing()
    elif isinstance(state, Playing):
        match.state = _play(match, elapsed, intents)
    elif isinstance(state, (WallBounce, RacketBounce)):
        match.state = Playing()
    elif isinstance(state, Point):
        match.state = _credit_point(match, state.side)
    elif isinstance(state, Winner):
        if match.clock - state.at > match.rules.winner_hold and _wants_restart(intents):
            logger.debug("Restarting match")
            match.reset()

    return match


def snapshot(match: Match) -> Snapshot:
    """Read-only view of the match for rendering and audio."""
    left, right = match.paddles
    return Snapshot(
        left_paddle=left.pos.as_tuple(),
        right_paddle=right.pos.as_tuple(),
        ball=match.ball.pos.as_tuple(),
        scores=match.scores.as_tuple(),
        state=match.state,
        events=tuple(match.events),
        cue=CUES.get(type(match.state)),
        t=match.clock,
    )
