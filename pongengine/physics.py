"""Collision resolution: scoring, wall rebounds, paddle contact slabs."""

import math
from typing import Optional

from pongengine.ball import Ball
from pongengine.court import Rules
from pongengine.paddle import Paddle
from pongengine.types import (
    Event,
    MatchState,
    OutEvent,
    Playing,
    Point,
    RacketBounce,
    RacketEvent,
    Side,
    TraceSample,
    Vec2,
    WallBounce,
    WallEvent,
)


def _check_out_of_bounds(ball: Ball, rules: Rules, t: float) -> Optional[OutEvent]:
    """Ball past a court edge. The event side is the edge it crossed."""
    if ball.pos.x < 0:
        return OutEvent(pos=ball.pos.copy(), t=t, side=Side.LEFT)
    if ball.pos.x + rules.ball_size > rules.court_width:
        return OutEvent(pos=ball.pos.copy(), t=t, side=Side.RIGHT)
    return None


def _clamp_vertical(ball: Ball, rules: Rules) -> Optional[str]:
    """Pull the ball back inside the court vertically. Returns the wall touched."""
    if ball.pos.y < 0:
        ball.pos.y = 0.0
        return "top"
    if ball.pos.y + rules.ball_size > rules.court_height:
        ball.pos.y = rules.court_height - rules.ball_size
        return "bottom"
    return None


def _check_wall_bounce(ball: Ball, rules: Rules, t: float) -> Optional[WallEvent]:
    """Clamp the ball inside and point its vertical direction back into the court."""
    wall = _clamp_vertical(ball, rules)
    if wall is None:
        return None
    if wall == "top":
        ball.direction.y = abs(ball.direction.y)
    else:
        ball.direction.y = -abs(ball.direction.y)
    return WallEvent(pos=ball.pos.copy(), t=t, wall=wall)


def _moving_toward(ball: Ball, paddle: Paddle) -> bool:
    if paddle.side is Side.LEFT:
        return ball.direction.x < 0
    return ball.direction.x > 0


def _front_x(x: float, side: Side, size: float) -> float:
    """Leading edge of the ball box when travelling toward `side`."""
    return x if side is Side.LEFT else x + size


def _sweep_contact(ball: Ball, prev_pos: Vec2, paddle: Paddle, rules: Rules) -> Optional[float]:
    """Ball y where its leading edge crosses the paddle's contact slab this tick.

    The leading edge travels from its previous to its current x. If that
    stretch overlaps the slab horizontally, the ball's y is interpolated at
    the paddle's inner edge and tested against the slab's vertical extent.
    Returns None on a miss.
    """
    if not _moving_toward(ball, paddle):
        return None

    slab = paddle.contact_slab(rules.slab_width)
    start = _front_x(prev_pos.x, paddle.side, rules.ball_size)
    end = _front_x(ball.pos.x, paddle.side, rules.ball_size)
    if max(start, end) < slab.left or min(start, end) > slab.right:
        return None

    travel = start - end
    frac = (start - paddle.inner_x) / travel if travel else 0.0
    frac = min(max(frac, 0.0), 1.0)
    y = prev_pos.y + (ball.pos.y - prev_pos.y) * frac

    if y + rules.ball_size <= slab.top or y >= slab.bottom:
        return None
    return y


def strike_offset(ball_center_y: float, paddle: Paddle) -> float:
    """Rebound slope for a strike: 0 at the paddle centre, -1/+1 at the top/bottom edge."""
    contact_y = min(max(ball_center_y, paddle.pos.y), paddle.pos.y + paddle.height)
    return (contact_y - paddle.center_y) / (paddle.height * 0.5)


def _rebound_off_paddle(ball: Ball, paddle: Paddle, contact_y: float, rules: Rules, t: float) -> RacketEvent:
    """Send the ball back from the paddle's inner edge.

    The horizontal direction is forced away from the paddle, so a ball that
    is already leaving never re-collides with the same paddle.
    """
    offset = strike_offset(contact_y + rules.ball_size * 0.5, paddle)
    if paddle.side is Side.LEFT:
        ball.direction.x = abs(ball.direction.x)
        ball.pos.x = paddle.inner_x
    else:
        ball.direction.x = -abs(ball.direction.x)
        ball.pos.x = paddle.inner_x - rules.ball_size
    ball.direction.y = offset

    return RacketEvent(pos=ball.pos.copy(), t=t, side=paddle.side, offset=offset)


def resolve_collisions(
    ball: Ball,
    prev_pos: Vec2,
    paddles: tuple[Paddle, Paddle],
    rules: Rules,
    t: float = 0.0,
) -> tuple[MatchState, list[Event]]:
    """Resolve one tick of collisions after the ball has been integrated.

    A ball whose path crossed a paddle's contact slab this tick is struck,
    even if it ended the tick past the court edge. Otherwise the order is
    scoring, then walls. A ball that leaves the court is only pulled back
    inside vertically, never rebounded.

    Returns (next_state, events) with next_state one of Point, RacketBounce,
    WallBounce or Playing.
    """
    struck, contact_y = None, None
    for paddle in paddles:
        contact_y = _sweep_contact(ball, prev_pos, paddle, rules)
        if contact_y is not None:
            struck = paddle
            break

    if struck is None:
        out = _check_out_of_bounds(ball, rules, t)
        if out is not None:
            _clamp_vertical(ball, rules)
            return Point(out.side.toggle()), [out]
    else:
        ball.pos.y = contact_y

    events: list[Event] = []
    wall = _check_wall_bounce(ball, rules, t)
    if wall is not None:
        events.append(wall)

    if struck is not None:
        events.append(_rebound_off_paddle(ball, struck, contact_y, rules, t))
        return RacketBounce(), events

    if wall is not None:
        return WallBounce(), events
    return Playing(), events


def trace(
    initial: Ball,
    rules: Rules,
    dt: float = 1 / 60,
    max_time: float = 10.0,
) -> tuple[list[TraceSample], list[Event]]:
    """Run a free ball (no paddles) with wall rebounds until it leaves the court.

    Returns (positions, events) where positions holds one sample per step,
    starting with the initial state at t=0.
    """
    ball = initial.copy()
    t = 0.0
    positions = [TraceSample(t=t, pos=ball.pos.copy(), speed=ball.speed)]
    events: list[Event] = []
    steps = int(math.ceil(max_time / dt - 1e-9))

    for _ in range(steps):
        ball.integrate(dt, rules.ball_accel, rules.max_ball_speed)
        t += dt

        out = _check_out_of_bounds(ball, rules, t)
        if out is not None:
            _clamp_vertical(ball, rules)
            events.append(out)
            positions.append(TraceSample(t=t, pos=ball.pos.copy(), speed=ball.speed))
            break

        wall = _check_wall_bounce(ball, rules, t)
        if wall is not None:
            events.append(wall)
        positions.append(TraceSample(t=t, pos=ball.pos.copy(), speed=ball.speed))

    return positions, events
