"""Tests for geometry, sides and match configuration."""

import pytest

from pongengine.court import DEFAULT_RULES, Rules
from pongengine.types import Rect, Side, Vec2


def test_vec2_arithmetic():
    a = Vec2(1, 2)
    b = Vec2(3, -1)
    assert a + b == Vec2(4, 1)
    assert b - a == Vec2(2, -3)
    assert a * 2 == Vec2(2, 4)
    assert 2 * a == Vec2(2, 4)


def test_vec2_copy_is_independent():
    a = Vec2(1, 2)
    b = a.copy()
    b.x = 10
    assert a.x == 1


def test_rect_edges_and_center():
    r = Rect(10, 20, 30, 40)
    assert (r.left, r.right, r.top, r.bottom) == (10, 40, 20, 60)
    assert r.center == Vec2(25, 40)


def test_rect_intersection():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b) and b.intersects(a)
    assert a.intersect(b) == Rect(5, 5, 5, 5)


def test_touching_rects_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert a.intersect(b) is None


def test_side_toggle_and_names():
    assert Side.LEFT.toggle() is Side.RIGHT
    assert Side.RIGHT.toggle() is Side.LEFT
    assert str(Side.LEFT) == "LEFT"
    assert Side("right") is Side.RIGHT


def test_default_rules_match_classic_game():
    assert (DEFAULT_RULES.court_width, DEFAULT_RULES.court_height) == (800, 600)
    assert (DEFAULT_RULES.paddle_width, DEFAULT_RULES.paddle_height) == (20, 100)
    assert DEFAULT_RULES.win_score == 5
    assert DEFAULT_RULES.max_ball_speed is None


def test_rules_overrides_return_copy():
    rules = DEFAULT_RULES.with_overrides(win_score=11, court_height=400)
    assert rules.win_score == 11
    assert rules.court_height == 400
    assert DEFAULT_RULES.win_score == 5


@pytest.mark.parametrize("overrides", [
    {"court_width": 0},
    {"paddle_speed": -1},
    {"paddle_height": 700},
    {"win_score": 0},
    {"winner_hold": -0.5},
    {"ball_accel": -1},
    {"max_ball_speed": 10},
])
def test_invalid_rules_rejected(overrides):
    with pytest.raises(ValueError):
        Rules(**overrides)
