"""Tests for paddle movement and geometry."""

import pytest

from pongengine.court import DEFAULT_RULES
from pongengine.paddle import Paddle
from pongengine.types import Side


def test_paddles_start_centred_at_margins():
    left = Paddle.create(Side.LEFT, DEFAULT_RULES)
    right = Paddle.create(Side.RIGHT, DEFAULT_RULES)
    assert left.pos.x == 20
    assert right.pos.x == 760
    assert left.center_y == right.center_y == 300


def test_slide_scales_with_elapsed_time():
    p = Paddle.create(Side.LEFT, DEFAULT_RULES)
    p.slide(500, 0.1)
    assert p.pos.y == pytest.approx(300)
    p.slide(-500, 0.05)
    assert p.pos.y == pytest.approx(275)


def test_slide_does_not_clamp():
    p = Paddle.create(Side.LEFT, DEFAULT_RULES)
    p.slide(-500, 1.0)
    assert p.pos.y < 0


def test_clamp_to_court():
    p = Paddle.create(Side.RIGHT, DEFAULT_RULES)
    p.slide(-500, 1.0)
    p.clamp_to_court(600)
    assert p.pos.y == 0

    p.slide(500, 5.0)
    p.clamp_to_court(600)
    assert p.pos.y == 500


def test_contact_slab_faces_the_court():
    left = Paddle.create(Side.LEFT, DEFAULT_RULES)
    right = Paddle.create(Side.RIGHT, DEFAULT_RULES)

    slab = left.contact_slab(1.0)
    assert slab.right == left.rect().right
    assert slab.w == 1.0
    assert slab.h == left.height

    slab = right.contact_slab(1.0)
    assert slab.left == right.rect().left
    assert right.inner_x == 760
    assert left.inner_x == 40
