"""Matplotlib analysis charts: frame-rate drift, speed ramp, rebound angles."""

import math
import os

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from pongengine.ball import Ball
from pongengine.court import DEFAULT_RULES, Rules
from pongengine.paddle import Paddle
from pongengine.physics import strike_offset, trace
from pongengine.types import Side, Vec2

FRAME_RATES = [30, 60, 144, 240]


def _style_chart(ax, title, accent="#4ecdc4", background="#0f0f1a"):
    """Dark court-style axes; the accent colours the title and the baseline."""
    ax.set_facecolor(background)
    ax.set_title(title, color=accent, fontsize=12, fontweight="bold", loc="left", pad=10)
    ax.tick_params(colors="#8a8a9a", labelsize=9)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    ax.spines["left"].set_color("#2e2e44")
    ax.spines["bottom"].set_color(accent)
    ax.xaxis.label.set_color("#b0b0c0")
    ax.yaxis.label.set_color("#b0b0c0")


def reference_ball(rules: Rules = DEFAULT_RULES) -> Ball:
    """Centre-court ball heading right and down, used by every chart."""
    x = rules.court_width * 0.5 - rules.ball_size * 0.5
    y = rules.court_height * 0.5 - rules.ball_size * 0.5
    return Ball(pos=Vec2(x, y), direction=Vec2(1.0, 0.6), speed=rules.ball_init_speed)


def frame_rate_drift(rules: Rules = DEFAULT_RULES, frame_rates=FRAME_RATES, max_time: float = 2.0) -> dict:
    """Trace the reference ball at several frame rates.

    Returns {fps: {"x": array, "y": array, "t": array, "final": (x, y)}}.
    """
    results = {}
    for fps in frame_rates:
        positions, _ = trace(reference_ball(rules), rules, dt=1.0 / fps, max_time=max_time)
        xs = np.array([p.pos.x for p in positions])
        ys = np.array([p.pos.y for p in positions])
        ts = np.array([p.t for p in positions])
        results[fps] = {"x": xs, "y": ys, "t": ts, "final": (xs[-1], ys[-1])}
    return results


def chart_frame_rate_drift(save_path=None, rules: Rules = DEFAULT_RULES):
    """Chart 1: the same serve integrated at 30/60/144/240 FPS."""
    results = frame_rate_drift(rules)

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Ball Path vs Frame Rate", accent="#ffc107")

    colors = ["#dc3545", "#ffc107", "#4ecdc4", "#28a745"]
    for color, (fps, r) in zip(colors, results.items()):
        ax.plot(r["x"], r["y"], color=color, linewidth=2, label=f"{fps} FPS")

    ax.set_xlim(0, rules.court_width)
    ax.set_ylim(rules.court_height, 0)  # screen coordinates
    ax.set_xlabel("x (px)")
    ax.set_ylabel("y (px)")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_speed_profile(save_path=None, rules: Rules = DEFAULT_RULES, max_time: float = 60.0):
    """Chart 2: ball speed over a long rally, uncapped vs capped."""
    t = np.linspace(0, max_time, 200)
    uncapped = rules.ball_init_speed + rules.ball_accel * t
    cap = rules.max_ball_speed or rules.ball_init_speed * 3
    capped = np.minimum(uncapped, cap)

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Ball Speed During a Rally", accent="#e94560")

    ax.plot(t, uncapped, color="#e94560", linewidth=2, label="Linear ramp (no cap)")
    ax.plot(t, capped, color="#4ecdc4", linewidth=2, linestyle="--", label=f"Capped at {cap:.0f} px/s")

    ax.set_xlabel("Rally time (s)")
    ax.set_ylabel("Speed (px/s)")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_rebound_angle(save_path=None, rules: Rules = DEFAULT_RULES):
    """Chart 3: exit angle as a function of where the paddle is struck."""
    paddle = Paddle.create(Side.LEFT, rules)
    strike_y = np.linspace(paddle.pos.y - rules.ball_size * 0.5,
                           paddle.pos.y + paddle.height + rules.ball_size * 0.5, 120)
    offsets = np.array([strike_offset(y, paddle) for y in strike_y])
    angles = np.degrees(np.arctan2(offsets, 1.0))

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Rebound Angle vs Strike Position")

    ax.plot(strike_y - paddle.center_y, angles, color="#ffc107", linewidth=2)
    ax.axvline(0, color="#555555", linewidth=1)
    ax.set_xlabel("Ball centre relative to paddle centre (px)")
    ax.set_ylabel("Exit angle (deg, + is downward)")
    ax.set_ylim(-math.degrees(math.atan(1)) - 5, math.degrees(math.atan(1)) + 5)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def generate_all_charts(output_dir="output", rules: Rules = DEFAULT_RULES):
    """Generate every chart as PNG and return the saved paths."""
    os.makedirs(output_dir, exist_ok=True)
    charts = [
        ("frame_rate_drift.png", chart_frame_rate_drift),
        ("speed_profile.png", chart_speed_profile),
        ("rebound_angle.png", chart_rebound_angle),
    ]
    paths = []
    for filename, func in charts:
        path = os.path.join(output_dir, filename)
        fig = func(save_path=path, rules=rules)
        plt.close(fig)
        print(f"  Saved {path}")
        paths.append(path)
    return paths
