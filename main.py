#!/usr/bin/env python3
"""CLI entry point for Pong.

Usage:
    python main.py play [win_score]   Launch the two-player game
    python main.py trace [fps ...]    Print a free-ball trace at each frame rate
    python main.py analyze            Generate physics charts
    python main.py test [pytest args] Run the test suite
"""

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _int_args(default):
    values = []
    for arg in sys.argv[2:]:
        if not arg.isdigit() or int(arg) < 1:
            print(f"ERROR: expected a positive integer, got {arg!r}")
            sys.exit(1)
        values.append(int(arg))
    return values or default


def cmd_play():
    """Launch the game window (W/S left, Up/Down right, Q quit)."""
    from pongengine.court import DEFAULT_RULES
    from pongsim.visualizer import run_visualizer

    win_score = _int_args([DEFAULT_RULES.win_score])[0]
    rules = DEFAULT_RULES.with_overrides(win_score=win_score)

    print("Launching PONG...")
    print(f"First to {rules.win_score}. Controls: W/S left  UP/DOWN right  SPACE replay  Q quit")
    print("-" * 60)
    run_visualizer(rules)


def cmd_trace():
    """Trace a free ball at several frame rates and compare where it ends up."""
    from pongengine.court import DEFAULT_RULES
    from pongengine.physics import trace
    from pongengine.types import OutEvent, WallEvent
    from pongsim.analysis import FRAME_RATES, reference_ball

    rules = DEFAULT_RULES
    frame_rates = _int_args(FRAME_RATES)

    print("=" * 60)
    print("  FREE BALL TRACE")
    print("=" * 60)
    for fps in frame_rates:
        positions, events = trace(reference_ball(rules), rules, dt=1.0 / fps)
        last = positions[-1]
        walls = sum(1 for e in events if isinstance(e, WallEvent))
        out = next((e for e in events if isinstance(e, OutEvent)), None)
        exit_txt = f"out {out.side} at t={out.t:.3f}s" if out else "still in court"
        print(f"  {fps:4d} FPS: {len(positions) - 1:5d} steps, {walls} wall bounces, "
              f"{exit_txt}, final ({last.pos.x:7.2f}, {last.pos.y:7.2f}) "
              f"speed {last.speed:6.2f} px/s")
    print("=" * 60)


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from pongsim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(__file__), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run the pytest suite; extra arguments go straight to pytest."""
    import subprocess
    args = sys.argv[2:] or ["-v"]
    logger.info(f"pytest tests/ {' '.join(args)}")
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", *args],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "play": cmd_play,
    "trace": cmd_trace,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    command = sys.argv[1] if len(sys.argv) > 1 else None
    if command not in COMMANDS:
        print(__doc__)
        if command is not None:
            print(f"Unknown command: {command}")
        sys.exit(1)

    COMMANDS[command]()


if __name__ == "__main__":
    main()
