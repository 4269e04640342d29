"""Pygame front end: window, frame loop, drawing, input polling."""

import logging
import os
from typing import Optional

try:
    import pygame
except ImportError:
    pygame = None

from pongengine.controls import DEFAULT_BINDINGS, intents_from_keys, intents_from_touches
from pongengine.court import DEFAULT_RULES, Rules
from pongengine.game import Match, snapshot, update
from pongengine.types import Exit, Quit, RacketBounce, Snapshot, WallBounce, Winner
from pongsim.audio import CuePlayer

logger = logging.getLogger(__name__)

FPS = 60

# Colors
BG_COLOR = (0, 0, 0)
FG_COLOR = (255, 255, 255)
FLASH_COLOR = (255, 217, 61)
NET_GRAY = (90, 90, 90)
FPS_GREEN = (40, 167, 69)


def _draw_text_center(surface, font, text, y, color=FG_COLOR):
    img = font.render(text, True, color)
    surface.blit(img, (surface.get_width() // 2 - img.get_width() // 2, int(y - img.get_height() / 2)))


def _draw_net(surface):
    w, h = surface.get_size()
    dash_len, gap = 16, 12
    cy = 0
    while cy < h:
        pygame.draw.line(surface, NET_GRAY, (w // 2, cy), (w // 2, min(cy + dash_len, h)), 2)
        cy += dash_len + gap


def draw_scene(surface, snap: Snapshot, rules: Rules, fonts: dict):
    """Live court: scores, net, paddles and ball."""
    _draw_net(surface)
    _draw_text_center(surface, fonts["score"], f"{snap.scores[0]} - {snap.scores[1]}", 30)

    for x, y in (snap.left_paddle, snap.right_paddle):
        pygame.draw.rect(surface, FG_COLOR, pygame.Rect(x, y, rules.paddle_width, rules.paddle_height))

    ball_color = FLASH_COLOR if isinstance(snap.state, (WallBounce, RacketBounce)) else FG_COLOR
    bx, by = snap.ball
    pygame.draw.rect(surface, ball_color, pygame.Rect(bx, by, rules.ball_size, rules.ball_size))


def draw_winner(surface, snap: Snapshot, rules: Rules, fonts: dict):
    h = surface.get_height()
    _draw_text_center(surface, fonts["banner"], f"{snap.state.side} WON!", h * 0.5)
    _draw_text_center(surface, fonts["prompt"], "(Press SPACE to play again)", h * 0.5 + 100)


def draw(surface, snap: Snapshot, rules: Rules, fonts: dict):
    """Render one snapshot. Exit draws nothing."""
    surface.fill(BG_COLOR)
    if isinstance(snap.state, Exit):
        return
    if isinstance(snap.state, Winner):
        draw_winner(surface, snap, rules, fonts)
    else:
        draw_scene(surface, snap, rules, fonts)


def run_visualizer(rules: Optional[Rules] = None, seed: Optional[int] = None, debug: bool = False):
    """Open the game window and run until Quit or the window is closed."""
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    rules = rules or DEFAULT_RULES
    debug = debug or os.environ.get("PONG_DEBUG") == "1"

    pygame.init()
    width, height = int(rules.court_width), int(rules.court_height)
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("PONG")
    clock = pygame.time.Clock()

    fonts = {
        "score": pygame.font.SysFont("monospace", 56, bold=True),
        "banner": pygame.font.SysFont("monospace", 110, bold=True),
        "prompt": pygame.font.SysFont("monospace", 28),
        "fps": pygame.font.SysFont("monospace", 16),
    }
    key_codes = {name: pygame.key.key_code(name) for name in DEFAULT_BINDINGS}
    audio = CuePlayer()

    match = Match.create(rules, seed)
    fingers = {}
    logger.info(f"Match started, first to {rules.win_score}")

    while True:
        elapsed = clock.tick(FPS) / 1000.0
        closed = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                closed = True
            elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
                fingers[event.finger_id] = (event.x * width, event.y * height)
            elif event.type == pygame.FINGERUP:
                fingers.pop(event.finger_id, None)

        keys = pygame.key.get_pressed()
        pressed = [name for name, code in key_codes.items() if keys[code]]
        intents = intents_from_keys(pressed) + intents_from_touches(fingers.values(), width, height)
        if closed:
            intents.append(Quit())

        update(match, elapsed, intents)
        snap = snapshot(match)
        if isinstance(snap.state, Exit):
            break

        if snap.cue:
            audio.play(snap.cue)

        draw(screen, snap, rules, fonts)
        if debug:
            screen.blit(fonts["fps"].render(f"{clock.get_fps():3.0f} FPS", True, FPS_GREEN), (10, 10))

        pygame.display.flip()

    logger.info(f"Final score {match.scores}")
    pygame.quit()
