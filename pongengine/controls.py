"""Input mapping: raw key names and touch points to abstract intents.

Key names follow pygame.key.name() ("w", "up", "escape", ...), so the
engine itself never needs pygame.
"""

from typing import Iterable

from pongengine.types import Confirm, Intent, MoveDown, MoveUp, Quit, Side

DEFAULT_BINDINGS: dict[str, Intent] = {
    "w": MoveUp(Side.LEFT),
    "s": MoveDown(Side.LEFT),
    "up": MoveUp(Side.RIGHT),
    "down": MoveDown(Side.RIGHT),
    "q": Quit(),
    "escape": Quit(),
    "space": Confirm(),
    "return": Confirm(),
}


def intents_from_keys(
    pressed: Iterable[str],
    bindings: dict[str, Intent] = DEFAULT_BINDINGS,
) -> list[Intent]:
    """Intents for the currently held keys, in binding order.

    Unbound keys are dropped.
    """
    held = {name.lower() for name in pressed}
    return [intent for key, intent in bindings.items() if key in held]


def intents_from_touches(
    touches: Iterable[tuple[float, float]],
    width: float,
    height: float,
) -> list[Intent]:
    """Map touch points to intents.

    The court is split in quadrants: left half drives the LEFT paddle,
    right half the RIGHT one; touching the upper half moves up, the lower
    half moves down. Any touch also counts as a Confirm.
    """
    intents: list[Intent] = []
    for x, y in touches:
        side = Side.LEFT if x < width * 0.5 else Side.RIGHT
        intents.append(MoveUp(side) if y < height * 0.5 else MoveDown(side))
    if intents:
        intents.append(Confirm())
    return intents
