"""Player component.

Cursor walking the carved maze. ``trail`` is cosmetic: every location the
player has stood on after a move request.
"""

from dataclasses import dataclass

from pyrsistent import pset
from pyrsistent.typing import PSet

from maze_world.types import Coord


@dataclass(frozen=True)
class Player:
    """Player cursor.

    Attributes:
        position: Current node.
        wrong_moves: Moves whose destination is off the canonical path.
        trail: Nodes visited by the player.
    """

    position: Coord
    wrong_moves: int = 0
    trail: PSet[Coord] = pset()
