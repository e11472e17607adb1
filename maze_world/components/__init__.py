"""maze_world.components
=======================

Aggregate import surface for the immutable value objects the engine is built
from::

    from maze_world.components import Edge, Node, Player, Traversal

All components are frozen dataclasses holding ``pyrsistent`` collections;
behavior lives in the ``levels`` (construction) and ``systems`` (transitions)
packages.
"""

from .edge import Edge
from .node import Node
from .player import Player
from .traversal import Traversal

__all__ = [
    "Edge",
    "Node",
    "Player",
    "Traversal",
]
