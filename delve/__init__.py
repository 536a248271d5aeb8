"""
project: delve
module: __init__.py
License: MIT

Procedural dungeon level generation: rooms and corridors, cellular-automaton
caves, flood-fill connectivity repair and noise-driven water and grass.
"""

__version__ = "0.1.0"
