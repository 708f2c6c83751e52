"""Emergency response simulation.

A turn-based console game: incidents are created each round, dispatched to
the one unit able to handle them, and scored.
"""

__version__ = "0.1.0"
