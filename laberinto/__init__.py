"""Console maze game: board, tiles, avatars, movement rules, game rules, terminal view and command."""

__version__ = "0.1.0"