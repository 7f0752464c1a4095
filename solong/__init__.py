"""A tile-based puzzle game: map loading, game rules, a pygame display and small string and buffer helpers."""

__version__ = "0.1.0"