"""A two-player shotgun roulette game for bots and humans."""

__version__ = "0.1.0"