"""A falling-block puzzle game with extra piece shapes and a local leaderboard."""

__version__ = "0.1.0"