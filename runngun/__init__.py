"""A side-scrolling run-and-gun game: headless game logic and a pygame front end."""

__version__ = "0.1.0"