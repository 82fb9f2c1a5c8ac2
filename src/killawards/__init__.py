"""Kill-streak milestone rewards for game servers."""

__version__ = "1.0.0"
