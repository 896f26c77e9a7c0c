"""A Flappy Bird style side-scrolling arcade game with a display-free rules engine."""

__version__ = "0.1.0"