"""Arena simulation game with splitting particles, faiseurs and a chain, shown in a Tk window."""

__version__ = "1.0.0"