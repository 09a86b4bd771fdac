"""Texas Hold'em simulation: cards and decks, hand evaluation, random players and game rounds."""

__version__ = "0.1.0"