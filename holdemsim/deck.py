"""Playing cards, a 52-card deck and ASCII rendering of cards."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, TextIO


class Suit(Enum):
    """The four card suits, valued by their display symbol."""

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """Card ranks, ordered from Two (lowest) to Ace (highest)."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]

    def shift(self, steps: int) -> Rank:
        """Return the rank ``steps`` places higher, wrapping past Ace to Two."""
        return Rank((self.value + steps) % len(Rank))

    def __str__(self) -> str:
        return self.symbol


_RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}
_SYMBOL_RANKS = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}


def parse_suit(text: str) -> Suit:
    """Return the suit whose symbol is ``text``."""
    try:
        return Suit(text)
    except ValueError:
        raise ValueError(f"Invalid value for suit: '{text}'") from None


def parse_rank(text: str) -> Rank:
    """Return the rank whose symbol is ``text``."""
    try:
        return _SYMBOL_RANKS[text]
    except KeyError:
        raise ValueError(f"Invalid value for rank: '{text}'") from None


# Pip layout of the five body rows of a card:
# E empty, C centre pip, P pair of pips, T three pips, F full row of five.
_PIP_LAYOUTS = {
    Rank.ACE: "EECEE",
    Rank.TWO: "CEEEC",
    Rank.THREE: "CECEC",
    Rank.FOUR: "PEEEP",
    Rank.FIVE: "PECEP",
    Rank.SIX: "PEPEP",
    Rank.SEVEN: "PCPEP",
    Rank.EIGHT: "PCPCP",
    Rank.NINE: "PCTCP",
    Rank.TEN: "PPPPP",
    Rank.JACK: "FFFFF",
    Rank.QUEEN: "FFFFF",
    Rank.KING: "FFFFF",
}

_ROW_TEMPLATES = {
    "E": "|       |",
    "C": "|   {s}   |",
    "P": "| {s}   {s} |",
    "T": "| {s} {s} {s} |",
    "F": "| {s}{s}{s}{s}{s} |",
}

CARDS_PER_ROW = 13


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def display_lines(self) -> list[str]:
        """Return the eight lines of this card's ASCII picture."""
        symbol = self.rank.symbol
        body = [
            _ROW_TEMPLATES[code].format(s=self.suit.value)
            for code in _PIP_LAYOUTS[self.rank]
        ]
        return [
            "_________",
            f"|{symbol:<7}|",
            *body,
            f"|{symbol:_>7}|",
        ]

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class Deck:
    """A deck of cards from which cards are dealt at random."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        if cards is None:
            self.cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        else:
            self.cards = list(cards)
        self.rng: random.Random = random.Random()

    def __len__(self) -> int:
        return len(self.cards)

    def _take(self, index: int) -> Card:
        # Remove by swapping in the last card, keeping removal O(1).
        card = self.cards[index]
        last = self.cards.pop()
        if index < len(self.cards):
            self.cards[index] = last
        return card

    def deal(self) -> Card | None:
        """Remove and return a random card, or None if the deck is empty."""
        if not self.cards:
            return None
        return self._take(self.rng.randrange(len(self.cards)))

    def burn_card(self) -> None:
        """Discard a random card; does nothing on an empty deck."""
        if self.cards:
            self._take(self.rng.randrange(len(self.cards)))

    def deal_specific(self, rank: Rank, suit: Suit) -> Card | None:
        """Remove and return the given card, or None if it is not in the deck."""
        for index, card in enumerate(self.cards):
            if card.rank == rank and card.suit == suit:
                return self._take(index)
        return None


def render_cards(cards: Iterable[Card]) -> str:
    """Render cards side by side, thirteen to a row, as printable text."""
    blocks: list[str] = []
    lines = [""] * 8
    count = 0
    for card in cards:
        lines = [line + part + " " for line, part in zip(lines, card.display_lines())]
        count += 1
        if count == CARDS_PER_ROW:
            blocks.append("\n".join(lines) + "\n")
            lines = [""] * 8
            count = 0
    if count:
        blocks.append("\n".join(lines) + "\n")
    return "".join(blocks)


def print_cards(cards: Iterable[Card], file: TextIO | None = None) -> None:
    """Write the rendering of ``cards`` to ``file`` (standard output by default)."""
    out = file if file is not None else sys.stdout
    out.write(render_cards(cards))