"""Evaluation of the best five-card poker hand out of a set of cards."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from holdemsim.deck import Card, Rank, Suit

HAND_SIZE = 5


class HandRank(IntEnum):
    """Categories of poker hands, ordered from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    TRIPS = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUADS = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


BestHand = tuple[tuple[Card, ...], HandRank]

# How the hand category changes when a group of equal ranks of a given size is added.
_UPGRADES = {
    (HandRank.HIGH_CARD, 2): HandRank.PAIR,
    (HandRank.PAIR, 2): HandRank.TWO_PAIR,
    (HandRank.TRIPS, 2): HandRank.FULL_HOUSE,
    (HandRank.HIGH_CARD, 3): HandRank.TRIPS,
    (HandRank.TRIPS, 3): HandRank.FULL_HOUSE,
    (HandRank.HIGH_CARD, 4): HandRank.QUADS,
}

_FLUSH_SUIT_ORDER = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)


def _by_rank_descending(cards: Iterable[Card]) -> list[Card]:
    return sorted(cards, key=lambda card: card.rank, reverse=True)


def best_combination(cards: Iterable[Card]) -> BestHand:
    """Return the best hand built from cards of equal rank (pairs, trips, quads)."""
    ordered = _by_rank_descending(cards)
    groups: list[list[Card]] = [[] for _ in Rank]
    for card in ordered:
        groups[Rank.ACE - card.rank].append(card)
    # Larger groups first; equal sizes keep the higher rank first.
    groups.sort(key=len, reverse=True)

    hand: list[Card] = []
    category = HandRank.HIGH_CARD
    for group in groups:
        if len(hand) >= HAND_SIZE:
            break
        category = _UPGRADES.get((category, len(group)), category)
        hand.extend(group)

    if len(hand) < HAND_SIZE:
        raise ValueError(f"need at least {HAND_SIZE} cards, got {len(hand)}")
    return tuple(hand[:HAND_SIZE]), category


def best_straight(cards: Iterable[Card]) -> BestHand | None:
    """Return the highest straight in ``cards``, or None if there is none."""
    ordered = _by_rank_descending(cards)
    if not ordered:
        return None
    count = len(ordered)
    run = [ordered[0]]
    # One step past the end wraps back to the first card, allowing Five-to-Ace.
    for position in range(1, count + 1):
        card = ordered[position % count]
        previous = ordered[position - 1]
        if card.rank.shift(1) != previous.rank:
            run.clear()
        run.append(card)
        if len(run) == HAND_SIZE:
            return tuple(run), HandRank.STRAIGHT
    return None


def best_flush(cards: Iterable[Card]) -> BestHand | None:
    """Return the best flush (or straight/royal flush), or None if there is none."""
    ordered = _by_rank_descending(cards)
    for suit in _FLUSH_SUIT_ORDER:
        suited = [card for card in ordered if card.suit == suit]
        if len(suited) < HAND_SIZE:
            continue
        straight = best_straight(suited)
        if straight is None:
            return tuple(suited[:HAND_SIZE]), HandRank.FLUSH
        run, _ = straight
        if run[0].rank == Rank.ACE:
            return run, HandRank.ROYAL_FLUSH
        return run, HandRank.STRAIGHT_FLUSH
    return None


def best_hand(cards: Iterable[Card]) -> BestHand:
    """Return the best five-card hand and its category out of ``cards``."""
    ordered = _by_rank_descending(cards)
    best = best_combination(ordered)
    for candidate in (best_flush(ordered), best_straight(ordered)):
        if candidate is not None and candidate[1] > best[1]:
            best = candidate
    return best


def compare_hands(first: Iterable[Card], second: Iterable[Card]) -> int:
    """Compare two seven-card sets: 1 if the first wins, -1 if it loses, 0 on a tie."""
    first_cards = list(first)
    second_cards = list(second)
    if len(first_cards) != 7 or len(second_cards) != 7:
        raise ValueError("both hands must hold exactly 7 cards")

    first_hand, first_rank = best_hand(first_cards)
    second_hand, second_rank = best_hand(second_cards)
    if first_rank != second_rank:
        return 1 if first_rank > second_rank else -1

    for mine, theirs in zip(first_hand, second_hand):
        if mine.rank != theirs.rank:
            return 1 if mine.rank > theirs.rank else -1
    return 0