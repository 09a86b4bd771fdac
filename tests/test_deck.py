import io

import pytest

from holdemsim.deck import (
    Card,
    Deck,
    Rank,
    Suit,
    parse_rank,
    parse_suit,
    print_cards,
    render_cards,
)


def test_suit_conversion():
    assert str(Suit.HEARTS) == "♥"
    assert str(Suit.DIAMONDS) == "♦"
    assert str(Suit.CLUBS) == "♣"
    assert str(Suit.SPADES) == "♠"

    assert parse_suit("♥") is Suit.HEARTS
    assert parse_suit("♦") is Suit.DIAMONDS
    assert parse_suit("♣") is Suit.CLUBS
    assert parse_suit("♠") is Suit.SPADES


def test_rank_conversion():
    assert str(Rank.TWO) == "2"
    assert str(Rank.ACE) == "A"
    assert parse_rank("2") is Rank.TWO
    assert parse_rank("A") is Rank.ACE
    assert parse_rank("10") is Rank.TEN


def test_invalid_suit_raises():
    with pytest.raises(ValueError, match="suit"):
        parse_suit("X")


def test_invalid_rank_raises():
    with pytest.raises(ValueError, match="rank"):
        parse_rank("1")


def test_rank_ordering():
    ranks = [parse_rank(text) for text in ("A", "2", "10", "J", "3")]
    assert sorted(ranks) == [Rank.TWO, Rank.THREE, Rank.TEN, Rank.JACK, Rank.ACE]
    assert max(card.rank for card in Deck().cards) is Rank.ACE
    assert min(card.rank for card in Deck().cards) is Rank.TWO


def test_rank_shift_wraps():
    assert Rank.TWO.shift(1) is Rank.THREE
    assert Rank.KING.shift(1) is Rank.ACE
    assert Rank.ACE.shift(1) is Rank.TWO


def test_deck_creation():
    deck = Deck()
    assert len(deck) == 52
    assert len(set(deck.cards)) == 52


def test_deal_card():
    deck = Deck()
    initial_len = len(deck)
    card = deck.deal()
    assert isinstance(card, Card)
    assert len(deck) == initial_len - 1
    assert card not in deck.cards


def test_deal_empty_deck():
    deck = Deck([])
    assert deck.deal() is None


def test_deal_all_cards_unique():
    deck = Deck()
    dealt = [deck.deal() for _ in range(52)]
    assert len(set(dealt)) == 52
    assert deck.deal() is None


def test_burn_card():
    deck = Deck()
    deck.burn_card()
    assert len(deck) == 51
    empty = Deck([])
    empty.burn_card()
    assert len(empty) == 0


def test_deal_specific():
    deck = Deck()
    card = deck.deal_specific(Rank.QUEEN, Suit.CLUBS)
    assert card == Card(Rank.QUEEN, Suit.CLUBS)
    assert len(deck) == 51
    assert deck.deal_specific(Rank.QUEEN, Suit.CLUBS) is None


def test_card_display_lines():
    lines = Card(Rank.ACE, Suit.HEARTS).display_lines()
    assert lines[0] == "_________"
    assert lines[4] == "|   ♥   |"
    assert lines[1] == "|A      |"
    assert lines[7] == "|______A|"
    assert len(lines) == 8


def test_ten_display_lines():
    lines = Card(Rank.TEN, Suit.SPADES).display_lines()
    assert lines[1] == "|10     |"
    assert lines[7] == "|_____10|"
    assert lines[2:7] == ["| ♠   ♠ |"] * 5


def test_nine_display_lines():
    lines = Card(Rank.NINE, Suit.CLUBS).display_lines()
    assert lines[4] == "| ♣ ♣ ♣ |"
    assert lines[3] == "|   ♣   |"


def test_face_display_lines():
    lines = Card(Rank.KING, Suit.DIAMONDS).display_lines()
    assert lines[2] == "| ♦♦♦♦♦ |"


def test_render_cards_single_row():
    text = render_cards([Card(Rank.TWO, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)])
    lines = text.split("\n")
    assert lines[0] == "_________ _________ "
    assert lines[2] == "|   ♥   | |   ♠   | "
    assert text.endswith("\n")
    assert text.count("\n") == 8


def test_render_cards_wraps_after_thirteen():
    cards = Deck().cards[:14]
    text = render_cards(cards)
    assert text.count("\n") == 16
    first_line = text.split("\n")[0]
    assert first_line == "_________ " * 13


def test_render_empty():
    assert render_cards([]) == ""


def test_print_cards_writes_to_file():
    buffer = io.StringIO()
    cards = [Card(Rank.ACE, Suit.SPADES)]
    print_cards(cards, buffer)
    assert buffer.getvalue() == render_cards(cards)
    assert "|   ♠   |" in buffer.getvalue()