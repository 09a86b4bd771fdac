# holdemsim

A small Texas Hold'em simulator. Each round deals cards at random from
a 52-card deck, runs the four betting streets (preflop, flop, turn and
river) with players that pick their actions at random, and settles the
pots at showdown. Hole cards, the board and winning hands are printed
as ASCII art.

## Installation

```
pip install .
```

## Running a simulation

```
holdemsim
```

By default this seats five players with 10,000 chips each and plays
10,000 rounds, moving the dealer button one seat each round. Players
who run out of chips leave the table; once one player is left, the
remaining rounds do nothing. Options:

| Option      | Default | Meaning                         |
|-------------|---------|---------------------------------|
| `--players` | 5       | players at the table (at most 22) |
| `--buyin`   | 10000   | starting chips per player       |
| `--rounds`  | 10000   | rounds to play                  |
| `--seed`    | none    | seed for the random generator   |

```
holdemsim --players 3 --buyin 500 --rounds 50 --seed 7
```

## Using the library

### Cards and decks (`holdemsim.deck`)

```python
from holdemsim.deck import Deck, Rank, Suit, parse_rank, parse_suit, print_cards, render_cards

deck = Deck()                  # full 52-card deck; Deck(cards) starts from given cards
card = deck.deal()             # random card, or None once the deck is empty
ace = deck.deal_specific(Rank.ACE, Suit.SPADES)   # None if that card is gone
deck.burn_card()               # discard a random card
print(len(deck))

print_cards([card, ace])       # ASCII art, at most 13 cards per row
text = render_cards([ace])     # the same picture as a string
parse_rank("Q"), parse_suit("♥")   # ValueError on unknown symbols
```

`Rank` is ordered from `TWO` to `ACE`; `Rank.shift(steps)` moves up
the ranks, wrapping past the ace to the two. `Card.display_lines()`
returns the eight lines of a card's picture.

### Evaluating hands (`holdemsim.hands`)

```python
from holdemsim.deck import Card, Rank, Suit
from holdemsim.hands import HandRank, best_hand, compare_hands

seven = [
    Card(Rank.KING, Suit.SPADES), Card(Rank.KING, Suit.HEARTS),
    Card(Rank.THREE, Suit.DIAMONDS), Card(Rank.TEN, Suit.SPADES),
    Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES),
    Card(Rank.KING, Suit.CLUBS),
]
five, rank = best_hand(seven)
assert rank is HandRank.FULL_HOUSE
```

`best_hand` returns the best five of the cards it is given together
with its `HandRank`. `best_combination`, `best_straight` and
`best_flush` each look for one kind of hand; the last two return
`None` when there is none. Straights may run from the ace up to the
five. `compare_hands(first, second)` takes two seven-card hands and
returns `1`, `-1` or `0`, raising `ValueError` for any other size.

### Players (`holdemsim.player`)

A `Player` records its id, name, chips, hole cards, current bet and
`PlayerState` (`ACTIVE`, `FOLDED`, `ALL_IN`). `Player.act` chooses an
`Action` at random (fold, call, check, raise or all in, with an amount
for raises and all-ins), applies it to the player's stack and returns
it; a `random.Random` can be passed as `rng`. `bet_blind`, `call`,
`raise_bet`, `fold`, `go_all_in`, `deal_card`, `deal_chips` and
`reset` change the player directly.

### Games (`holdemsim.game`)

```python
import io, random
from holdemsim.game import Game

out = io.StringIO()
game = Game(4, 500, rng=random.Random(1), file=out)
for dealer in range(20):
    game.play_round(dealer)
print(len(game.players), "players left")
```

A `Game` takes at most 22 players (more raise `ValueError`), with
small and big blinds of 1 and 2. Output goes to standard output unless
a `file` is given. `find_winner` returns the id of the best hand among
the players who have not folded.

## Limitations

- Every player acts at random; there is no way for a person to play.
- Ties are not split: when two hands are equal, the pot goes to the
  first of them at the table.

## Tests

```
pip install .[test]
pytest
```