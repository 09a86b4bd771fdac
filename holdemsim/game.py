"""A table of randomly playing Texas hold'em players."""

from __future__ import annotations

import argparse
import random
from typing import Sequence, TextIO

from holdemsim.deck import Card, Deck, print_cards
from holdemsim.hands import best_hand
from holdemsim.player import Action, ActionKind, Player, PlayerState

MAX_PLAYERS = 22
COMMUNITY_CARDS = 5
# Community cards visible on the preflop, flop, turn and river.
REVEALED_CARDS = (0, 3, 4, 5)
STREETS = len(REVEALED_CARDS)


def _rank_key(cards: Sequence[Card]) -> tuple[int, ...]:
    return tuple(card.rank for card in cards)


def find_winner(
    community_cards: Sequence[Card],
    players: Sequence[Player],
    file: TextIO | None = None,
) -> int:
    """Return the id of the player with the best hand among those not folded."""
    contenders = [p for p in players if p.state != PlayerState.FOLDED]
    if len(contenders) == 1:
        print("Only one remaining player", file=file)
    if not contenders:
        raise ValueError("no players remain in the hand")

    winners: list[tuple[int, tuple[Card, ...]]] = []
    best_category = None
    for player in contenders:
        cards, category = best_hand([*community_cards, *player.hand])
        if not winners or category > best_category:
            winners = [(player.id, cards)]
            best_category = category
        elif category == best_category:
            mine, theirs = _rank_key(cards), _rank_key(winners[0][1])
            if mine > theirs:
                winners = [(player.id, cards)]
            elif mine == theirs:
                winners.append((player.id, cards))

    winner_id, winning_cards = winners[0]
    print("Winning Hand: ", file=file)
    print_cards(winning_cards, file)
    return winner_id


class Game:
    """A table of players and the rules for dealing and betting a round."""

    def __init__(
        self,
        n_players: int,
        buyin: int,
        rng: random.Random | None = None,
        file: TextIO | None = None,
    ) -> None:
        if n_players > MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players can sit at the table")
        self.players = [Player(i, f"Player {i + 1}", buyin) for i in range(n_players)]
        self.small_blind = 1
        self.big_blind = 2
        self.buyin = buyin
        self.rng = rng if rng is not None else random.Random()
        self.file = file

    def _say(self, text: str) -> None:
        print(text, file=self.file)

    def showdown(
        self,
        community_cards: Sequence[Card],
        pots: Sequence[int],
        all_in_player_ids: Sequence[Sequence[int]],
    ) -> None:
        """Award the street pots, honouring all-in limits, then tidy the table."""
        remaining = list(pots)
        total = sum(remaining)
        self._say("Showdown")
        distributed = 0
        contenders = list(self.players)

        while distributed < total:
            winner_id = find_winner(community_cards, contenders, self.file)
            won = 0
            for street, all_in_ids in enumerate(all_in_player_ids):
                won += remaining[street]
                remaining[street] = 0
                if winner_id in all_in_ids:
                    break
            winner = next(p for p in self.players if p.id == winner_id)
            winner.deal_chips(won, self.file)
            contenders = [p for p in contenders if p.id != winner_id]
            distributed += won

        self.players = [p for p in self.players if p.chips > 0]
        for player in self.players:
            player.reset()

    def _draw(self, deck: Deck) -> Card:
        card = deck.deal()
        if card is None:
            raise RuntimeError("the deck ran out of cards")
        return card

    def play_round(self, dealer: int) -> None:
        """Deal, bet through all streets and settle one hand with ``dealer`` on the button."""
        n_players = len(self.players)
        if n_players <= 1:
            return

        deck = Deck()
        deck.rng = self.rng
        for offset in range(2 * n_players):
            self.players[(dealer + 1 + offset) % n_players].deal_card(self._draw(deck))
        for player in self.players:
            player.display(self.file)

        pots = [0] * STREETS
        all_in_ids: list[list[int]] = [[] for _ in range(STREETS)]
        pot = 0

        for seat, blind in ((1, self.small_blind), (2, self.big_blind)):
            poster = self.players[(dealer + seat) % n_players]
            poster.bet_blind(blind)
            pot += blind
            self._say(f"{poster.name} bet blind {blind}, current_bet: {blind}, pot: {pot}")

        history: list[list[Action]] = [
            [Action(ActionKind.RAISE, self.small_blind)] * 2
        ]
        community = [self._draw(deck) for _ in range(COMMUNITY_CARDS)]
        current_bet = self.big_blind

        for street, revealed in enumerate(REVEALED_CARDS):
            n_active = sum(p.state == PlayerState.ACTIVE for p in self.players)
            if n_active <= 1:
                break
            board = community[:revealed]
            if revealed:
                print_cards(board, self.file)

            if street:
                history.append([])
                position = 1
            else:
                position = 3

            callers = 0
            all_ins = 0
            hand_over = False
            while callers + all_ins < n_active:
                player = self.players[(position + dealer) % n_players]
                position = (position + 1) % n_players
                if player.state != PlayerState.ACTIVE:
                    continue

                player_bet = player.bet
                to_call = current_bet - player_bet
                action = player.act(pot, board, to_call, history, self.rng)

                match action.kind:
                    case ActionKind.CHECK:
                        callers += 1
                        self._say(
                            f"{player.name} checked, current_bet: {current_bet}, pot: {pot}"
                        )
                    case ActionKind.FOLD:
                        n_active -= 1
                        self._say(f"{player.name} folded")
                    case ActionKind.CALL:
                        callers += 1
                        pot += to_call
                        self._say(
                            f"{player.name} called {to_call}, "
                            f"current_bet: {current_bet}, pot: {pot}"
                        )
                    case ActionKind.RAISE:
                        callers = 1
                        pot += action.amount + to_call
                        current_bet += action.amount
                        self._say(
                            f"{player.name} raised {action.amount}, "
                            f"current_bet: {current_bet}, pot: {pot}"
                        )
                    case ActionKind.ALL_IN:
                        all_ins += 1
                        all_in_ids[street].append(player.id)
                        if action.amount > to_call:
                            callers = 0
                            current_bet = action.amount + player_bet
                        pot += action.amount
                        self._say(
                            f"{player.name} went all in for {action.amount}, "
                            f"current_bet: {current_bet}, pot: {pot}"
                        )
                history[street].append(action)

                if n_active <= 1:
                    hand_over = True
                    break
            if hand_over:
                break

            pots[street] = pot
            pot = 0
            self._say(f"Pots: {pots}")

        self.showdown(community, pots, all_in_ids)


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate many rounds of random hold'em at one table."""
    parser = argparse.ArgumentParser(
        prog="holdemsim", description="Simulate rounds of Texas hold'em."
    )
    parser.add_argument("--players", type=int, default=5, help="players at the table")
    parser.add_argument("--buyin", type=int, default=10000, help="starting chips")
    parser.add_argument("--rounds", type=int, default=10000, help="rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        game = Game(args.players, args.buyin, rng=random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))
    for dealer in range(args.rounds):
        game.play_round(dealer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())