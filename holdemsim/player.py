"""Players at the table and the random strategy they act with."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence, TextIO

from holdemsim.deck import Card, print_cards

HOLE_CARDS = 2


class PlayerState(Enum):
    """Whether a player is still betting, has folded or is all in."""

    ACTIVE = "Active"
    FOLDED = "Folded"
    ALL_IN = "AllIn"


class ActionKind(Enum):
    """The kinds of move a player can make."""

    FOLD = "Fold"
    CALL = "Call"
    CHECK = "Check"
    RAISE = "Raise"
    ALL_IN = "AllIn"


@dataclass(frozen=True)
class Action:
    """A move made by a player; ``amount`` is used by raises and all-ins."""

    kind: ActionKind
    amount: int = 0


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


_DEFAULT_RNG = random.Random()


@dataclass
class Player:
    """A seat at the table with a stack of chips and up to two hole cards."""

    id: int
    name: str
    chips: int
    hand: list[Card] = field(default_factory=list)
    state: PlayerState = PlayerState.ACTIVE
    bet: int = 0

    def act(
        self,
        pot: int,
        board: Sequence[Card],
        to_call: int,
        history: Sequence[Sequence[Action]],
        rng: _RandomSource | None = None,
    ) -> Action:
        """Choose and apply a random action given the amount needed to call."""
        rng = rng if rng is not None else _DEFAULT_RNG

        if to_call > 0:
            if self.chips > to_call:
                choice = rng.randrange(100)
                if choice < 40:
                    return self.call(to_call)
                if choice < 70:
                    max_raise = self.chips - to_call
                    if max_raise > 0:
                        amount = rng.randint(1, max(min(max_raise, pot // 2), 1))
                        return self.raise_bet(to_call, amount)
                    return self.call(to_call)
                if choice < 90:
                    return self.fold()
                return self.go_all_in()
            if rng.random() < 0.7:
                return self.go_all_in()
            return self.fold()

        if self.chips > 0:
            choice = rng.randrange(100)
            if choice < 60:
                return Action(ActionKind.CHECK)
            if choice < 90:
                amount = rng.randint(1, max(min(self.chips, pot // 2), 1))
                return self.raise_bet(0, amount)
            return self.go_all_in()

        return Action(ActionKind.CHECK)

    def display(self, file: TextIO | None = None) -> None:
        """Print the player's stack, bet and state followed by the hole cards."""
        if len(self.hand) < HOLE_CARDS:
            raise ValueError(f"{self.name} holds fewer than {HOLE_CARDS} cards")
        print(
            f"{self.name}: Stack: {self.chips}, Bet: {self.bet}, "
            f"State: {self.state.value}",
            file=file,
        )
        print_cards(self.hand[:HOLE_CARDS], file)

    def deal_chips(self, chips: int, file: TextIO | None = None) -> None:
        """Award chips to the player and announce it."""
        print(f"{self.name} got {chips} chips", file=file)
        self.chips += chips

    def deal_card(self, card: Card) -> None:
        """Give the player a hole card."""
        if len(self.hand) >= HOLE_CARDS:
            raise ValueError(f"{self.name} already holds {HOLE_CARDS} cards")
        self.hand.append(card)

    def go_all_in(self) -> Action:
        """Put every remaining chip into the pot."""
        chips = self.chips
        self.chips = 0
        self.state = PlayerState.ALL_IN
        self.bet += chips
        return Action(ActionKind.ALL_IN, chips)

    def fold(self) -> Action:
        """Give up the hand."""
        self.state = PlayerState.FOLDED
        return Action(ActionKind.FOLD)

    def raise_bet(self, call_amount: int, raise_amount: int) -> Action:
        """Call ``call_amount`` and raise by ``raise_amount`` on top of it."""
        self._commit(call_amount + raise_amount)
        return Action(ActionKind.RAISE, raise_amount)

    def call(self, call_amount: int) -> Action:
        """Match the current bet by putting ``call_amount`` more in."""
        self._commit(call_amount)
        return Action(ActionKind.CALL)

    def bet_blind(self, blind: int) -> None:
        """Post a blind, going all in when the stack does not exceed it."""
        if self.chips <= blind:
            self.go_all_in()
            return
        self.bet = blind
        self.chips -= blind

    def reset(self) -> None:
        """Clear the hand, state and bet for the next round."""
        self.hand = []
        self.state = PlayerState.ACTIVE
        self.bet = 0

    def _commit(self, amount: int) -> None:
        if amount > self.chips:
            raise ValueError(
                f"{self.name} cannot put in {amount} chips holding {self.chips}"
            )
        self.bet += amount
        self.chips -= amount