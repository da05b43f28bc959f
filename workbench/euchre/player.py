"""Euchre players: a rule-based computer player and an interactive human player."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, TextIO

from workbench.euchre.card import Card, Suit, card_less, string_to_suit, suit_next

MAX_HAND_SIZE = 5


def _ordering(trump: Suit, led_card: Card | None = None) -> Callable[[Card], Any]:
    """Return a sort key ranking cards by ``card_less`` under ``trump`` and ``led_card``."""

    def compare(a: Card, b: Card) -> int:
        if card_less(a, b, trump, led_card):
            return -1
        if card_less(b, a, trump, led_card):
            return 1
        return 0

    return cmp_to_key(compare)


class Player(ABC):
    """A named euchre player holding a hand of cards."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand: list[Card] = []

    @property
    def hand(self) -> tuple[Card, ...]:
        """The cards currently held."""
        return tuple(self._hand)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def add_card(self, card: Card) -> None:
        """Take ``card`` into the hand."""
        self._hand.append(card)

    @abstractmethod
    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        """Return the suit ordered up, or None to pass."""

    @abstractmethod
    def add_and_discard(self, upcard: Card) -> None:
        """As dealer, pick up ``upcard`` and discard one card."""

    @abstractmethod
    def lead_card(self, trump: Suit) -> Card:
        """Remove and return the card to lead a trick with."""

    @abstractmethod
    def play_card(self, led_card: Card, trump: Suit) -> Card:
        """Remove and return the card to play after ``led_card`` was led."""

    def _require_cards(self) -> None:
        if not self._hand:
            raise ValueError(f"player {self.name} has no cards")


class SimplePlayer(Player):
    """A computer player following fixed rules."""

    def _count_face_or_ace_trump(self, trump: Suit) -> int:
        return sum(1 for card in self._hand if card.is_face_or_ace() and card.is_trump(trump))

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        if round_number == 1:
            trump = upcard.suit
            return trump if self._count_face_or_ace_trump(trump) >= 2 else None
        trump = suit_next(upcard.suit)
        if is_dealer or self._count_face_or_ace_trump(trump) >= 1:
            return trump
        return None

    def add_and_discard(self, upcard: Card) -> None:
        if len(self._hand) != MAX_HAND_SIZE:
            raise ValueError(
                f"player {self.name} must hold {MAX_HAND_SIZE} cards to pick up, "
                f"holds {len(self._hand)}"
            )
        self._hand.append(upcard)
        self._hand.remove(min(self._hand, key=_ordering(upcard.suit)))

    def lead_card(self, trump: Suit) -> Card:
        self._require_cards()
        non_trump = [card for card in self._hand if not card.is_trump(trump)]
        chosen = max(non_trump or self._hand, key=_ordering(trump))
        self._hand.remove(chosen)
        return chosen

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        self._require_cards()
        led_suit = led_card.suit_with_trump(trump)
        following = [card for card in self._hand if card.suit_with_trump(trump) == led_suit]
        if following:
            chosen = max(following, key=_ordering(trump, led_card))
        else:
            chosen = min(self._hand, key=_ordering(trump))
        self._hand.remove(chosen)
        return chosen


class HumanPlayer(Player):
    """A player whose decisions are read from a text stream."""

    def __init__(
        self, name: str, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        super().__init__(name)
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout
        self._tokens: deque[str] = deque()

    def _read_token(self) -> str:
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError(f"no more input for player {self.name}")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _read_index(self, low: int, high: int) -> int:
        """Read integers until one lies in ``[low, high)``."""
        while True:
            token = self._read_token()
            try:
                value = int(token)
            except ValueError:
                continue
            if low <= value < high:
                return value

    def _print_hand(self) -> None:
        for index, card in enumerate(self._hand):
            print(f"Human player {self.name}'s hand: [{index}] {card}", file=self._out)

    def add_card(self, card: Card) -> None:
        super().add_card(card)
        self._hand.sort()

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        self._print_hand()
        print(f'Human player {self.name}, please enter a suit, or "pass":', file=self._out)
        response = self._read_token()
        if response == "pass":
            return None
        return string_to_suit(response)

    def add_and_discard(self, upcard: Card) -> None:
        if len(self._hand) != MAX_HAND_SIZE:
            raise ValueError(
                f"player {self.name} must hold {MAX_HAND_SIZE} cards to pick up, "
                f"holds {len(self._hand)}"
            )
        self._hand.sort()
        self._print_hand()
        print("Discard upcard: [-1]", file=self._out)
        print(f"Human player {self.name}, please select a card to discard:", file=self._out)
        index = self._read_index(-1, len(self._hand))
        if index == -1:
            return
        del self._hand[index]
        self._hand.append(upcard)
        self._hand.sort()
        print(file=self._out)

    def _choose_card(self) -> Card:
        self._require_cards()
        self._print_hand()
        print(f"Human player {self.name}, please select a card:", file=self._out)
        return self._hand.pop(self._read_index(0, len(self._hand)))

    def lead_card(self, trump: Suit) -> Card:
        return self._choose_card()

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        return self._choose_card()


def player_factory(name: str, strategy: str) -> Player:
    """Return a player called ``name`` of the given strategy, "Human" or "Simple"."""
    if strategy == "Human":
        return HumanPlayer(name)
    if strategy == "Simple":
        return SimplePlayer(name)
    raise ValueError(f"unknown player strategy: {strategy!r}")