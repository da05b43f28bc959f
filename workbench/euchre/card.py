"""Playing cards for euchre: ranks, suits and trump-aware ordering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    """Card ranks from lowest to highest."""

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

    def __str__(self) -> str:
        return self.name.capitalize()


class Suit(IntEnum):
    """Card suits, in the order used to break ties between equal ranks."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    def __str__(self) -> str:
        return self.name.capitalize()


_RANKS_BY_NAME = {str(rank): rank for rank in Rank}
_SUITS_BY_NAME = {str(suit): suit for suit in Suit}

_NEXT_SUIT = {
    Suit.SPADES: Suit.CLUBS,
    Suit.CLUBS: Suit.SPADES,
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
}


def string_to_rank(text: str) -> Rank:
    """Return the rank named by ``text``, such as ``"Two"`` or ``"Ace"``."""
    try:
        return _RANKS_BY_NAME[text]
    except KeyError:
        raise ValueError(f"invalid rank: {text!r}") from None


def string_to_suit(text: str) -> Suit:
    """Return the suit named by ``text``, such as ``"Spades"``."""
    try:
        return _SUITS_BY_NAME[text]
    except KeyError:
        raise ValueError(f"invalid suit: {text!r}") from None


def suit_next(suit: Suit) -> Suit:
    """Return the other suit of the same colour."""
    return _NEXT_SUIT[Suit(suit)]


@dataclass(frozen=True, order=True)
class Card:
    """A card; plain comparison orders by rank, then suit, ignoring trump."""

    rank: Rank = Rank.TWO
    suit: Suit = Suit.SPADES

    @classmethod
    def parse(cls, text: str) -> Card:
        """Read a card written as ``"Nine of Spades"`` or ``"Nine Spades"``."""
        tokens = text.split()
        if len(tokens) == 3 and tokens[1] == "of":
            rank_name, suit_name = tokens[0], tokens[2]
        elif len(tokens) == 2:
            rank_name, suit_name = tokens
        else:
            raise ValueError(f"invalid card: {text!r}")
        return cls(string_to_rank(rank_name), string_to_suit(suit_name))

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def suit_with_trump(self, trump: Suit) -> Suit:
        """Return the suit, counting the left bower as a trump card."""
        return trump if self.is_left_bower(trump) else self.suit

    def is_face_or_ace(self) -> bool:
        return self.rank >= Rank.JACK

    def is_right_bower(self, trump: Suit) -> bool:
        return self.rank == Rank.JACK and self.suit == trump

    def is_left_bower(self, trump: Suit) -> bool:
        return self.rank == Rank.JACK and self.suit == suit_next(trump)

    def is_trump(self, trump: Suit) -> bool:
        return self.suit == trump or self.is_left_bower(trump)


def card_less(a: Card, b: Card, trump: Suit, led_card: Card | None = None) -> bool:
    """Return True if ``a`` ranks below ``b`` given trump and, optionally, the card led."""
    for outranks in (Card.is_right_bower, Card.is_left_bower, Card.is_trump):
        a_high, b_high = outranks(a, trump), outranks(b, trump)
        if a_high != b_high:
            return b_high
    if led_card is not None:
        a_follows = a.suit == led_card.suit
        b_follows = b.suit == led_card.suit
        if a_follows != b_follows:
            return b_follows
    return a < b