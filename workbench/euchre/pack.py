"""A 24-card euchre pack that deals from the top and can be in-shuffled."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from workbench.euchre.card import Card, Rank, Suit

PACK_SIZE = 24
_SHUFFLE_ROUNDS = 7


class PackEmptyError(IndexError):
    """Raised when dealing from a pack with no cards left."""


def _standard_order() -> list[Card]:
    return [
        Card(rank, suit)
        for suit in Suit
        for rank in Rank
        if rank >= Rank.NINE
    ]


class Pack:
    """A pack of exactly ``PACK_SIZE`` cards with a position of the next card to deal."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self._cards = _standard_order() if cards is None else list(cards)
        if len(self._cards) != PACK_SIZE:
            raise ValueError(f"a pack holds {PACK_SIZE} cards, got {len(self._cards)}")
        self._next = 0

    @classmethod
    def read(cls, stream: TextIO) -> Pack:
        """Read a pack with one card per line; blank lines are ignored."""
        return cls(Card.parse(line) for line in stream if line.strip())

    @property
    def cards(self) -> tuple[Card, ...]:
        """All cards in pack order, dealt or not."""
        return tuple(self._cards)

    def deal_one(self) -> Card:
        """Return the next card and advance past it."""
        if self.is_empty():
            raise PackEmptyError("no cards left in the pack")
        card = self._cards[self._next]
        self._next += 1
        return card

    def reset(self) -> None:
        """Make the first card the next one to be dealt."""
        self._next = 0

    def shuffle(self) -> None:
        """In-shuffle the pack seven times, then reset it."""
        half = PACK_SIZE // 2
        for _ in range(_SHUFFLE_ROUNDS):
            first, second = self._cards[:half], self._cards[half:]
            self._cards = [card for pair in zip(second, first) for card in pair]
        self.reset()

    def is_empty(self) -> bool:
        """Return True if every card has been dealt."""
        return self._next == PACK_SIZE

    def __len__(self) -> int:
        return PACK_SIZE - self._next