"""A four-player game of euchre and its command-line front end."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from workbench.euchre.card import Card, Suit, card_less
from workbench.euchre.pack import Pack
from workbench.euchre.player import Player, player_factory

NUM_PLAYERS = 4
TRICKS_PER_HAND = 5
_DEAL_BATCHES = (3, 2, 3, 2, 2, 3, 2, 3)
_PROGRAM = "euchre.exe"
USAGE = (
    "Usage: euchre.exe PACK_FILENAME [shuffle|noshuffle] "
    "POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 "
    "NAME4 TYPE4"
)


def find_trick_winner(trick_cards: Sequence[Card], trump: Suit) -> int:
    """Return the position in ``trick_cards`` of the winning card; the first card was led."""
    led_card = trick_cards[0]
    winner = 0
    for index, card in enumerate(trick_cards[1:], start=1):
        if card_less(trick_cards[winner], card, trump, led_card):
            winner = index
    return winner


class Game:
    """A game between two teams: players 0 and 2 against players 1 and 3."""

    def __init__(
        self,
        pack: Pack,
        shuffle: bool,
        points_to_win: int,
        players: Sequence[Player],
        out: TextIO | None = None,
    ) -> None:
        if len(players) != NUM_PLAYERS:
            raise ValueError(f"euchre needs {NUM_PLAYERS} players, got {len(players)}")
        self._pack = pack
        self._shuffle = shuffle
        self._points_to_win = points_to_win
        self._players = list(players)
        self._out = sys.stdout if out is None else out
        self._dealer = 0
        self._scores = [0, 0]
        self._hand_num = 0
        self._game_over = False

    @property
    def scores(self) -> tuple[int, int]:
        """Points of the team of players 0 and 2, then of players 1 and 3."""
        return self._scores[0], self._scores[1]

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _team_names(self, team: int) -> str:
        return f"{self._players[team].name} and {self._players[team + 2].name}"

    def _seats_after_dealer(self) -> list[int]:
        return [(self._dealer + offset) % NUM_PLAYERS for offset in range(1, NUM_PLAYERS + 1)]

    def _deal(self) -> None:
        self._pack.reset()
        self._print(f"{self._players[self._dealer].name} deals")
        first = (self._dealer + 1) % NUM_PLAYERS
        for batch, count in enumerate(_DEAL_BATCHES):
            player = self._players[(first + batch) % NUM_PLAYERS]
            for _ in range(count):
                player.add_card(self._pack.deal_one())

    def _make_trump(self) -> tuple[Suit, int]:
        """Decide trump; return it with the team that ordered it up."""
        upcard = self._pack.deal_one()
        self._print(f"{upcard} turned up")
        seats = self._seats_after_dealer()

        for seat in seats:
            player = self._players[seat]
            trump = player.make_trump(upcard, False, 1)
            if trump is not None:
                self._print(f"{player.name} orders up {trump}")
                self._print()
                self._players[self._dealer].add_and_discard(upcard)
                return trump, seat % 2
            self._print(f"{player.name} passes")

        for seat in seats[:-1]:
            player = self._players[seat]
            trump = player.make_trump(upcard, False, 2)
            if trump is not None:
                self._print(f"{player.name} orders up {trump}")
                self._print()
                return trump, seat % 2
            self._print(f"{player.name} passes")

        dealer = self._players[self._dealer]
        trump = None
        while trump is None:
            trump = dealer.make_trump(upcard, True, 2)
        self._print(f"{dealer.name} is forced to order up {trump}")
        self._print()
        return trump, self._dealer % 2

    def _play_hand(self) -> None:
        self._print(f"Hand {self._hand_num}")
        if self._shuffle:
            self._pack.shuffle()
        else:
            self._pack.reset()
        self._deal()
        trump, ordering_team = self._make_trump()

        tricks = [0, 0]
        leader = (self._dealer + 1) % NUM_PLAYERS
        for _ in range(TRICKS_PER_HAND):
            lead_player = self._players[leader]
            led_card = lead_player.lead_card(trump)
            trick_cards = [led_card]
            self._print(f"{led_card} led by {lead_player.name}")
            for offset in range(1, NUM_PLAYERS):
                player = self._players[(leader + offset) % NUM_PLAYERS]
                played = player.play_card(led_card, trump)
                trick_cards.append(played)
                self._print(f"{played} played by {player.name}")
            leader = (leader + find_trick_winner(trick_cards, trump)) % NUM_PLAYERS
            self._print(f"{self._players[leader].name} takes the trick")
            tricks[leader % 2] += 1
            self._print()

        winning_team = 0 if tricks[0] > tricks[1] else 1
        self._print(f"{self._team_names(winning_team)} win the hand")
        self._score_hand(tricks, ordering_team)
        self._hand_num += 1

    def _score_hand(self, tricks: list[int], ordering_team: int) -> None:
        won = tricks[ordering_team]
        if won == TRICKS_PER_HAND:
            self._print("march!")
            self._scores[ordering_team] += 2
        elif won in (3, 4):
            self._scores[ordering_team] += 1
        else:
            self._print("euchred!")
            self._scores[1 - ordering_team] += 2
        self._print_score()
        self._check_winner()

    def _print_score(self) -> None:
        for team in (0, 1):
            self._print(f"{self._team_names(team)} have {self._scores[team]} points")
        self._print()

    def _check_winner(self) -> None:
        for team in (0, 1):
            if self._scores[team] >= self._points_to_win:
                self._print(f"{self._team_names(team)} win!")
                self._game_over = True
                return

    def play(self) -> None:
        """Play hands, moving the deal to the left, until a team has enough points."""
        while not self._game_over:
            self._play_hand()
            if self._game_over:
                break
            self._dealer = (self._dealer + 1) % NUM_PLAYERS


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from PACK_FILENAME [shuffle|noshuffle] POINTS_TO_WIN and four NAME TYPE pairs."""
    args = list(sys.argv[1:] if argv is None else argv)
    print(" ".join([_PROGRAM, *args]) + " ")

    if len(args) != 11:
        print(USAGE)
        return 1

    pack_filename = args[0]
    try:
        points_to_win = int(args[2])
    except ValueError:
        print(USAGE)
        return 1
    if not 1 <= points_to_win <= 100:
        print(USAGE)
        return 1

    if args[1] not in ("shuffle", "noshuffle"):
        print(USAGE)
        return 1
    shuffle = args[1] == "shuffle"

    try:
        players = [player_factory(name, kind) for name, kind in zip(args[3::2], args[4::2])]
    except ValueError:
        print(USAGE)
        return 1

    try:
        with open(pack_filename, encoding="utf-8") as pack_file:
            pack = Pack.read(pack_file)
    except OSError:
        print(f"Error opening {pack_filename}")
        return 1
    except ValueError as error:
        print(f"Error reading {pack_filename}: {error}")
        return 1

    Game(pack, shuffle, points_to_win, players).play()
    return 0


if __name__ == "__main__":
    sys.exit(main())