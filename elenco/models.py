"""Squad data: dates, players, matches and the team that holds them."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from functools import total_ordering

ACTIVE = "ATIVO"
INACTIVE = "INATIVO"
SOLD = "VENDIDO"
MEDICAL_RECOVERY = "RECUPERAÇÃO MÉDICA"

VICTORY = "VITORIA"
DRAW = "EMPATE"
DEFEAT = "DERROTA"

LINEUP_SIZE = 11

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date as typed by the user; all zeros means "not set"."""

    day: int = 0
    month: int = 0
    year: int = 0

    def is_set(self) -> bool:
        return (self.day, self.month, self.year) != (0, 0, 0)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


def parse_date(text: str) -> Date:
    """Parse a ``day/month/year`` date; raise ValueError if it does not match."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return Date(day, month, year)


def compare_dates(first: Date, second: Date) -> int:
    """Return -1, 0 or 1 as ``first`` is before, equal to or after ``second``."""
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


@dataclass
class Player:
    """A player registered in the squad."""

    name: str
    positions: str
    age: int
    height: float
    weight: float
    transfer_value: float
    acquisition_value: float
    salary: float
    admission: Date
    sale: Date = field(default_factory=Date)
    status: str = ACTIVE
    inactivity_reason: str = ""

    def is_active(self) -> bool:
        return self.status == ACTIVE

    def is_sold(self) -> bool:
        return self.inactivity_reason == SOLD

    def has_sale_date(self) -> bool:
        return self.sale.is_set()

    def eligible_on(self, match_date: Date) -> bool:
        """Whether the player was in the squad on ``match_date``."""
        if compare_dates(self.admission, match_date) > 0:
            return False
        if self.has_sale_date() and compare_dates(self.sale, match_date) < 0:
            return False
        return True

    def sell(self, sale_date: Date) -> None:
        self.sale = sale_date
        self.status = INACTIVE
        self.inactivity_reason = SOLD
        self.salary = 0.0

    def mark_injured(self) -> None:
        self.status = INACTIVE
        self.inactivity_reason = MEDICAL_RECOVERY

    def reactivate(self) -> bool:
        """Make the player active again; sold players stay inactive."""
        if self.is_sold():
            return False
        self.status = ACTIVE
        self.inactivity_reason = ""
        return True


@dataclass
class Match:
    """A match played by the team, with its starting eleven."""

    opponent: str
    venue: str
    result: str
    match_date: Date
    lineup: list[str]
    substitutions: int = 0

    def __post_init__(self) -> None:
        self.lineup = list(self.lineup)
        if len(self.lineup) != LINEUP_SIZE:
            raise ValueError(
                f"a lineup needs {LINEUP_SIZE} players, got {len(self.lineup)}"
            )


@dataclass(frozen=True)
class Performance:
    """Win, draw and loss counts over a number of matches."""

    wins: int
    draws: int
    losses: int
    matches: int

    def index(self) -> float:
        """Percentage of wins among the matches that were not draws."""
        counted = self.matches - self.draws
        if counted == 0:
            return math.nan
        return self.wins / counted * 100


@dataclass
class Team:
    """The squad and its matches, most recently added first."""

    players: list[Player] = field(default_factory=list)
    matches: list[Match] = field(default_factory=list)

    def add_player(self, player: Player) -> None:
        self.players.insert(0, player)

    def add_match(self, match: Match) -> None:
        self.matches.insert(0, match)

    def players_named(self, name: str) -> list[Player]:
        return [player for player in self.players if player.name == name]

    def reactivate_player(self, name: str) -> int:
        """Reactivate every unsold player called ``name``; return how many."""
        if not self.players:
            raise LookupError("Nenhum jogador cadastrado!")
        return sum(1 for player in self.players_named(name) if player.reactivate())

    def eligible_players(self, match_date: Date) -> list[Player]:
        return [player for player in self.players if player.eligible_on(match_date)]

    def team_value(self) -> float:
        return sum(
            (player.transfer_value for player in self.players if not player.is_sold()),
            0.0,
        )

    def performance(self) -> Performance:
        results = [match.result for match in self.matches]
        return Performance(
            wins=results.count(VICTORY),
            draws=results.count(DRAW),
            losses=results.count(DEFEAT),
            matches=len(results),
        )