"""Searches over the registered players."""

from __future__ import annotations

from elenco.models import Player


def _require_players(players: list[Player]) -> None:
    if not players:
        raise LookupError("Nenhum jogador cadastrado!")


def _tokens(text: str, separator: str) -> list[str]:
    return [token for token in text.split(separator) if token]


def find_by_name(players: list[Player], name: str) -> list[Player]:
    """Players whose full name or any word of it equals ``name``.

    A player is listed once per matching word. An exact full-name match ends
    the search with that player.
    """
    _require_players(players)
    found: list[Player] = []
    for player in players:
        if player.name == name:
            found.append(player)
            break
        found.extend(player for token in _tokens(player.name, " ") if token == name)
    return found


def find_by_position(players: list[Player], position: str) -> list[Player]:
    """Players with ``position`` among their comma-separated positions."""
    _require_players(players)
    return [
        player
        for player in players
        for token in _tokens(player.positions, ",")
        if token == position
    ]


def find_by_age(players: list[Player], low: int, high: int) -> list[Player]:
    _require_players(players)
    return [player for player in players if low <= player.age <= high]


def find_by_salary(players: list[Player], low: float, high: float) -> list[Player]:
    _require_players(players)
    return [player for player in players if low <= player.salary <= high]


def highest_salary(players: list[Player]) -> Player | None:
    """The first player with the highest positive salary, or None if none earns."""
    _require_players(players)
    best: Player | None = None
    top = 0.0
    for player in players:
        if player.salary > top:
            top = player.salary
            best = player
    return best