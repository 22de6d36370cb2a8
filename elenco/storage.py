"""Saving and loading the squad, and exporting it as semicolon-separated files."""

from __future__ import annotations

import json
import os
import subprocess
from collections.abc import Iterable
from dataclasses import asdict
from typing import Union

from elenco.models import INACTIVE, Date, Match, Player, Team

PathLike = Union[str, "os.PathLike[str]"]

PLAYER_HEADER = (
    "NOME;POSIÇÃO;IDADE;ALTURA;PESO;VALOR VENDA;VALOR COMPRA;SALÁRIO;"
    "DATA ADMISSAO;DATA VENDA;ATIVIDADE;RAZÃO INATIVIDADE"
)
MATCH_HEADER = "NOME ADVERSÁRIO;LOCAL;DATA;RESULTADO;ESCALAÇÃO;N° SUBSTITUIÇÕES"
TEAM_INFO_HEADER = (
    "N° VITÓRIAS;N° EMPATES;N° DERROTAS;ÍNDICE DE APROVEITAMENTO;VALOR TIME"
)


class StorageError(Exception):
    """Raised when data cannot be saved, loaded or exported."""


def _write_json(items: list[dict], path: PathLike) -> None:
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(items, handle, ensure_ascii=False)
    except OSError as error:
        raise StorageError(f"Erro ao abrir o arquivo {path}!") from error


def _read_json(path: PathLike) -> list[dict]:
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as error:
        raise StorageError(f"Erro ao abrir o arquivo {path}!") from error
    except ValueError as error:
        raise StorageError(f"Arquivo {path} corrompido!") from error
    if not isinstance(data, list):
        raise StorageError(f"Arquivo {path} corrompido!")
    return data


def save_players(players: Iterable[Player], path: PathLike) -> None:
    """Write the players to ``path`` in list order."""
    _write_json([asdict(player) for player in players], path)


def load_players(path: PathLike) -> list[Player]:
    """Read players from ``path`` in the order they were saved."""
    players = []
    for item in _read_json(path):
        try:
            data = dict(item)
            data["admission"] = Date(**data["admission"])
            data["sale"] = Date(**data["sale"])
            players.append(Player(**data))
        except (KeyError, TypeError, ValueError) as error:
            raise StorageError(f"Arquivo {path} corrompido!") from error
    return players


def save_matches(matches: Iterable[Match], path: PathLike) -> None:
    """Write the matches to ``path`` in list order."""
    _write_json([asdict(match) for match in matches], path)


def load_matches(path: PathLike) -> list[Match]:
    """Read matches from ``path`` in the order they were saved."""
    matches = []
    for item in _read_json(path):
        try:
            data = dict(item)
            data["match_date"] = Date(**data["match_date"])
            matches.append(Match(**data))
        except (KeyError, TypeError, ValueError) as error:
            raise StorageError(f"Arquivo {path} corrompido!") from error
    return matches


def player_csv_row(player: Player) -> str:
    """One player as a semicolon-separated line, without the line break."""
    reason = player.inactivity_reason if player.status == INACTIVE else ""
    return (
        f"{player.name};"
        f'"{player.positions}";'
        f"{player.age};"
        f"{player.height:.2f};"
        f"{player.weight:.2f};"
        f"R${player.transfer_value:.2f};"
        f"R${player.acquisition_value:.2f};"
        f"R${player.salary:.2f};"
        f"{player.admission};"
        f"{player.sale};"
        f"{player.status};"
        f"{reason}"
    )


def match_csv_row(match: Match) -> str:
    """One match as a semicolon-separated line, without the line break."""
    lineup = ", ".join(match.lineup)
    return (
        f"{match.opponent};"
        f"{match.venue};"
        f"{match.match_date};"
        f"{match.result};"
        f"{lineup};"
        f"{match.substitutions}"
    )


def _write_lines(path: PathLike, lines: Iterable[str], *, final_newline: bool = True) -> None:
    text = "\n".join(lines)
    if final_newline:
        text += "\n"
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as error:
        raise StorageError(f"Erro ao abrir o arquivo {path}!") from error


def export_players_csv(players: list[Player], path: PathLike) -> None:
    if not players:
        raise StorageError("Nenhum jogador cadastrado!")
    _write_lines(path, [PLAYER_HEADER, *(player_csv_row(p) for p in players)])


def export_sold_csv(players: list[Player], path: PathLike) -> None:
    if not players:
        raise StorageError("Nenhum jogador cadastrado!")
    rows = (player_csv_row(p) for p in players if p.is_sold())
    _write_lines(path, [PLAYER_HEADER, *rows])


def export_matches_csv(matches: list[Match], path: PathLike) -> None:
    if not matches:
        raise StorageError("Nenhuma partida cadastrada!")
    _write_lines(path, [MATCH_HEADER, *(match_csv_row(m) for m in matches)])


def export_opponent_csv(matches: list[Match], opponent: str, path: PathLike) -> None:
    if not matches:
        raise StorageError("Nenhum partida cadastrada!")
    rows = (match_csv_row(m) for m in matches if m.opponent == opponent)
    _write_lines(path, [MATCH_HEADER, *rows])


def export_team_info_csv(team: Team, path: PathLike) -> None:
    """Write win/draw/loss counts, the performance index and the team value."""
    if not team.matches and not team.players:
        raise StorageError("Não foi possível gerar o arquivo!")
    performance = team.performance()
    values = (
        f"{performance.wins};"
        f"{performance.draws};"
        f"{performance.losses};"
        f"{performance.index():.2f};"
        f"{team.team_value():.2f}"
    )
    _write_lines(path, [TEAM_INFO_HEADER, values], final_newline=False)


def open_file(path: PathLike) -> bool:
    """Open ``path`` with the desktop's default application."""
    try:
        subprocess.run(["xdg-open", os.fspath(path)], check=False)
    except FileNotFoundError:
        return False
    return True