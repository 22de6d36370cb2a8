"""Text reports on players, matches and the team."""

from __future__ import annotations

from collections.abc import Iterable

from elenco.models import ACTIVE, Match, Performance, Player

_RULE = "=" * 71


def format_player(player: Player) -> str:
    """A framed block describing one player."""
    lines = [
        "",
        _RULE,
        f"Nome do jogador................: {player.name}",
        f"Posições do jogador............: {player.positions}",
        f"Idade do jogador...............: {player.age} anos",
        f"Altura do jogador..............: {player.height:.2f}m",
        f"Peso do jogador................: {player.weight:.2f}Kg",
        f"Valor de passe do jogador......: R${player.transfer_value:.2f}",
        f"Valor de aquisição do jogador..: R${player.acquisition_value:.2f}",
        f"Salário do jogador.............: R${player.salary:.2f}",
        f"Data de admissão do jogador....: {player.admission}",
    ]
    if player.sale.month != 0:
        lines.append(f"Data de venda do jogador.......: {player.sale}")
    lines.append(f"Status do jogador..............: {player.status}")
    if player.status != ACTIVE:
        lines.append(f"Razão da inatividade...........: {player.inactivity_reason}")
    lines.append(_RULE)
    return "\n".join(lines)


def format_match(match: Match) -> str:
    """A framed block describing one match."""
    lines = [
        "",
        _RULE,
        f"Nome adversário................: {match.opponent}",
        f"Local da partida...............: {match.venue}",
        f"Resultado da partida...........: {match.result}",
        f"Data da partida................: {match.match_date}",
        "Escalação......................: ",
    ]
    lines.extend(
        f"Jogador {number} - {name}" for number, name in enumerate(match.lineup, start=1)
    )
    lines.append(f"Quantidade de substituições....: {match.substitutions}")
    lines.append(_RULE)
    return "\n".join(lines)


def players_report(players: list[Player]) -> str:
    if not players:
        raise LookupError("Nenhum jogador cadastrado!")
    return "\n".join(format_player(player) for player in players)


def sold_players_report(players: list[Player]) -> str:
    if not players:
        raise LookupError("Nenhum jogador cadastrado!")
    return "\n".join(format_player(player) for player in players if player.is_sold())


def matches_report(matches: list[Match]) -> str:
    if not matches:
        raise LookupError("Nenhuma partida cadastrada!")
    return "\n".join(format_match(match) for match in matches)


def opponent_report(matches: list[Match], opponent: str) -> str:
    if not matches:
        raise LookupError("Não há partidas cadastradas!")
    return "\n".join(
        format_match(match) for match in matches if match.opponent == opponent
    )


def format_team_value(value: float) -> str:
    return f"\nValor do time é R${value:.2f}!"


def format_performance(performance: Performance) -> str:
    return "\n".join(
        [
            f"\nN° de VITÓRIAS: {performance.wins}",
            f"N° de EMPATES: {performance.draws}",
            f"N° de DERROTAS: {performance.losses}",
            f"Índice de aproveitamento do time é {performance.index():.2f} por cento!",
        ]
    )


def _blocks(report: str) -> Iterable[str]:
    return [block for block in report.split("\n\n") if block]