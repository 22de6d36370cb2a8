import pytest

from elenco.models import Date, Match, Performance, Player
from elenco.reports import (
    format_match,
    format_performance,
    format_player,
    format_team_value,
    matches_report,
    opponent_report,
    players_report,
    sold_players_report,
)


def make_player(name="JOAO"):
    return Player(name, "ATA", 25, 1.8, 75.0, 5000.0, 3000.0, 1000.0, Date(1, 2, 2020))


def make_match(opponent="RIVAL"):
    lineup = [f"P{i}" for i in range(1, 12)]
    return Match(opponent, "CASA", "VITORIA", Date(5, 6, 2021), lineup, 2)


def test_format_active_player():
    text = format_player(make_player())
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1] == lines[-1]
    assert set(lines[1]) == {"="}
    assert "Nome do jogador................: JOAO" in lines
    assert "Altura do jogador..............: 1.80m" in lines
    assert not any(line.startswith("Data de venda") for line in lines)
    assert not any(line.startswith("Razão da inatividade") for line in lines)


def test_format_sold_player():
    player = make_player()
    player.sell(Date(3, 4, 2023))
    lines = format_player(player).split("\n")
    assert "Data de venda do jogador.......: 3/4/2023" in lines
    assert "Status do jogador..............: INATIVO" in lines
    assert "Razão da inatividade...........: VENDIDO" in lines


def test_format_injured_player_has_reason_but_no_sale():
    player = make_player()
    player.mark_injured()
    lines = format_player(player).split("\n")
    assert "Razão da inatividade...........: RECUPERAÇÃO MÉDICA" in lines
    assert not any(line.startswith("Data de venda") for line in lines)


def test_format_match_lists_lineup():
    lines = format_match(make_match()).split("\n")
    assert "Jogador 1 - P1" in lines
    assert "Jogador 11 - P11" in lines
    assert sum(line.startswith("Jogador ") for line in lines) == 11
    assert "Quantidade de substituições....: 2" in lines


def test_players_report_holds_every_player():
    players = [make_player("A"), make_player("B")]
    report = players_report(players)
    assert report == format_player(players[0]) + "\n" + format_player(players[1])


def test_empty_reports_raise():
    with pytest.raises(LookupError):
        players_report([])
    with pytest.raises(LookupError):
        sold_players_report([])
    with pytest.raises(LookupError):
        matches_report([])
    with pytest.raises(LookupError):
        opponent_report([], "X")


def test_sold_players_report_filters():
    sold = make_player("SOLD")
    sold.sell(Date(1, 1, 2022))
    report = sold_players_report([make_player("KEEP"), sold])
    assert report == format_player(sold)
    assert sold_players_report([make_player("KEEP")]) == ""


def test_matches_and_opponent_reports():
    matches = [make_match("X"), make_match("Y")]
    assert matches_report(matches).count("Nome adversário") == 2
    assert opponent_report(matches, "Y") == format_match(matches[1])
    assert opponent_report(matches, "Z") == ""


def test_format_team_value():
    assert format_team_value(1234.5) == "\nValor do time é R$1234.50!"


def test_format_performance():
    performance = Performance(wins=1, draws=0, losses=1, matches=2)
    lines = format_performance(performance).split("\n")
    assert lines[1:4] == [
        "N° de VITÓRIAS: 1",
        "N° de EMPATES: 0",
        "N° de DERROTAS: 1",
    ]
    assert lines[4] == (
        f"Índice de aproveitamento do time é {performance.index():.2f} por cento!"
    )