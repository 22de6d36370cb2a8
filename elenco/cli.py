"""The interactive squad manager."""

from __future__ import annotations

import argparse

from elenco.console import (
    clear_screen,
    csv_menu,
    main_menu,
    output_menu,
    press_enter,
    queries_menu,
    read_float,
    read_int,
    read_upper,
    registration_menu,
    reports_menu,
)
from elenco.models import Player, Team
from elenco.queries import (
    find_by_age,
    find_by_name,
    find_by_position,
    find_by_salary,
    highest_salary,
)
from elenco.registration import prompt_inactivation, prompt_match, prompt_player
from elenco.reports import (
    format_performance,
    format_player,
    format_team_value,
    matches_report,
    opponent_report,
    players_report,
    sold_players_report,
)
from elenco.storage import (
    StorageError,
    export_matches_csv,
    export_opponent_csv,
    export_players_csv,
    export_sold_csv,
    export_team_info_csv,
    load_matches,
    load_players,
    open_file,
    save_matches,
    save_players,
)

EXIT = 0

PLAYERS_FILE = "jogadores.bin"
MATCHES_FILE = "partidas.bin"

PLAYERS_CSV = "jogadores.csv"
SOLD_CSV = "jogadores_vendidos.csv"
MATCHES_CSV = "partidas.csv"
OPPONENT_CSV = "partidas_adversario.csv"
TEAM_INFO_CSV = "info_time.csv"

_INVALID_OPTION = "\nOpção inválida! Tente novamente!"
_INVALID_INPUT = "\nEntrada inválida!"
_OPPONENT_PROMPT = "\nDigite o nome do time adversário: "
_PLAYER_PROMPT = "\nDigite o nome do jogador: "


def _invalid_option() -> None:
    print(_INVALID_OPTION)
    press_enter()


def _show(message: object) -> None:
    print(message)
    press_enter()


def run_registration(team: Team) -> None:
    """The registration menu: players, matches, inactivation, reactivation."""
    while True:
        option = registration_menu()
        if option == EXIT:
            clear_screen()
            return
        try:
            if option == 1:
                team.add_player(prompt_player())
            elif option == 2:
                team.add_match(prompt_match(team))
            elif option == 3:
                prompt_inactivation(team, read_upper(_PLAYER_PROMPT))
            elif option == 4:
                team.reactivate_player(read_upper(_PLAYER_PROMPT))
            else:
                _invalid_option()
        except LookupError as error:
            _show(f"\n{error}")
        except ValueError:
            _show(_INVALID_INPUT)


def run_reports(team: Team) -> None:
    """The terminal reports menu."""
    while True:
        option = reports_menu()
        if option == EXIT:
            clear_screen()
            return
        try:
            if option == 1:
                print(players_report(team.players))
            elif option == 2:
                print(sold_players_report(team.players))
            elif option == 3:
                print(matches_report(team.matches))
            elif option == 4:
                opponent = read_upper(_OPPONENT_PROMPT)
                print(opponent_report(team.matches, opponent))
            elif option == 5:
                if not team.players:
                    raise LookupError("Nenhum jogador cadastrado!")
                print(format_team_value(team.team_value()))
            elif option == 6:
                if not team.matches:
                    raise LookupError("Nenhuma partida cadastrada!")
                print(format_performance(team.performance()))
            else:
                _invalid_option()
                continue
        except LookupError as error:
            print(f"\n{error}")
        press_enter()


def run_csv(team: Team) -> None:
    """The CSV export menu; each export is opened once written."""
    while True:
        option = csv_menu()
        if option == EXIT:
            clear_screen()
            return
        try:
            if option == 1:
                path = PLAYERS_CSV
                export_players_csv(team.players, path)
            elif option == 2:
                path = SOLD_CSV
                export_sold_csv(team.players, path)
            elif option == 3:
                path = MATCHES_CSV
                export_matches_csv(team.matches, path)
            elif option == 4:
                opponent = read_upper(_OPPONENT_PROMPT)
                path = OPPONENT_CSV
                export_opponent_csv(team.matches, opponent, path)
            elif option == 5:
                path = TEAM_INFO_CSV
                export_team_info_csv(team, path)
            else:
                _invalid_option()
                continue
        except StorageError as error:
            _show(error)
            continue
        open_file(path)


def _run_output(team: Team) -> None:
    while True:
        option = output_menu()
        if option == EXIT:
            clear_screen()
            return
        if option == 1:
            run_reports(team)
        elif option == 2:
            run_csv(team)
        else:
            _invalid_option()


def _query(team: Team, option: int) -> list[Player]:
    if option == 1:
        return find_by_name(team.players, read_upper("\nNome para efetuar a busca: "))
    if option == 2:
        position = read_upper("\nPosição para efetuar a busca: ")
        return find_by_position(team.players, position)
    if option == 3:
        low = read_int("\nDigite a idade mínima: ")
        high = read_int("Digite a idade máxima: ")
        return find_by_age(team.players, low, high)
    if option == 4:
        low_salary = read_float("\nDigite o salário mínimo: ")
        high_salary = read_float("Digite o salário máximo: ")
        return find_by_salary(team.players, low_salary, high_salary)
    best = highest_salary(team.players)
    return [best] if best is not None else []


def run_queries(team: Team) -> None:
    """The player search menu."""
    while True:
        option = queries_menu()
        if option == EXIT:
            clear_screen()
            return
        if option not in (1, 2, 3, 4, 5):
            _invalid_option()
            continue
        try:
            for player in _query(team, option):
                print(format_player(player))
        except LookupError as error:
            print(error)
        except ValueError:
            print(_INVALID_INPUT)
        press_enter()


def _load(team: Team, players_path: str, matches_path: str) -> None:
    try:
        for player in load_players(players_path):
            team.add_player(player)
    except StorageError as error:
        _show(error)
    try:
        for match in load_matches(matches_path):
            team.add_match(match)
    except StorageError as error:
        _show(error)


def _save(team: Team, players_path: str, matches_path: str) -> None:
    try:
        if team.players:
            save_players(team.players, players_path)
        if team.matches:
            save_matches(team.matches, matches_path)
    except StorageError as error:
        print(error)


def main(argv: list[str] | None = None) -> int:
    """Run the squad manager, loading and saving the data files."""
    parser = argparse.ArgumentParser(
        prog="elenco", description="Gerenciador de elenco de um time de futebol."
    )
    parser.add_argument("--players", default=PLAYERS_FILE, help="arquivo de jogadores")
    parser.add_argument("--matches", default=MATCHES_FILE, help="arquivo de partidas")
    args = parser.parse_args(argv)

    team = Team()
    try:
        _load(team, args.players, args.matches)
        while True:
            option = main_menu()
            if option == EXIT:
                clear_screen()
                break
            if option == 1:
                run_registration(team)
            elif option == 2:
                _run_output(team)
            elif option == 3:
                run_queries(team)
            else:
                _invalid_option()
    except (EOFError, KeyboardInterrupt):
        print()
    _save(team, args.players, args.matches)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())