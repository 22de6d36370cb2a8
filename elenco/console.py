"""Terminal input helpers and the program's menus."""

from __future__ import annotations

import re
import subprocess

from elenco.models import Date, parse_date

INVALID_OPTION = -1

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_PROMPT_OPTION = "Digite a opção desejada: "


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        pass


def read_line(prompt: str) -> str:
    return input(prompt)


def read_upper(prompt: str) -> str:
    return read_line(prompt).upper()


def read_int(prompt: str) -> int:
    """Read a line and return the integer it starts with."""
    text = read_line(prompt)
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def read_float(prompt: str) -> float:
    """Read a line and return the number it starts with."""
    text = read_line(prompt)
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def read_date(prompt: str) -> Date:
    return parse_date(read_line(prompt))


def press_enter() -> None:
    input("\nPressione ENTER para limpar a tela: ")


def _menu(header: str, options: list[str]) -> int:
    clear_screen()
    print(header)
    print("-" * len(header))
    for option in options:
        print(option)
    print()
    try:
        return read_int(_PROMPT_OPTION)
    except ValueError:
        return INVALID_OPTION


def main_menu() -> int:
    return _menu(
        "| MENU PRINCIPAL |",
        ["1. Cadastrar", "2. Relatórios", "3. Consultas", "0. Fechar programa"],
    )


def registration_menu() -> int:
    return _menu(
        "| MENU CADASTRO |",
        [
            "1. Cadastrar jogador",
            "2. Cadastrar partida",
            "3. Inativar jogador",
            "4. Reativar jogador",
            "0. Voltar ao MENU PRINCIPAL",
        ],
    )


def output_menu() -> int:
    return _menu(
        "| MENU TIPO DE SAÍDA |",
        [
            "1. Saída no terminal",
            "2. Saída em formato .csv",
            "0. Voltar ao MENU PRINCIPAL",
        ],
    )


def reports_menu() -> int:
    return _menu(
        "| MENU RELATÓRIOS |",
        [
            "1. Relatório de jogadores",
            "2. Relatório de jogadores vendidos",
            "3. Relatório de partidas",
            "4. Relatório de partidas contra time adversário",
            "5. Valor do time",
            "6. Indíce de aproveitamento do time",
            "0. Voltar ao MENU TIPO DE SAÍDA",
        ],
    )


def csv_menu() -> int:
    return _menu(
        "| MENU RELATÓRIOS .csv|",
        [
            "1. Relatório de jogadores",
            "2. Relatório de jogadores vendidos",
            "3. Relatório de partidas",
            "4. Relatório de partidas contra time adversário",
            "5. Valor do time e indíce de aproveitamento",
            "0. Voltar ao MENU TIPO DE SAÍDA",
        ],
    )


def queries_menu() -> int:
    return _menu(
        "| MENU CONSULTAS |",
        [
            "1. Localizar jogador(es) por nome",
            "2. Localizar jogador(es) por posição",
            "3. Localizar jogador(es) por faixa etária",
            "4. Localizar jogador(es) por faixa salarial",
            "5. Localizar jogador com maior salário",
            "0. Voltar ao MENU PRINCIPAL",
        ],
    )