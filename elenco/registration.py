"""Interactive registration of players, matches and player inactivation."""

from __future__ import annotations

from elenco.console import read_date, read_float, read_int, read_upper
from elenco.models import LINEUP_SIZE, Match, Player, Team

_SELL = 1
_INJURED = 2


def prompt_player() -> Player:
    """Ask for a new player's details; the player starts active and unsold."""
    name = read_upper("Nome do jogador................: ")
    positions = read_upper("Posições do jogador............: ")
    age = read_int("Idade do jogador...............: ")
    height = read_float("Altura do jogador..............: ")
    weight = read_float("Peso do jogador................: ")
    transfer_value = read_float("Valor de passe do jogador......: ")
    acquisition_value = read_float("Valor de aquisição do jogador..: ")
    salary = read_float("Salário do jogador.............: ")
    admission = read_date("Data de admissão...............: ")
    return Player(
        name=name,
        positions=positions,
        age=age,
        height=height,
        weight=weight,
        transfer_value=transfer_value,
        acquisition_value=acquisition_value,
        salary=salary,
        admission=admission,
    )


def _pick_player(eligible: list[Player], slot: int) -> str:
    """Ask for the number of a listed player until a valid one is given."""
    while True:
        try:
            number = read_int(
                f"Digite o número do jogador desejado para a posição {slot}: "
            )
        except ValueError:
            number = 0
        if 1 <= number <= len(eligible):
            return eligible[number - 1].name
        print("Opção inválida!")


def prompt_match(team: Team) -> Match:
    """Ask for a new match and its starting eleven among the eligible players.

    Raises LookupError when the team has no players, or fewer than eleven
    who were in the squad on the match date.
    """
    if not team.players:
        raise LookupError("Não há jogadores para escalação no banco de dados!")

    opponent = read_upper("Nome do time adversário........: ")
    venue = read_upper("Local da partida...............: ")
    result = read_upper("Resultado da partida (DERROTA, EMPATE ou VITORIA): ")
    match_date = read_date("Data da partida................: ")

    eligible = team.eligible_players(match_date)
    if len(eligible) < LINEUP_SIZE:
        raise LookupError(
            f"Quantidade de jogadores insuficientes para a data {match_date}"
        )

    print(f"Jogadores disponíveis para a data {match_date}: ")
    for number, player in enumerate(eligible, start=1):
        print(f"{number} - {player.name}")

    lineup = [_pick_player(eligible, slot) for slot in range(1, LINEUP_SIZE + 1)]
    substitutions = read_int("N° de substituições na partida.: ")

    return Match(
        opponent=opponent,
        venue=venue,
        result=result,
        match_date=match_date,
        lineup=lineup,
        substitutions=substitutions,
    )


def prompt_inactivation(team: Team, name: str) -> int:
    """Sell or bench every player called ``name``; return how many changed."""
    if not team.players:
        raise LookupError("Nenhum jogador cadastrado!")

    changed = 0
    for player in team.players_named(name):
        try:
            option = read_int(
                "Deseja vender(1) ou inativar o jogador por recuperação médica(2): "
            )
        except ValueError:
            option = 0
        if option == _SELL:
            player.sell(read_date("Data de venda: "))
            changed += 1
        elif option == _INJURED:
            player.mark_injured()
            changed += 1
        else:
            print("Opção inválida!")
    return changed