import builtins

import pytest

from elenco.models import (
    ACTIVE,
    INACTIVE,
    MEDICAL_RECOVERY,
    SOLD,
    Date,
    Player,
    Team,
)
from elenco.registration import prompt_inactivation, prompt_match, prompt_player


@pytest.fixture
def feed(monkeypatch):
    def _feed(*lines):
        queue = list(lines)

        def fake_input(prompt=""):
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)
        return queue

    return _feed


def make_player(name, admission=Date(1, 1, 2020), salary=100.0):
    return Player(
        name=name,
        positions="ATA",
        age=25,
        height=1.8,
        weight=75.0,
        transfer_value=1000.0,
        acquisition_value=500.0,
        salary=salary,
        admission=admission,
    )


def squad(count, admission=Date(1, 1, 2020)):
    return Team(players=[make_player(f"P{n}", admission) for n in range(count)])


def test_prompt_player_reads_all_fields(feed):
    feed("joão silva", "ata,mei", "25", "1.80", "75.5", "1000", "500", "200", "1/2/2020")
    player = prompt_player()
    assert player.name == "JOÃO SILVA"
    assert player.positions == "ATA,MEI"
    assert player.age == 25
    assert player.height == 1.80
    assert player.weight == 75.5
    assert player.transfer_value == 1000.0
    assert player.acquisition_value == 500.0
    assert player.salary == 200.0
    assert player.admission == Date(1, 2, 2020)
    assert player.status == ACTIVE
    assert not player.has_sale_date()


def test_prompt_player_rejects_bad_age(feed):
    feed("ana", "ata", "abc")
    with pytest.raises(ValueError):
        prompt_player()


def test_prompt_match_needs_players(feed):
    feed()
    with pytest.raises(LookupError):
        prompt_match(Team())


def test_prompt_match_needs_eleven_eligible(feed):
    feed("rival", "casa", "vitoria", "5/5/2021")
    with pytest.raises(LookupError, match="insuficientes"):
        prompt_match(squad(10))


def test_prompt_match_builds_lineup(feed):
    team = squad(12)
    team.players.append(make_player("LATE", Date(1, 1, 2030)))
    picks = [str(n) for n in range(1, 12)]
    feed("rival", "casa", "vitoria", "5/5/2021", *picks, "3")
    match = prompt_match(team)
    assert match.opponent == "RIVAL"
    assert match.venue == "CASA"
    assert match.result == "VITORIA"
    assert match.match_date == Date(5, 5, 2021)
    assert match.lineup == [player.name for player in team.players[:11]]
    assert "LATE" not in match.lineup
    assert match.substitutions == 3


def test_prompt_match_asks_again_on_invalid_pick(feed):
    team = squad(11)
    picks = ["99", "x", *(str(n) for n in range(11, 0, -1))]
    feed("rival", "fora", "empate", "2/3/2021", *picks, "0")
    match = prompt_match(team)
    assert match.lineup == [player.name for player in reversed(team.players)]


def test_prompt_match_excludes_sold_players(feed):
    team = squad(11)
    team.players[0].sell(Date(1, 1, 2021))
    feed("rival", "casa", "derrota", "2/2/2021")
    with pytest.raises(LookupError):
        prompt_match(team)


def test_prompt_inactivation_sells(feed):
    team = squad(2)
    feed("1", "3/4/2022")
    assert prompt_inactivation(team, "P0") == 1
    player = team.players[0]
    assert player.status == INACTIVE
    assert player.inactivity_reason == SOLD
    assert player.salary == 0.0
    assert player.sale == Date(3, 4, 2022)
    assert team.players[1].status == ACTIVE


def test_prompt_inactivation_marks_injured(feed):
    team = squad(1)
    feed("2")
    assert prompt_inactivation(team, "P0") == 1
    assert team.players[0].inactivity_reason == MEDICAL_RECOVERY
    assert team.players[0].salary == 100.0


def test_prompt_inactivation_invalid_option_changes_nothing(feed):
    team = squad(1)
    feed("7")
    assert prompt_inactivation(team, "P0") == 0
    assert team.players[0].status == ACTIVE


def test_prompt_inactivation_unknown_name(feed):
    team = squad(1)
    feed()
    assert prompt_inactivation(team, "NOBODY") == 0


def test_prompt_inactivation_empty_team(feed):
    feed()
    with pytest.raises(LookupError):
        prompt_inactivation(Team(), "P0")