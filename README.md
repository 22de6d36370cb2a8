# elenco

A menu-driven terminal program for keeping a football club's records. It
tracks the squad (players, positions, salaries, transfer values, admission
and sale dates) and the matches played (opponent, venue, date, result,
starting eleven, substitutions). The menus and messages are in Portuguese.

## Running

```
pip install .
elenco
```

By default the program keeps its data in `jogadores.bin` and `partidas.bin`
in the current directory. Other files can be named on the command line:

```
elenco --players meus_jogadores.bin --matches minhas_partidas.bin
```

Despite the `.bin` name, both files hold JSON. They are loaded at start-up;
if one cannot be read, a message is shown and the program starts without
it. They are written back when you leave through the main menu, and also
when input ends (Ctrl-D) or is interrupted (Ctrl-C). A file is written only
when the list it holds has at least one record.

Dates are typed as `day/month/year`, for example `15/3/2024`.

## What it does

**Registration**
- register a player; the player starts out active
- register a match; only players who had been admitted by the match date,
  and had not been sold before it, can be picked for the starting eleven,
  and at least eleven of them are needed
- inactivate a player, either as sold (a sale date is asked for and the
  salary drops to zero) or for medical recovery
- reactivate a player who is not sold

**Reports**, on screen or as `;`-separated CSV files. Each CSV export
(`jogadores.csv`, `jogadores_vendidos.csv`, `partidas.csv`,
`partidas_adversario.csv`, `info_time.csv`) is written to the current
directory and then opened with `xdg-open`:
- all players, and players who were sold
- all matches, and the matches against a given opponent
- the team's value (the sum of the transfer values of every player not
  sold) and its performance index (wins as a share of the matches that
  did not end in a draw; `nan` when every match was a draw)

**Queries**
- players by name: the whole name, or one word of it; an exact match on
  the whole name stops the search at that player
- players by position; a position field may list several positions
  separated by commas
- players by age range and by salary range, both inclusive
- the first player with the highest salary (no one is shown when no
  player has a salary above zero)

Names, positions, opponents and results are upper-cased as they are typed,
so searches from the menus ignore the case you type them in.

## Using it as a library

- `elenco.models`: `Date`, `parse_date`, `compare_dates`, `Player`,
  `Match`, `Performance` and `Team`, which holds the players and matches
  (newest first) and computes `team_value()` and `performance()`.
- `elenco.storage`: `save_players`, `load_players`, `save_matches`,
  `load_matches`, the CSV exports (`export_players_csv`, `export_sold_csv`,
  `export_matches_csv`, `export_opponent_csv`, `export_team_info_csv`) and
  `open_file`. Failures raise `StorageError`.
- `elenco.reports`: text blocks for players, matches, the team value and
  the performance index.
- `elenco.queries`: `find_by_name`, `find_by_position`, `find_by_age`,
  `find_by_salary` and `highest_salary`. They raise `LookupError` when the
  player list is empty.
- `elenco.registration` and `elenco.console`: the interactive prompts and
  menus used by the `elenco` command.

```python
from elenco.models import Team
from elenco.storage import load_players, load_matches, export_team_info_csv

team = Team(players=load_players("jogadores.bin"),
            matches=load_matches("partidas.bin"))

print(team.team_value())
print(team.performance().index())
export_team_info_csv(team, "info_time.csv")
```

## Tests

```
pip install .[test]
pytest
```