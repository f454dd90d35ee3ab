# services/filters.py
from datetime import date
from typing import Iterable

from models import ALL_NETWORKS, ALL_TEAMS, FilterState, GameRecord
from utils.dates import parse_game_date


def _is_all(value: str | None, sentinel: str) -> bool:
    v = (value or "").strip()
    return not v or v.lower() == sentinel.lower()


def passes_date(game: GameRecord, hide_past: bool, today: date) -> bool:
    if not hide_past:
        return True
    d = parse_game_date(game.date)
    # unparseable dates never pass when hiding the past
    return d is not None and d >= today


def passes_team(game: GameRecord, team: str | None) -> bool:
    if _is_all(team, ALL_TEAMS):
        return True
    q = team.strip().lower()
    return any(q in (name or "").lower() for name in (game.team1, game.team2))


def passes_network(game: GameRecord, network: str | None) -> bool:
    if _is_all(network, ALL_NETWORKS):
        return True
    return game.tv == network


def filter_games(games: Iterable[GameRecord], state: FilterState, today: date) -> list[GameRecord]:
    """All active criteria ANDed together; keeps the original order."""
    return [
        g for g in games
        if passes_date(g, state.hide_past, today)
        and passes_team(g, state.team)
        and passes_network(g, state.network)
    ]


def todays_games(games: Iterable[GameRecord], today: date) -> list[GameRecord]:
    return [g for g in games if parse_game_date(g.date) == today]


def _options(values: Iterable[str | None]) -> list[str]:
    distinct = {v for v in values if v}
    return sorted(distinct, key=lambda v: (v.lower(), v))


def team_options(games: Iterable[GameRecord]) -> list[str]:
    names = []
    for g in games:
        names.extend((g.team1, g.team2))
    return _options(names)


def network_options(games: Iterable[GameRecord]) -> list[str]:
    return _options(g.tv for g in games)
