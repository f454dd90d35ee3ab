# services/build.py
from datetime import date
from typing import Sequence

from models import FilterState, GameRecord
from normalize import logo_url
from services.filters import filter_games, network_options, team_options, todays_games
from utils.dates import TIMEZONES, format_game_time, parse_game_date


def timezone_options() -> list[dict]:
    return [{"key": tz.key, "label": tz.label, "abbr": tz.abbr} for tz in TIMEZONES]


def game_row(g: GameRecord, tz_key: str, today: date) -> dict:
    """
    Record fields + the derived display fields the UI needs.
    """
    d = parse_game_date(g.date)
    row = g.to_dict()
    row.update({
        "time_display": format_game_time(g.date, g.et, tz_key),
        "team1_logo": logo_url(g.team1),
        "team2_logo": logo_url(g.team2),
        "is_today": d is not None and d == today,
        "is_past": d is not None and d < today,
    })
    return row


def build_view(games: Sequence[GameRecord], state: FilterState, today: date) -> dict:
    visible = filter_games(games, state, today)
    today_list = todays_games(games, today)

    rows = [game_row(g, state.tz, today) for g in visible]
    today_rows = [game_row(g, state.tz, today) for g in today_list]

    return {
        "today": today.isoformat(),
        "state": state.to_dict(),
        "total": len(games),
        "count": len(rows),
        "games": rows,
        "today_count": len(today_rows),
        "today_games": today_rows,
        # option lists always come from the full schedule
        "teams": team_options(games),
        "networks": network_options(games),
        "timezones": timezone_options(),
    }
