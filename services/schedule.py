# services/schedule.py
import csv
import io
import logging
from functools import lru_cache
from pathlib import Path

import requests

from config import Config
from models import GAME_FIELDS, GameRecord

logger = logging.getLogger(__name__)


def _header_key(name: str | None) -> str:
    # "Team 1" -> "team1", "\ufeffDay" -> "day"
    return "".join((name or "").replace("\ufeff", "").split()).lower()


def _cell(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_rows(text: str | None) -> list[GameRecord]:
    """
    Header row + data rows -> GameRecords, in file order.
    Columns are matched by header name; unknown columns are ignored and
    fields without a column come back as None. Rows are never dropped here.
    """
    reader = csv.reader(io.StringIO(text or ""))
    header = next(reader, None)
    if not header:
        return []

    # field -> column index (first matching column wins)
    columns: dict[str, int] = {}
    for idx, name in enumerate(header):
        key = _header_key(name)
        if key in GAME_FIELDS and key not in columns:
            columns[key] = idx

    games = []
    for row in reader:
        if not row:
            continue
        values = {
            field: _cell(row[idx]) if idx < len(row) else None
            for field, idx in columns.items()
        }
        games.append(GameRecord(**values))
    return games


def fetch_schedule_text(source: str, timeout: int = 15) -> str:
    """Read the CSV from an http(s) URL or a local path."""
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=timeout)
        r.raise_for_status()
        r.encoding = r.encoding or "utf-8"
        return r.text
    return Path(source).read_text(encoding="utf-8-sig")


@lru_cache(maxsize=4)
def load_games(source: str, timeout: int = 15) -> tuple[GameRecord, ...]:
    """
    Loads the schedule once per process (per source).
    Fail-soft: a missing/bad source gives an empty schedule, not an error.
    """
    try:
        text = fetch_schedule_text(source, timeout=timeout)
        games = tuple(parse_rows(text))
    except (OSError, requests.RequestException, ValueError, csv.Error) as e:
        logger.warning("Could not load schedule from %s: %s: %s", source, type(e).__name__, e)
        return ()

    logger.info("Loaded %d games from %s", len(games), source)
    return games


def get_games() -> tuple[GameRecord, ...]:
    """FastAPI dependency: the configured schedule."""
    return load_games(Config.SCHEDULE_SOURCE, Config.SCHEDULE_TIMEOUT)
