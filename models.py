# models.py
from dataclasses import asdict, dataclass

ALL_TEAMS = "All Teams"
ALL_NETWORKS = "all"

GAME_FIELDS = ("day", "date", "team1", "team2", "local", "et", "tv", "notes")


@dataclass(frozen=True)
class GameRecord:
    """One scheduled game. Any field may be missing (None)."""
    day: str | None = None
    date: str | None = None
    team1: str | None = None
    team2: str | None = None
    local: str | None = None
    et: str | None = None
    tv: str | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FilterState:
    """Snapshot of the user's current filter selections."""
    hide_past: bool = True
    team: str = ""
    network: str = ALL_NETWORKS
    tz: str = "ET"

    def to_dict(self) -> dict:
        return asdict(self)
