# utils/dates.py
import re
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

TZ = ZoneInfo("America/New_York")

# Schedule layouts: "11/5/25" and "7:30 PM"
_GAME_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2})")
_ET_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})\s?([AaPp][Mm])")
_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class TimeZoneOption:
    key: str
    zone: str
    label: str
    abbr: str

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.zone)


TIMEZONES = (
    TimeZoneOption("ET", "America/New_York", "Eastern", "ET"),
    TimeZoneOption("CT", "America/Chicago", "Central", "CT"),
    TimeZoneOption("MT", "America/Denver", "Mountain", "MT"),
    TimeZoneOption("PT", "America/Los_Angeles", "Pacific", "PT"),
    TimeZoneOption("AKT", "America/Anchorage", "Alaska", "AKT"),
    TimeZoneOption("HT", "Pacific/Honolulu", "Hawaii", "HT"),
    TimeZoneOption("UTC", "UTC", "UTC", "UTC"),
)
TIMEZONES_BY_KEY = {tz.key: tz for tz in TIMEZONES}
DEFAULT_TZ_KEY = "ET"


def today_eastern() -> date:
    return datetime.now(TZ).date()


def parse_iso_date(text: str | None) -> date | None:
    """YYYY-MM-DD -> date, or None."""
    s = (text or "").strip()
    if not _ISO_DATE_RE.fullmatch(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def parse_game_date(text: str | None) -> date | None:
    """
    Strict M/D/YY parse ("11/5/25").
    Returns None for anything that doesn't match the layout exactly,
    including impossible dates like 2/30/25.
    """
    m = _GAME_DATE_RE.fullmatch((text or "").strip())
    if not m:
        return None
    month, day, yy = (int(g) for g in m.groups())
    try:
        return date(2000 + yy, month, day)
    except ValueError:
        return None


def format_game_date(d: date) -> str:
    return f"{d.month}/{d.day}/{d.year % 100:02d}"


def _parse_et_clock(text: str | None) -> tuple[int, int] | None:
    m = _ET_CLOCK_RE.fullmatch((text or "").strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if not (1 <= hour <= 12) or minute > 59:
        return None
    pm = m.group(3).upper() == "PM"
    # 12 AM -> 0, 12 PM -> 12
    return (hour % 12) + (12 if pm else 0), minute


def game_instant(date_text: str | None, et_text: str | None) -> datetime | None:
    """
    Combine the schedule date and the Eastern clock into an aware datetime
    anchored to America/New_York. None if either part is missing or bad.
    """
    d = parse_game_date(date_text)
    clock = _parse_et_clock(et_text)
    if d is None or clock is None:
        return None
    hour, minute = clock
    return datetime(d.year, d.month, d.day, hour, minute, tzinfo=TZ)


def resolve_tz(tz_key: str | None) -> TimeZoneOption:
    return TIMEZONES_BY_KEY.get((tz_key or "").strip().upper(), TIMEZONES_BY_KEY[DEFAULT_TZ_KEY])


def format_clock(dt: datetime) -> str:
    """h:mm AM/PM ABBR, abbreviation taken from the tz database for dt."""
    hour = dt.hour % 12 or 12
    marker = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {marker} {dt.tzname()}"


def format_game_time(date_text: str | None, et_text: str | None, tz_key: str | None = DEFAULT_TZ_KEY) -> str:
    """
    Display string for a game's start in the selected zone.
    Falls back to the raw ET text (or "") when the instant can't be built.
    """
    instant = game_instant(date_text, et_text)
    if instant is None:
        return (et_text or "").strip()
    return format_clock(instant.astimezone(resolve_tz(tz_key).tzinfo))
