# normalize.py
# ---------- Team normalization / logos ----------
import re
import unicodedata

ESPN_LOGO_URL = "https://a.espncdn.com/i/teamlogos/nba/500/{abbr}.png"
LEAGUE_LOGO_URL = "https://a.espncdn.com/i/teamlogos/leagues/500/nba.png"

# schedule display name -> ESPN logo code
TEAM_ABBR = {
    "Atlanta": "atl",
    "Boston": "bos",
    "Brooklyn": "bkn",
    "Charlotte": "cha",
    "Chicago": "chi",
    "Cleveland": "cle",
    "Dallas": "dal",
    "Denver": "den",
    "Detroit": "det",
    "Golden State": "gs",
    "Houston": "hou",
    "Indiana": "ind",
    "L.A. Lakers": "lal",
    "LA Clippers": "lac",
    "Memphis": "mem",
    "Miami": "mia",
    "Milwaukee": "mil",
    "Minnesota": "min",
    "New Orleans": "no",
    "New York": "ny",
    "Oklahoma City": "okc",
    "Orlando": "orl",
    "Philadelphia": "phi",
    "Phoenix": "phx",
    "Portland": "por",
    "Sacramento": "sac",
    "San Antonio": "sa",
    "Toronto": "tor",
    "Utah": "uta",
    "Washington": "wsh",
}


def normalize_team(name: str | None) -> str:
    if not name:
        return ""

    s = name.strip().lower()

    # remove accents
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))

    s = s.replace("-", " ")
    s = re.sub(r"[.'’]", "", s)      # "L.A." -> "la"

    return re.sub(r"\s+", " ", s).strip()


_ABBR_BY_KEY = {normalize_team(name): abbr for name, abbr in TEAM_ABBR.items()}


def team_abbr(team: str | None) -> str | None:
    return _ABBR_BY_KEY.get(normalize_team(team))


def logo_url(team: str | None) -> str | None:
    abbr = team_abbr(team)
    if not abbr:
        return None
    return ESPN_LOGO_URL.format(abbr=abbr)
