# config.py
import os
from pathlib import Path

ROOT = Path(__file__).resolve().parent
DEFAULT_SCHEDULE_PATH = ROOT / "static" / "nba_2025_26_national_tv_schedule.csv"


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    # local path or http(s) URL of the schedule CSV
    SCHEDULE_SOURCE = os.getenv("SCHEDULE_SOURCE", str(DEFAULT_SCHEDULE_PATH))
    SCHEDULE_TIMEOUT = _int_env("SCHEDULE_TIMEOUT", 15)

    DEFAULT_TZ = os.getenv("DEFAULT_TZ", "ET")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
