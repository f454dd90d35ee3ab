# routers/debug.py
import os
from fastapi import APIRouter, Depends, HTTPException

from config import Config
from models import GameRecord
from services.schedule import get_games
from utils.dates import parse_game_date

router = APIRouter()


def require_debug():
    if os.getenv("DEBUG", "0") != "1":
        raise HTTPException(status_code=404, detail="Not found")


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/debug/source")
def debug_source(games: tuple[GameRecord, ...] = Depends(get_games)):
    require_debug()
    return {"source": Config.SCHEDULE_SOURCE, "count": len(games)}


@router.get("/debug/rows")
def debug_rows(limit: int = 25, games: tuple[GameRecord, ...] = Depends(get_games)):
    require_debug()
    unparseable = [g.to_dict() for g in games if parse_game_date(g.date) is None]
    return {
        "count": len(games),
        "unparseable_date_count": len(unparseable),
        "unparseable_sample": unparseable[:10],
        "games": [g.to_dict() for g in games[:max(0, limit)]],
    }
