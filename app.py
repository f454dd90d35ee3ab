from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager
from datetime import date

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from config import Config
from models import ALL_NETWORKS, FilterState, GameRecord
from normalize import LEAGUE_LOGO_URL
from routers.debug import router as debug_router
from services.build import build_view, timezone_options
from services.schedule import get_games
from utils.dates import DEFAULT_TZ_KEY, TIMEZONES_BY_KEY, parse_iso_date, today_eastern

logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # load the schedule once up front; a failed load just leaves it empty
    logger.info("Schedule ready: %d games", len(get_games()))
    yield


app = FastAPI(title="Where to Watch NBA Games", lifespan=lifespan)
app.include_router(debug_router)


def get_today() -> date:
    return today_eastern()


def default_tz_key() -> str:
    key = (Config.DEFAULT_TZ or "").strip().upper()
    return key if key in TIMEZONES_BY_KEY else DEFAULT_TZ_KEY


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/ui")


@app.get("/timezones")
def timezones():
    return {"default": default_tz_key(), "timezones": timezone_options()}


@app.get("/games")
def games(
    hide_past: bool = Query(default=True),
    team: str = Query(default=""),
    network: str = Query(default=ALL_NETWORKS),
    tz: str | None = Query(default=None),
    today: str | None = Query(default=None),
    schedule: tuple[GameRecord, ...] = Depends(get_games),
    current_date: date = Depends(get_today),
):
    """
    Filtered schedule for the UI.
      - hide_past: drop games before today (default on)
      - team:      case-insensitive substring on either team ("All Teams" or empty = no filter)
      - network:   exact TV network ("all" = no filter)
      - tz:        display zone key (ET, CT, MT, PT, AKT, HT, UTC)
      - today:     YYYY-MM-DD override for the current date (defaults to today Eastern)
    """
    tz_key = (tz or default_tz_key()).strip().upper()
    if tz_key not in TIMEZONES_BY_KEY:
        raise HTTPException(
            status_code=400,
            detail={"error": "Unknown time zone", "tz": tz, "allowed": list(TIMEZONES_BY_KEY)},
        )

    if today:
        current_date = parse_iso_date(today)
        if current_date is None:
            raise HTTPException(
                status_code=400,
                detail={"error": "today must be YYYY-MM-DD", "today": today},
            )

    state = FilterState(hide_past=hide_past, team=team, network=network, tz=tz_key)
    return build_view(schedule, state, current_date)


@app.get("/ui", response_class=HTMLResponse)
def ui():
    return UI_HTML.replace("__LEAGUE_LOGO__", LEAGUE_LOGO_URL).replace("__DEFAULT_TZ__", default_tz_key())


UI_HTML = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>Where to Watch NBA Games</title>
  <meta name="description" content="Browse the 2025-26 nationally televised NBA schedule with team, network, and timezone filters." />
  <link rel="icon" href="__LEAGUE_LOGO__" />
  <link rel="apple-touch-icon" href="__LEAGUE_LOGO__" />
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 20px; background: #f8fafc; color: #0f172a; }
    .row { display: flex; gap: 12px; flex-wrap: wrap; align-items: center; }
    .header { justify-content: space-between; margin-bottom: 12px; }
    h1 { font-size: 28px; margin: 0 0 6px 0; }
    h2 { font-size: 18px; margin: 18px 0 6px 0; }
    select, input { padding: 7px 9px; font-size: 14px; }
    .muted { color: #64748b; font-size: 12px; }
    .nowrap { white-space: nowrap; }

    .toggle { position: relative; width: 48px; height: 24px; border-radius: 999px; border: 0; cursor: pointer; background: #cbd5e1; transition: background .3s; }
    .toggle.on { background: #0ea5e9; }
    .toggle span { position: absolute; top: 2px; left: 2px; width: 20px; height: 20px; border-radius: 50%; background: #fff; transition: transform .3s; }
    .toggle.on span { transform: translateX(24px); }

    .table-wrap {
      width: 100%;
      overflow: auto;
      -webkit-overflow-scrolling: touch;
      border: 1px solid #e5e5e5;
      border-radius: 10px;
      margin-top: 10px;
      max-height: 70vh;
    }
    table { border-collapse: collapse; width: 100%; min-width: 640px; }
    th, td { padding: 8px; text-align: left; font-size: 14px; }
    thead th { position: sticky; top: 0; z-index: 2; background: #e2e8f0; color: #334155; font-size: 12px; text-transform: uppercase; letter-spacing: .04em; }
    tbody tr:nth-child(odd) { background: #fff; }
    tbody tr:nth-child(even) { background: #f1f5f9; }
    tbody tr.today { background: #e0f2fe; color: #0c4a6e; font-weight: 600; }
    .matchup { display: flex; align-items: center; gap: 6px; }
    .matchup img { width: 20px; height: 20px; object-fit: contain; }
    .vs { color: #64748b; }

    @media (max-width: 640px) {
      body { margin: 12px; }
      th, td { padding: 10px 8px; font-size: 13px; }
      h1 { font-size: 20px; }
    }
  </style>
</head>
<body>
  <div class="row header">
    <div>
      <h1>Where to Watch NBA Games in '25-'26</h1>
      <div class="muted">Nationally televised games &middot; today is <strong><span id="todayLabel"></span></strong></div>
    </div>
    <div class="row">
      <span class="muted">Hide previous dates</span>
      <button id="hidePast" class="toggle on" aria-pressed="true"><span></span></button>
    </div>
  </div>

  <div class="row">
    <input id="team" list="teamList" placeholder="Filter by team" />
    <datalist id="teamList"></datalist>
    <select id="network"><option value="all">All networks</option></select>
    <select id="tz"></select>
  </div>

  <h2>Today's games (<span id="todayCount">0</span>)</h2>
  <div id="todayGames" class="muted"></div>

  <h2>Schedule (<span id="count">0</span>)</h2>
  <div class="table-wrap">
    <table>
      <thead>
        <tr>
          <th>Date</th>
          <th>Day</th>
          <th>Matchup</th>
          <th id="timeHeader">Time</th>
          <th>Network</th>
        </tr>
      </thead>
      <tbody id="tbody"></tbody>
    </table>
  </div>

<script>
  const $ = (id) => document.getElementById(id);

  const state = { hide_past: true, team: "", network: "all", tz: "__DEFAULT_TZ__" };
  let optionsLoaded = false;
  let requestSeq = 0;

  function matchupCell(g) {
    const wrap = document.createElement("div");
    wrap.className = "matchup";
    const side = (name, logo) => {
      if (logo) {
        const img = document.createElement("img");
        img.src = logo;
        img.alt = `${name} logo`;
        wrap.appendChild(img);
      }
      const span = document.createElement("span");
      span.textContent = name || "";
      wrap.appendChild(span);
    };
    side(g.team1, g.team1_logo);
    const vs = document.createElement("span");
    vs.className = "vs";
    vs.textContent = "vs";
    wrap.appendChild(vs);
    side(g.team2, g.team2_logo);
    return wrap;
  }

  function renderOptions(data) {
    if (optionsLoaded) return;
    optionsLoaded = true;

    for (const t of data.teams) {
      const opt = document.createElement("option");
      opt.value = t;
      $("teamList").appendChild(opt);
    }
    for (const n of data.networks) {
      const opt = document.createElement("option");
      opt.value = n;
      opt.textContent = n;
      $("network").appendChild(opt);
    }
    for (const tz of data.timezones) {
      const opt = document.createElement("option");
      opt.value = tz.key;
      opt.textContent = `${tz.label} (${tz.abbr})`;
      if (tz.key === state.tz) opt.selected = true;
      $("tz").appendChild(opt);
    }
  }

  function renderTable(rows) {
    $("tbody").innerHTML = "";
    for (const g of rows) {
      const tr = document.createElement("tr");
      if (g.is_today) tr.className = "today";

      const cells = [g.date || "", g.day || "", null, g.time_display || "", g.tv || ""];
      cells.forEach((text, i) => {
        const td = document.createElement("td");
        if (i === 2) {
          td.appendChild(matchupCell(g));
        } else {
          td.textContent = text;
          if (i === 3) td.className = "nowrap";
        }
        tr.appendChild(td);
      });
      $("tbody").appendChild(tr);
    }
  }

  function renderToday(rows) {
    $("todayGames").innerHTML = "";
    if (!rows.length) {
      $("todayGames").textContent = "No national TV games today.";
      return;
    }
    for (const g of rows) {
      const div = document.createElement("div");
      div.textContent = `${g.team1 || ""} vs ${g.team2 || ""} · ${g.time_display || ""} · ${g.tv || ""}`;
      $("todayGames").appendChild(div);
    }
  }

  async function load() {
    const seq = ++requestSeq;
    const params = new URLSearchParams({
      hide_past: state.hide_past,
      team: state.team,
      network: state.network,
      tz: state.tz,
    });

    let data;
    try {
      const resp = await fetch(`/games?${params}`);
      data = await resp.json();
      // a newer request was issued while this one was in flight
      if (seq !== requestSeq || !resp.ok) return;
    } catch (e) {
      // leave the current view in place
      return;
    }

    renderOptions(data);
    $("todayLabel").textContent = data.today;
    const tz = data.timezones.find((t) => t.key === data.state.tz);
    $("timeHeader").textContent = tz ? `Time (${tz.abbr})` : "Time";
    $("count").textContent = data.count;
    $("todayCount").textContent = data.today_count;
    renderTable(data.games);
    renderToday(data.today_games);
  }

  $("hidePast").addEventListener("click", () => {
    state.hide_past = !state.hide_past;
    $("hidePast").classList.toggle("on", state.hide_past);
    $("hidePast").setAttribute("aria-pressed", String(state.hide_past));
    load();
  });
  $("team").addEventListener("input", (e) => { state.team = e.target.value; load(); });
  $("network").addEventListener("change", (e) => { state.network = e.target.value; load(); });
  $("tz").addEventListener("change", (e) => { state.tz = e.target.value; load(); });

  load();
</script>

</body>
</html>
"""
