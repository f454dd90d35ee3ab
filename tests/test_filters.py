"""Tests for the hide-past / team / network filters and today's games."""

import unittest
from datetime import date

from models import FilterState, GameRecord
from services.filters import filter_games, network_options, team_options, todays_games
from utils.dates import parse_game_date

TODAY = date(2025, 11, 5)

GAMES = (
    GameRecord(date="10/22/25", team1="Cleveland", team2="New York", et="7:00 PM", tv="ESPN"),
    GameRecord(date="11/4/25", team1="Miami", team2="Charlotte", et="7:30 PM", tv="NBC"),
    GameRecord(date="11/5/25", team1="Milwaukee", team2="Toronto", et="7:30 PM", tv="ESPN"),
    GameRecord(date="11/5/25", team1="LA Clippers", team2="Phoenix", et="9:00 PM", tv="Prime Video"),
    GameRecord(date="TBD", team1="Boston", team2="Toronto", tv="NBA TV"),
    GameRecord(date="11/7/25", team1="Atlanta", team2="Boston", et="7:00 PM", tv="ESPN"),
    GameRecord(),
    GameRecord(date="12/25/25", team1="Houston", team2="L.A. Lakers", et="8:00 PM", tv="ABC/ESPN"),
)


def teams(games):
    return [(g.team1, g.team2) for g in games]


class HidePastTests(unittest.TestCase):
    def test_on_keeps_today_and_later(self):
        out = filter_games(GAMES, FilterState(hide_past=True), TODAY)
        self.assertEqual(
            [g.date for g in out],
            ["11/5/25", "11/5/25", "11/7/25", "12/25/25"],
        )
        for g in out:
            self.assertGreaterEqual(parse_game_date(g.date), TODAY)

    def test_off_skips_date_check_entirely(self):
        out = filter_games(GAMES, FilterState(hide_past=False), TODAY)
        self.assertEqual(list(out), list(GAMES))

    def test_off_only_adds_back(self):
        on = filter_games(GAMES, FilterState(hide_past=True), TODAY)
        off = filter_games(GAMES, FilterState(hide_past=False), TODAY)
        self.assertTrue(all(g in off for g in on))
        added = [g for g in off if g not in on]
        for g in added:
            d = parse_game_date(g.date)
            self.assertTrue(d is None or d < TODAY)


class TeamFilterTests(unittest.TestCase):
    def test_case_insensitive_substring_on_either_team(self):
        out = filter_games(GAMES, FilterState(hide_past=False, team="Boston"), TODAY)
        self.assertEqual(teams(out), [("Boston", "Toronto"), ("Atlanta", "Boston")])

        out = filter_games(GAMES, FilterState(hide_past=False, team="  toR "), TODAY)
        self.assertEqual(teams(out), [("Milwaukee", "Toronto"), ("Boston", "Toronto")])

        out = filter_games(GAMES, FilterState(hide_past=False, team="lakers"), TODAY)
        self.assertEqual(teams(out), [("Houston", "L.A. Lakers")])

    def test_empty_or_sentinel_disables(self):
        for team in ("", "   ", "All Teams", "all teams"):
            with self.subTest(team=team):
                out = filter_games(GAMES, FilterState(hide_past=False, team=team), TODAY)
                self.assertEqual(len(out), len(GAMES))

    def test_all_is_an_ordinary_query(self):
        games = [
            GameRecord(team1="Dallas", team2="Utah"),
            GameRecord(team1="Boston", team2="Miami"),
        ]
        out = filter_games(games, FilterState(hide_past=False, team="all"), TODAY)
        self.assertEqual([g.team1 for g in out], ["Dallas"])

    def test_no_match(self):
        self.assertEqual(filter_games(GAMES, FilterState(hide_past=False, team="Seattle"), TODAY), [])


class NetworkFilterTests(unittest.TestCase):
    def test_exact_match(self):
        out = filter_games(GAMES, FilterState(hide_past=False, network="ESPN"), TODAY)
        self.assertEqual(len(out), 3)
        self.assertTrue(all(g.tv == "ESPN" for g in out))

    def test_no_partial_or_case_folding(self):
        self.assertEqual(filter_games(GAMES, FilterState(hide_past=False, network="espn"), TODAY), [])
        out = filter_games(GAMES, FilterState(hide_past=False, network="ABC/ESPN"), TODAY)
        self.assertEqual(len(out), 1)

    def test_sentinel_disables(self):
        out = filter_games(GAMES, FilterState(hide_past=False, network="all"), TODAY)
        self.assertEqual(len(out), len(GAMES))

    def test_combined_with_team_and_date(self):
        state = FilterState(hide_past=True, team="boston", network="ESPN")
        self.assertEqual(teams(filter_games(GAMES, state, TODAY)), [("Atlanta", "Boston")])

        state = FilterState(hide_past=True, team="toronto", network="ESPN")
        self.assertEqual(teams(filter_games(GAMES, state, TODAY)), [("Milwaukee", "Toronto")])


class TodaysGamesTests(unittest.TestCase):
    def test_exact_calendar_day(self):
        out = todays_games(GAMES, TODAY)
        self.assertEqual(teams(out), [("Milwaukee", "Toronto"), ("LA Clippers", "Phoenix")])

    def test_unparseable_never_included(self):
        self.assertEqual(todays_games([GameRecord(date="TBD"), GameRecord()], TODAY), [])

    def test_no_games_today(self):
        self.assertEqual(todays_games(GAMES, date(2025, 11, 6)), [])


class OptionListTests(unittest.TestCase):
    def test_teams_from_both_columns_deduped_and_sorted(self):
        self.assertEqual(
            team_options(GAMES),
            ["Atlanta", "Boston", "Charlotte", "Cleveland", "Houston", "L.A. Lakers",
             "LA Clippers", "Miami", "Milwaukee", "New York", "Phoenix", "Toronto"],
        )

    def test_networks_sorted_case_insensitively(self):
        games = GAMES + (GameRecord(tv="abc"),)
        self.assertEqual(
            network_options(games),
            ["abc", "ABC/ESPN", "ESPN", "NBA TV", "NBC", "Prime Video"],
        )

    def test_empty_schedule(self):
        self.assertEqual(team_options(()), [])
        self.assertEqual(network_options(()), [])
        self.assertEqual(filter_games((), FilterState(), TODAY), [])
        self.assertEqual(todays_games((), TODAY), [])


if __name__ == "__main__":
    unittest.main()
