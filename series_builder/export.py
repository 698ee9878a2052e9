"""JSON output for the page builder."""

from __future__ import annotations

import json
from pathlib import Path

from series_builder import (
    GameList,
    GameLogRecord,
    ListGame,
    SeriesData,
    SeriesGames,
    SeriesListResult,
    SeriesSummary,
    SymmetricWins,
    WinCounts,
)


def list_to_dict(game_list: GameList) -> dict:
    return {
        "listId": game_list.list_id,
        "name": game_list.name,
        "description": game_list.description,
        "type": game_list.type,
    }


def game_to_dict(game: GameLogRecord) -> dict:
    """Convert a full game record to a JSON-serializable dict."""
    return {
        "gameId": game.game_id,
        "date": game.date,
        "gameNumber": game.game_number,
        "dayOfWeek": game.day_of_week,
        "visitingTeam": game.visiting_team,
        "visitingLeague": game.visiting_league,
        "homeTeam": game.home_team,
        "homeLeague": game.home_league,
        "visitingScore": game.visiting_score,
        "homeScore": game.home_score,
        "lengthOuts": game.length_outs,
        "dayNight": game.day_night,
        "parkId": game.park_id,
        "attendance": game.attendance,
        "durationMinutes": game.duration_minutes,
    }


def list_game_to_dict(game: ListGame) -> dict:
    return {
        "id": game.id,
        "matchup": game.matchup,
        "homeTeam": game.home_team,
        "visitingTeam": game.visiting_team,
        "date": game.date,
        "homeScore": game.home_score,
        "visitingScore": game.visiting_score,
    }


def wins_to_dict(wins: WinCounts) -> dict:
    """Serialize win counts as a tagged object keyed by ``mode``."""
    if isinstance(wins, SymmetricWins):
        return {
            "mode": wins.mode,
            "visitingWins": wins.visiting_wins,
            "homeWins": wins.home_wins,
        }
    return {
        "mode": wins.mode,
        "targetTeam": wins.target_team,
        "targetWins": wins.target_wins,
        "otherWins": wins.other_wins,
    }


def summary_to_dict(summary: SeriesSummary) -> dict:
    data = {
        "seriesId": summary.series_id,
        "seriesName": summary.series_name,
        "homeTeam": summary.home_team,
        "visitingTeam": summary.visiting_team,
        "startDate": summary.start_date,
        "endDate": summary.end_date,
        "wins": wins_to_dict(summary.wins),
    }
    if summary.target_team:
        data["targetTeam"] = summary.target_team
    return data


def series_data_to_dict(series_data: SeriesData) -> dict:
    data = {
        "name": series_data.name,
        "urlSlug": series_data.url_slug,
        "series": [summary_to_dict(s) for s in series_data.series],
    }
    if series_data.target_team:
        data["targetTeam"] = series_data.target_team
    return data


def series_games_to_dict(series_games: SeriesGames) -> dict:
    info = series_games.series_info
    return {
        "urlSlug": series_games.url_slug,
        "games": [list_game_to_dict(g) for g in series_games.games],
        "seriesInfo": {
            "seriesName": info.series_name,
            "homeTeam": info.home_team,
            "visitingTeam": info.visiting_team,
            "startDate": info.start_date,
            "endDate": info.end_date,
        },
    }


def _dumps(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_series_output(result: SeriesListResult, output_dir: Path) -> list[tuple[str, str]]:
    """Write the result as JSON files under ``output_dir``.

    Returns ``(key, json_str)`` pairs, keys relative to ``output_dir``, so
    the same payloads can be uploaded elsewhere.

    Series sharing a url slug share one file. Identical payloads (the same
    series listed by two configs) are written once; differing payloads raise
    ValueError before anything is written.
    """
    outputs: list[tuple[str, str]] = [
        ("lists.json", _dumps([list_to_dict(game_list) for game_list in result.lists])),
        ("games.json", _dumps([game_to_dict(g) for g in result.all_games])),
        ("series.json", _dumps([series_data_to_dict(s) for s in result.series_summaries])),
    ]
    written: dict[str, str] = {}
    for series_games in result.series_games:
        key = f"series/{series_games.url_slug}.json"
        json_str = _dumps(series_games_to_dict(series_games))
        if key in written:
            if written[key] != json_str:
                raise ValueError(f"Conflicting series share url slug {series_games.url_slug!r}")
            continue
        written[key] = json_str
        outputs.append((key, json_str))

    for key, json_str in outputs:
        out_path = output_dir / key
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json_str, encoding="utf-8")

    return outputs
