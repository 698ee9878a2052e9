"""Build configuration loading."""

from __future__ import annotations

import json

from series_builder import GameSource, SeriesBuildConfig, SeriesConfig
from series_builder.series_ids import resolve_series_id


def load_build_configs(path: str = "series.json") -> list[SeriesBuildConfig]:
    """Load series list configurations from JSON file."""
    with open(path) as f:
        data = json.load(f)
    return [parse_build_config(c) for c in data["lists"]]


def parse_build_config(data: dict) -> SeriesBuildConfig:
    """Build a SeriesBuildConfig from its JSON form.

    Series id strategies are referenced by name (see series_ids) because a
    JSON file cannot carry functions.
    """
    series = [
        SeriesConfig(
            series_id=resolve_series_id(s["series_id"]),
            series_name=s.get("series_name"),
            games=GameSource(**s["games"]),
        )
        for s in data["series"]
    ]
    if not series:
        raise ValueError(f"List {data.get('url_slug')!r} has no series configured")

    return SeriesBuildConfig(
        name=data["name"],
        description=data.get("description", ""),
        url_slug=data["url_slug"],
        type=data.get("type", "series"),
        target_team=data.get("target_team"),
        team_names=data.get("team_names", {}),
        season_matchups=data.get("season_matchups", False),
        series=series,
    )
