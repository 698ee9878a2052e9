"""Tests for build configuration loading and series id strategies."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from series_builder import GameSource
from series_builder.config import load_build_configs, parse_build_config
from series_builder.series_ids import by_matchup, resolve_series_id

REPO_CONFIG = Path(__file__).parent.parent / "series.json"


def write_config(tmp_path: Path, lists: list[dict]) -> str:
    path = tmp_path / "series.json"
    path.write_text(json.dumps({"lists": lists}))
    return str(path)


LIST_CONFIG = {
    "name": "Yankees 2019",
    "description": "Regular season",
    "url_slug": "yankees-2019",
    "type": "series",
    "target_team": "Yankees",
    "team_names": {"NYA": "Yankees"},
    "series": [
        {
            "series_id": "matchup",
            "series_name": "Regular season",
            "games": {"files": ["gl2019"], "teams": ["NYA"], "end_date": "2019-09-29"},
        }
    ],
}


class TestLoadBuildConfigs:
    def test_loads_lists(self, tmp_path: Path) -> None:
        configs = load_build_configs(write_config(tmp_path, [LIST_CONFIG]))
        assert len(configs) == 1

        config = configs[0]
        assert config.name == "Yankees 2019"
        assert config.url_slug == "yankees-2019"
        assert config.type == "series"
        assert config.target_team == "Yankees"
        assert config.team_names == {"NYA": "Yankees"}

        series = config.series[0]
        assert series.series_id is by_matchup
        assert series.series_name == "Regular season"
        assert series.games == GameSource(files=["gl2019"], teams=["NYA"], end_date="2019-09-29")

    def test_optional_fields_default(self) -> None:
        config = parse_build_config(
            {
                "name": "World Series",
                "url_slug": "ws",
                "series": [{"series_id": "single:ws-2019", "games": {"files": ["glws"]}}],
            }
        )
        assert config.description == ""
        assert config.type == "series"
        assert config.target_team is None
        assert config.team_names == {}
        assert config.season_matchups is False
        assert config.series[0].series_name is None
        assert config.series[0].series_id("A-B", "X") == "ws-2019"

    def test_no_series_rejected(self) -> None:
        with pytest.raises(ValueError, match="no series"):
            parse_build_config({"name": "Empty", "url_slug": "empty", "series": []})

    def test_unknown_strategy_rejected(self, tmp_path: Path) -> None:
        bad = {**LIST_CONFIG, "series": [{"series_id": "nope", "games": {"files": []}}]}
        with pytest.raises(ValueError, match="Unknown series id strategy"):
            load_build_configs(write_config(tmp_path, [bad]))

    def test_unknown_source_field_rejected(self) -> None:
        bad = {**LIST_CONFIG, "series": [{"series_id": "matchup", "games": {"file": "gl2019"}}]}
        with pytest.raises(TypeError):
            parse_build_config(bad)

    def test_repository_config_loads(self) -> None:
        configs = load_build_configs(str(REPO_CONFIG))
        assert [c.url_slug for c in configs] == ["yankees-2019", "world-series-2010s"]

    def test_repository_world_series_split_by_season(self) -> None:
        configs = {c.url_slug: c for c in load_build_configs(str(REPO_CONFIG))}
        world_series = configs["world-series-2010s"]
        assert world_series.season_matchups is True
        assert world_series.series[0].series_id is by_matchup


class TestSeriesIds:
    def test_matchup_is_anchored(self) -> None:
        assert by_matchup("BOS-NYA", "NYA201904020") == "bos-nya-nya201904020"

    def test_resolve_named(self) -> None:
        assert resolve_series_id("matchup") is by_matchup

    def test_season_strategy_removed(self) -> None:
        with pytest.raises(ValueError, match="Unknown series id strategy"):
            resolve_series_id("matchup-season")

    def test_single_needs_slug(self) -> None:
        with pytest.raises(ValueError, match="needs a slug"):
            resolve_series_id("single:")
