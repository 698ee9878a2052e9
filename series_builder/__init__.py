"""Baseball Series Builder — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Union

SeriesIdFn = Callable[[str, str], str]
"""Series identity function: ``(matchup, anchor_game_id) -> series id``."""


@dataclass
class GameLogRecord:
    """A completed game parsed from a Retrosheet game log."""

    game_id: str
    date: str
    game_number: int
    day_of_week: str
    visiting_team: str
    visiting_league: str
    home_team: str
    home_league: str
    visiting_score: int
    home_score: int
    length_outs: int | None = None
    day_night: str = ""
    park_id: str = ""
    attendance: int | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class ListGame:
    """A game reduced to what list pages display."""

    id: str
    matchup: str
    home_team: str
    visiting_team: str
    date: str
    home_score: int
    visiting_score: int


@dataclass
class SeasonSeries:
    """A contiguous run of games resolved to one series id."""

    series_id: str
    home_team: str
    visiting_team: str
    games: list[ListGame]
    date_start: str
    date_end: str
    anchor_game_id: str
    series_name: str | None = None


@dataclass
class SymmetricWins:
    """Wins split by side: visiting vs home."""

    visiting_wins: int = 0
    home_wins: int = 0
    mode: Literal["symmetric"] = "symmetric"


@dataclass
class TargetWins:
    """Wins of one tracked team vs all of its opponents combined."""

    target_team: str
    target_wins: int = 0
    other_wins: int = 0
    mode: Literal["target"] = "target"


WinCounts = Union[SymmetricWins, TargetWins]


@dataclass
class SeriesSummary:
    series_id: str
    home_team: str
    visiting_team: str
    start_date: str
    end_date: str
    wins: WinCounts
    series_name: str | None = None
    target_team: str | None = None


@dataclass
class SeriesInfo:
    series_name: str | None
    home_team: str
    visiting_team: str
    start_date: str
    end_date: str


@dataclass
class SeriesGames:
    url_slug: str
    games: list[ListGame]
    series_info: SeriesInfo


@dataclass
class GameList:
    list_id: str
    name: str
    description: str
    type: Literal["series", "series-group"]


@dataclass
class SeriesData:
    """All series summaries produced by one top-level configuration."""

    name: str
    url_slug: str
    series: list[SeriesSummary] = field(default_factory=list)
    target_team: str | None = None


@dataclass
class GameSource:
    """Where to read raw games from and which of them to keep."""

    files: list[str]
    teams: list[str] = field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None


@dataclass
class SeriesConfig:
    series_id: SeriesIdFn
    games: GameSource
    series_name: str | None = None


@dataclass
class SeriesBuildConfig:
    """Configuration for one generated list of series."""

    name: str
    description: str
    url_slug: str
    type: str
    series: list[SeriesConfig]
    target_team: str | None = None
    team_names: dict[str, str] = field(default_factory=dict)
    season_matchups: bool = False


@dataclass
class SeriesListResult:
    """The four collections handed to the page builder."""

    lists: list[GameList] = field(default_factory=list)
    all_games: list[GameLogRecord] = field(default_factory=list)
    series_summaries: list[SeriesData] = field(default_factory=list)
    series_games: list[SeriesGames] = field(default_factory=list)
