"""Split ordered games into contiguous series and aggregate them into lists.

Callers must pass games in chronological order with scores present; nothing
here validates either.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from series_builder import (
    GameList,
    GameLogRecord,
    GameSource,
    ListGame,
    SeasonSeries,
    SeriesBuildConfig,
    SeriesConfig,
    SeriesData,
    SeriesGames,
    SeriesIdFn,
    SeriesInfo,
    SeriesListResult,
    SeriesSummary,
    SymmetricWins,
    TargetWins,
    WinCounts,
)
from series_builder import gamelogs

GameGenerator = Callable[[GameSource], Awaitable[list[GameLogRecord]]]
ListGameConverter = Callable[[GameLogRecord, SeriesBuildConfig], ListGame]


def _start_series(series_id: str, game: ListGame, series_name: str | None) -> SeasonSeries:
    return SeasonSeries(
        series_id=series_id,
        series_name=series_name,
        home_team=game.home_team,
        visiting_team=game.visiting_team,
        games=[game],
        date_start=game.date,
        date_end=game.date,
        anchor_game_id=game.id,
    )


def _end_series(series: SeasonSeries) -> None:
    series.date_end = series.games[-1].date


def build_series(
    id_fn: SeriesIdFn,
    games: list[ListGame],
    series_name: str | None = None,
) -> list[SeasonSeries]:
    """Group consecutive games into series in a single forward pass.

    A game joins the open series when ``id_fn`` evaluated with the open
    series' anchor (its first game id) reproduces the open series id.
    Otherwise the open series is closed and a new one starts, anchored on
    the game's own id.
    """
    series: list[SeasonSeries] = []

    for game in games:
        if not series:
            series.append(_start_series(id_fn(game.matchup, game.id), game, series_name))
            continue

        current = series[-1]
        game_series_id = id_fn(game.matchup, current.anchor_game_id)

        if game_series_id == current.series_id:
            current.games.append(game)
        else:
            _end_series(current)
            current = _start_series(id_fn(game.matchup, game.id), game, series_name)
            series.append(current)

        # The last series never sees a closing game, so keep date_end current.
        _end_series(current)

    return series


def count_symmetric_wins(games: list[ListGame]) -> SymmetricWins:
    """Count wins by side. Ties credit neither side."""
    wins = SymmetricWins()
    for game in games:
        if game.visiting_score > game.home_score:
            wins.visiting_wins += 1
        elif game.home_score > game.visiting_score:
            wins.home_wins += 1
    return wins


def count_target_wins(games: list[ListGame], target_team: str) -> TargetWins:
    """Count wins for ``target_team`` against everyone else. Ties credit neither."""
    wins = TargetWins(target_team=target_team)
    for game in games:
        if game.visiting_score > game.home_score:
            winner = game.visiting_team
        elif game.home_score > game.visiting_score:
            winner = game.home_team
        else:
            continue

        if winner == target_team:
            wins.target_wins += 1
        else:
            wins.other_wins += 1
    return wins


def get_win_counts(games: list[ListGame], target_team: str | None = None) -> WinCounts:
    if target_team:
        return count_target_wins(games, target_team)
    return count_symmetric_wins(games)


async def generate_series(
    series_config: SeriesConfig,
    build_config: SeriesBuildConfig,
    generate_games: GameGenerator = gamelogs.generate_games,
    convert: ListGameConverter = gamelogs.convert_to_list_game,
) -> tuple[list[SeasonSeries], list[GameLogRecord]]:
    """Fetch one sub-config's games and segment them into series."""
    full_games = await generate_games(series_config.games)
    list_games = [convert(game, build_config) for game in full_games]
    season_series = build_series(
        series_config.series_id,
        list_games,
        series_config.series_name,
    )
    return season_series, full_games


def _list_type(config_type: str) -> str:
    return "series" if config_type == "series" else "series-group"


async def build_series_list(
    configs: list[SeriesBuildConfig],
    *,
    generate_games: GameGenerator = gamelogs.generate_games,
    convert: ListGameConverter = gamelogs.convert_to_list_game,
) -> SeriesListResult:
    """Build every configured list concurrently.

    Output order across configs follows completion order; within one config
    it follows sub-config order, then segmentation order. The first failure
    from game generation propagates and no result is returned.
    """
    result = SeriesListResult()

    async def build_one(config: SeriesBuildConfig) -> None:
        # Appended before the first await so a config's list entry always
        # precedes its series output.
        result.lists.append(
            GameList(
                list_id=config.url_slug,
                name=config.name,
                description=config.description,
                type=_list_type(config.type),
            )
        )

        generated = await asyncio.gather(
            *(generate_series(s, config, generate_games, convert) for s in config.series)
        )

        series_data = SeriesData(
            name=config.name,
            url_slug=config.url_slug,
            target_team=config.target_team,
        )
        for season_series, full_games in generated:
            result.all_games.extend(full_games)

            for s in season_series:
                series_data.series.append(
                    SeriesSummary(
                        series_id=s.series_id,
                        series_name=s.series_name,
                        home_team=s.home_team,
                        visiting_team=s.visiting_team,
                        start_date=s.date_start,
                        end_date=s.date_end,
                        target_team=config.target_team,
                        wins=get_win_counts(s.games, config.target_team),
                    )
                )
                result.series_games.append(
                    SeriesGames(
                        url_slug=s.series_id,
                        games=s.games,
                        series_info=SeriesInfo(
                            series_name=s.series_name,
                            home_team=s.home_team,
                            visiting_team=s.visiting_team,
                            start_date=s.date_start,
                            end_date=s.date_end,
                        ),
                    )
                )

        result.series_summaries.append(series_data)

    await asyncio.gather(*(build_one(config) for config in configs))
    return result
