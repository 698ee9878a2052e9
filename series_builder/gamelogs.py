"""Retrosheet game-log loading and projection to list games."""

from __future__ import annotations

import asyncio
import csv
import io
import zipfile
from pathlib import Path

import requests

from series_builder import GameLogRecord, GameSource, ListGame, SeriesBuildConfig

USER_AGENT = "BaseballSeriesBot/1.0 (static site data build)"
GAMELOG_URL = "https://www.retrosheet.org/gamelogs/{name}.zip"

# Only the leading columns of the 161-field game-log format are used.
MIN_FIELDS = 19


def cached_archive_path(cache_dir: Path, name: str) -> Path:
    return cache_dir / f"{name.lower()}.zip"


def fetch_game_log(name: str, cache_dir: Path | None = None) -> str:
    """Download a Retrosheet game log (e.g. ``gl2019`` or ``glws``) as text.

    With ``cache_dir``, the downloaded archive is kept there and reused on
    later runs; a cached file that is not a zip archive is downloaded again.
    """
    archive_path = cached_archive_path(cache_dir, name) if cache_dir is not None else None
    if archive_path is not None and zipfile.is_zipfile(archive_path):
        return extract_game_log(archive_path.read_bytes())

    url = GAMELOG_URL.format(name=name.lower())
    headers = {"User-Agent": USER_AGENT}

    response = requests.get(url, headers=headers, timeout=30)
    response.raise_for_status()
    text = extract_game_log(response.content)

    if archive_path is not None:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        archive_path.write_bytes(response.content)

    return text


def extract_game_log(data: bytes) -> str:
    """Return the text of the single game-log file inside a Retrosheet zip."""
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        members = [n for n in archive.namelist() if n.lower().endswith(".txt")]
        if len(members) != 1:
            raise ValueError(f"Expected one game-log file in archive, found {members}")
        return archive.read(members[0]).decode("latin-1")


def parse_game_log(text: str) -> list[GameLogRecord]:
    """Parse game-log CSV text into records, in file order."""
    games: list[GameLogRecord] = []

    for line_no, row in enumerate(csv.reader(io.StringIO(text)), start=1):
        if not row or not any(field.strip() for field in row):
            continue
        if len(row) < MIN_FIELDS:
            raise ValueError(
                f"Game log line {line_no}: expected at least {MIN_FIELDS} fields, got {len(row)}"
            )
        try:
            games.append(_parse_row(row))
        except ValueError as e:
            raise ValueError(f"Game log line {line_no}: {e}") from e

    return games


def _parse_row(row: list[str]) -> GameLogRecord:
    raw_date = row[0].strip()
    if len(raw_date) != 8 or not raw_date.isdigit():
        raise ValueError(f"bad date {raw_date!r}")

    game_number = int(row[1] or 0)
    home_team = row[6].strip()

    return GameLogRecord(
        game_id=f"{home_team}{raw_date}{game_number}",
        date=f"{raw_date[:4]}-{raw_date[4:6]}-{raw_date[6:]}",
        game_number=game_number,
        day_of_week=row[2].strip(),
        visiting_team=row[3].strip(),
        visiting_league=row[4].strip(),
        home_team=home_team,
        home_league=row[7].strip(),
        visiting_score=int(row[9]),
        home_score=int(row[10]),
        length_outs=_optional_int(row[11]),
        day_night=row[12].strip(),
        park_id=row[16].strip(),
        attendance=_optional_int(row[17]),
        duration_minutes=_optional_int(row[18]),
    )


def _optional_int(value: str) -> int | None:
    value = value.strip()
    return int(value) if value else None


def _read_source_file(name: str, cache_dir: Path | None) -> str:
    if name.lower().endswith(".txt"):
        return Path(name).read_text(encoding="latin-1")
    return fetch_game_log(name, cache_dir)


def filter_games(games: list[GameLogRecord], source: GameSource) -> list[GameLogRecord]:
    """Keep games in which every listed team plays, within the date bounds."""
    kept = []
    for game in games:
        playing = (game.home_team, game.visiting_team)
        if any(team not in playing for team in source.teams):
            continue
        if source.start_date and game.date < source.start_date:
            continue
        if source.end_date and game.date > source.end_date:
            continue
        kept.append(game)
    return kept


def load_games(source: GameSource, cache_dir: Path | None = None) -> list[GameLogRecord]:
    """Read, filter and order every game of a source."""
    games: list[GameLogRecord] = []
    for name in source.files:
        games.extend(parse_game_log(_read_source_file(name, cache_dir)))

    games = filter_games(games, source)
    games.sort(key=lambda g: (g.date, g.game_number))
    return games


async def generate_games(source: GameSource, cache_dir: Path | None = None) -> list[GameLogRecord]:
    """Load a source's games without blocking the event loop."""
    return await asyncio.to_thread(load_games, source, cache_dir)


def convert_to_list_game(game: GameLogRecord, config: SeriesBuildConfig) -> ListGame:
    """Project a full game record onto the shape list pages display."""
    home_team = config.team_names.get(game.home_team, game.home_team)
    visiting_team = config.team_names.get(game.visiting_team, game.visiting_team)

    matchup = "-".join(sorted((home_team, visiting_team)))
    if config.season_matchups:
        matchup = f"{matchup}-{game.date[:4]}"

    return ListGame(
        id=game.game_id,
        matchup=matchup,
        home_team=home_team,
        visiting_team=visiting_team,
        date=game.date,
        home_score=game.home_score,
        visiting_score=game.visiting_score,
    )
