"""Named series identity strategies referenced from build configuration."""

from __future__ import annotations

from series_builder import SeriesIdFn


def by_matchup(matchup: str, anchor_game_id: str) -> str:
    """One series per contiguous run of a matchup, keyed by its first game.

    A run only ends when the matchup changes, so lists where one pairing
    meets in consecutive seasons need ``season_matchups`` on their build
    config to split by year.
    """
    return f"{matchup}-{anchor_game_id}".lower()


def single_series(slug: str) -> SeriesIdFn:
    """Every game of the source belongs to one series named ``slug``."""

    def series_id(matchup: str, anchor_game_id: str) -> str:
        return slug

    return series_id


STRATEGIES: dict[str, SeriesIdFn] = {
    "matchup": by_matchup,
}


def resolve_series_id(name: str) -> SeriesIdFn:
    """Look up a series identity function by its configured name.

    ``single:<slug>`` builds a constant id; anything else must be one of
    STRATEGIES.
    """
    if name.startswith("single:"):
        slug = name.split(":", 1)[1].strip()
        if not slug:
            raise ValueError("single series strategy needs a slug, e.g. 'single:2019-ws'")
        return single_series(slug)

    try:
        return STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(
            f"Unknown series id strategy {name!r} (expected one of: {known}, single:<slug>)"
        ) from None
