"""
IGDB example showcasing typical game-catalog queries.
"""

from __future__ import annotations

import logging
from typing import Dict, Sequence

from apicalypse import ComparisonOperator, QueryBuilder, SortDirection, build_condition
from apicalypse.utils import configure_logging

GAME_FIELDS = ("name", "rating", "first_release_date", "platforms.name", "cover.url")
PC = 6
PS4 = 48


def top_rated_query(min_rating: int = 80, *, page_size: int = 10, page: int = 0) -> str:
    return (
        QueryBuilder(strict_mode=True)
        .select(*GAME_FIELDS)
        .where(build_condition("rating", min_rating, ComparisonOperator.GT))
        .and_where(build_condition("rating_count", 50, ComparisonOperator.GTE))
        .sort("rating", SortDirection.DESC)
        .limit(page_size)
        .offset(page * page_size)
        .build()
    )


def games_for_platforms_query(platforms: Sequence[int], *, released_before: str | None = None) -> str:
    builder = (
        QueryBuilder(strict_mode=True)
        .select("name", "platforms")
        .exclude("storyline")
        .where(build_condition("platforms", list(platforms), ComparisonOperator.CONTAINS_ANY))
    )
    if released_before:
        builder.or_where(f'(release_dates.human < "{released_before}")')
    return builder.sort("name").build()


def search_games_query(term: str, *, limit: int = 20) -> str:
    return str(QueryBuilder().select(*GAME_FIELDS).search(term).limit(limit))


def run_demo() -> Dict[str, str]:
    return {
        "top_rated": top_rated_query(),
        "pc_and_ps4": games_for_platforms_query([PC, PS4], released_before="2023-01-01"),
        "search": search_games_query('Zelda "Breath"'),
    }


if __name__ == "__main__":
    configure_logging(logging.INFO)
    for label, query in run_demo().items():
        print(f"{label}: {query}")
