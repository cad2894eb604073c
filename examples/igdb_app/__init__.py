from .demo import (  # noqa: F401
    games_for_platforms_query,
    run_demo,
    search_games_query,
    top_rated_query,
)

__all__ = [
    "games_for_platforms_query",
    "run_demo",
    "search_games_query",
    "top_rated_query",
]
