from examples.igdb_app import (
    games_for_platforms_query,
    run_demo,
    search_games_query,
    top_rated_query,
)


def test_top_rated_query_pages():
    query = top_rated_query(85, page_size=5, page=2)
    assert query == (
        "fields name,rating,first_release_date,platforms.name,cover.url; "
        "where rating > 85 & rating_count >= 50; sort rating desc; limit 5; offset 10;"
    )


def test_platform_query_with_release_cutoff():
    query = games_for_platforms_query([6, 48], released_before="2023-01-01")
    assert query == (
        "fields name,platforms; exclude storyline; "
        'where platforms = (6,48) | (release_dates.human < "2023-01-01"); sort name asc;'
    )


def test_platform_query_without_cutoff():
    assert "|" not in games_for_platforms_query([6])


def test_search_query_escapes_term():
    assert search_games_query('Zelda "Breath"', limit=3).endswith('limit 3; search "Zelda \\"Breath\\"";')


def test_run_demo_returns_all_queries():
    queries = run_demo()
    assert set(queries) == {"top_rated", "pc_and_ps4", "search"}
    assert all(queries.values())
