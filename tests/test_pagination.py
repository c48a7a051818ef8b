"""
Pagination envelope tests for song listing
"""

from urllib.parse import parse_qs, urlparse

import pytest

from songs_api.core.pagination import resolve_page

from factories import make_songs


def _query(url):
    return parse_qs(urlparse(url).query)


def test_handles_many_songs(auth_client, db_session, user):
    make_songs(db_session, user, 500)

    response = auth_client.get("/api/songs", params={"page": 1})

    assert response.status_code == 200
    songs = response.json()["songs"]
    assert songs["total"] == 500
    assert songs["per_page"] == 50
    assert len(songs["data"]) == 50


def test_envelope_metadata(auth_client, db_session, user):
    make_songs(db_session, user, 120)

    songs = auth_client.get("/api/songs", params={"page": 2}).json()["songs"]

    assert songs["current_page"] == 2
    assert songs["last_page"] == 3
    assert songs["from"] == 51
    assert songs["to"] == 100
    assert songs["path"].endswith("/api/songs")
    assert _query(songs["first_page_url"])["page"] == ["1"]
    assert _query(songs["last_page_url"])["page"] == ["3"]
    assert _query(songs["prev_page_url"])["page"] == ["1"]
    assert _query(songs["next_page_url"])["page"] == ["3"]


def test_last_page_is_partial(auth_client, db_session, user):
    make_songs(db_session, user, 120)

    songs = auth_client.get("/api/songs", params={"page": 3}).json()["songs"]

    assert len(songs["data"]) == 20
    assert songs["from"] == 101
    assert songs["to"] == 120
    assert songs["next_page_url"] is None


def test_pages_do_not_overlap(auth_client, db_session, user):
    make_songs(db_session, user, 75)

    first = auth_client.get("/api/songs", params={"page": 1}).json()["songs"]["data"]
    second = auth_client.get("/api/songs", params={"page": 2}).json()["songs"]["data"]

    first_ids = [song["id"] for song in first]
    second_ids = [song["id"] for song in second]
    assert first_ids == sorted(first_ids)
    assert not set(first_ids) & set(second_ids)
    assert len(first_ids) + len(second_ids) == 75


def test_page_past_the_end_is_empty(auth_client, db_session, user):
    make_songs(db_session, user, 10)

    songs = auth_client.get("/api/songs", params={"page": 5}).json()["songs"]

    assert songs["data"] == []
    assert songs["total"] == 10
    assert songs["from"] is None
    assert songs["to"] is None


def test_page_urls_keep_genre_filter(auth_client, db_session, user):
    make_songs(db_session, user, 60, genre="Rock")
    make_songs(db_session, user, 5, genre="Pop")

    songs = auth_client.get("/api/songs", params={"genre": "Rock"}).json()["songs"]

    assert songs["total"] == 60
    assert songs["prev_page_url"] is None
    assert _query(songs["next_page_url"]) == {"genre": ["Rock"], "page": ["2"]}


@pytest.mark.parametrize("page", ["0", "-1", "abc", ""])
def test_invalid_page_falls_back_to_first(auth_client, db_session, user, page):
    make_songs(db_session, user, 60)

    response = auth_client.get("/api/songs", params={"page": page})

    assert response.status_code == 200
    songs = response.json()["songs"]
    assert songs["current_page"] == 1
    assert len(songs["data"]) == 50


def test_huge_page_number_is_an_empty_page(auth_client, db_session, user):
    make_songs(db_session, user, 3)

    response = auth_client.get("/api/songs", params={"page": 10**18})

    assert response.status_code == 200
    songs = response.json()["songs"]
    assert songs["data"] == []
    assert songs["total"] == 3
    assert songs["current_page"] == 10**18


def test_resolve_page():
    assert resolve_page(None) == 1
    assert resolve_page("3") == 3
    assert resolve_page("0") == 1
    assert resolve_page("2.5") == 1
