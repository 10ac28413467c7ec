from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from artistexplorer.exceptions import SearchMalformedResponse, SearchRequestFailed
from artistexplorer.sources import Artist, artists_to_search_payload
from artistexplorer.sources.spotify import SpotifySearchClient, build_search_request, parse_search_response
from tests.utils import FakeResponse, artist_item, search_payload

SPOTIFY_SEARCH_URL = "https://api.spotify.com/v1/search"


def test_build_search_request_sets_params_and_bearer():
    request = build_search_request("Daft Punk", "tok")
    parts = urlsplit(request.url)

    assert request.method == "GET"
    assert request.body is None
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == SPOTIFY_SEARCH_URL
    assert parse_qs(parts.query) == {
        "q": ["Daft Punk"],
        "type": ["artist"],
        "market": ["US"],
        "limit": ["20"],
    }
    assert request.headers == {"Authorization": "Bearer tok"}


def test_build_search_request_percent_encodes_query():
    request = build_search_request("AC/DC & Friends?", "tok")
    assert "q=AC%2FDC+%26+Friends%3F&" in request.url


def test_parse_preserves_count_and_order():
    payload = search_payload(
        artist_item("Beta", 2),
        artist_item("Alpha", 1),
        artist_item("Gamma", 3),
    )
    artists = parse_search_response(payload)
    assert [a.name for a in artists] == ["Beta", "Alpha", "Gamma"]


def test_parse_takes_first_image():
    item = artist_item("Daft Punk", 10)
    item["images"] = [{"url": "http://big"}, {"url": "http://small"}]
    assert parse_search_response(search_payload(item))[0].image_url == "http://big"


def test_parse_empty_images_gives_empty_url():
    artists = parse_search_response(search_payload(artist_item("No Pics", 5)))
    assert artists[0].image_url == ""


def test_parse_missing_images_gives_empty_url():
    item = artist_item("No Pics", 5)
    del item["images"]
    assert parse_search_response(search_payload(item))[0].image_url == ""


def test_parse_empty_items_gives_empty_list():
    assert parse_search_response(search_payload()) == []


def test_parse_missing_followers_total_is_malformed():
    item = artist_item("Someone", 1)
    item["followers"] = {"href": None}
    with pytest.raises(SearchMalformedResponse, match="total"):
        parse_search_response(search_payload(artist_item("Fine", 1), item))


def test_parse_missing_name_is_malformed():
    item = artist_item("Someone", 1)
    del item["name"]
    with pytest.raises(SearchMalformedResponse, match="name"):
        parse_search_response(search_payload(item))


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"artists": {}},
        {"artists": {"items": None}},
        {"artists": []},
        [],
    ],
)
def test_parse_missing_artists_or_items_is_malformed(payload):
    with pytest.raises(SearchMalformedResponse):
        parse_search_response(payload)


@pytest.mark.parametrize("total", ["12", 1.5, True, -1, None])
def test_parse_bad_follower_count_is_malformed(total):
    item = artist_item("Someone")
    item["followers"]["total"] = total
    with pytest.raises(SearchMalformedResponse):
        parse_search_response(search_payload(item))


def test_payload_round_trip():
    artists = [
        Artist(name="Daft Punk", image_url="http://img", followers=12345678),
        Artist(name="Unknown", image_url="", followers=0),
    ]
    assert parse_search_response(artists_to_search_payload(artists)) == artists


def test_search_artists_end_to_end(monkeypatch):
    def fake_get(url, headers=None, timeout=15, **kwargs):
        assert url.startswith(SPOTIFY_SEARCH_URL + "?")
        assert "q=Daft+Punk" in url
        assert headers["Authorization"] == "Bearer tok"
        return FakeResponse(
            200,
            json_data=search_payload(artist_item("Daft Punk", 12345678, "http://img")),
        )

    monkeypatch.setattr(requests, "get", fake_get)

    artists = SpotifySearchClient().search_artists("Daft Punk", "tok")
    assert artists == [Artist(name="Daft Punk", image_url="http://img", followers=12345678)]


def test_search_non_2xx_is_request_failed(monkeypatch):
    monkeypatch.setattr(
        requests,
        "get",
        lambda *a, **kw: FakeResponse(401, json_data={"error": {"status": 401, "message": "Invalid access token"}}),
    )
    with pytest.raises(SearchRequestFailed, match="401"):
        SpotifySearchClient().search_artists("x", "bad")


def test_search_transport_error_is_request_failed(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(SearchRequestFailed, match="timed out"):
        SpotifySearchClient().search_artists("x", "tok")


def test_search_invalid_json_is_malformed(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(200, text="not json"))
    with pytest.raises(SearchMalformedResponse):
        SpotifySearchClient().search_artists("x", "tok")
