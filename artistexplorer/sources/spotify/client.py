"""Spotify Web API client implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from artistexplorer.credentials import Credentials, load_credentials
from artistexplorer.exceptions import SearchMalformedResponse, SearchRequestFailed
from artistexplorer.logger import get_logger
from artistexplorer.sources.base import Artist, BaseClient, HttpRequest
from artistexplorer.sources.http import DEFAULT_TIMEOUT, describe_failure, is_success, send_request
from artistexplorer.sources.oauth2 import ClientCredentialsAuthenticator


logger = get_logger(__name__)

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"
SPOTIFY_SEARCH_URL = f"{SPOTIFY_API_BASE}/search"

SEARCH_TYPE = "artist"
MARKET = "US"
LIMIT = 20


class SpotifyAuthenticator(ClientCredentialsAuthenticator):
    """Client-credentials authenticator for the Spotify accounts service."""

    @property
    def token_url(self) -> str:
        return SPOTIFY_TOKEN_URL

    @property
    def service_name(self) -> str:
        return "Spotify"


# ----------------------------------------------------------------------
# Request building and response parsing
# ----------------------------------------------------------------------


def build_search_request(query: str, token: str) -> HttpRequest:
    """Build the artist search request; ``query`` is percent-encoded."""
    params = {
        "q": query,
        "type": SEARCH_TYPE,
        "market": MARKET,
        "limit": LIMIT,
    }
    return HttpRequest(
        method="GET",
        url=f"{SPOTIFY_SEARCH_URL}?{urlencode(params)}",
        headers={"Authorization": f"Bearer {token}"},
    )


def _require(mapping: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(mapping, dict) or key not in mapping:
        raise SearchMalformedResponse(f"Missing '{key}' in {where}")
    value = mapping[key]
    # bool is an int subclass but never a valid count
    if not isinstance(value, kind) or isinstance(value, bool):
        raise SearchMalformedResponse(f"'{key}' in {where} is not a {kind.__name__}")
    return value


def _artist_from_api(item: Any, index: int) -> Artist:
    """Convert one ``artists.items[]`` entry to an Artist."""
    where = f"artists.items[{index}]"
    name = _require(item, "name", str, where)

    image_url = ""
    images = item.get("images") or []
    if not isinstance(images, list):
        raise SearchMalformedResponse(f"'images' in {where} is not a list")
    if images:
        image_url = _require(images[0], "url", str, f"{where}.images[0]")

    followers = _require(_require(item, "followers", dict, where), "total", int, f"{where}.followers")
    if followers < 0:
        raise SearchMalformedResponse(f"Negative follower count in {where}")

    return Artist(name=name, image_url=image_url, followers=followers)


def parse_search_response(payload: Any) -> List[Artist]:
    """
    Parse a decoded search response into artists, in API order.

    Raises:
        SearchMalformedResponse: If any required part is missing; no partial
            list is ever returned
    """
    artists_obj = _require(payload, "artists", dict, "response")
    items = _require(artists_obj, "items", list, "artists")
    return [_artist_from_api(item, i) for i, item in enumerate(items)]


class SpotifySearchClient:
    """Issues an authenticated artist search against the Spotify catalog."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def search_artists(self, query: str, token: str) -> List[Artist]:
        """
        Search for artists matching ``query`` using bearer ``token``.

        Raises:
            SearchRequestFailed: On transport errors or a non-2xx status
            SearchMalformedResponse: If the body does not have the expected shape
        """
        request = build_search_request(query, token)
        logger.debug(f"Searching Spotify: {request.url}")

        try:
            resp = send_request(request, timeout=self.timeout)
        except requests.RequestException as e:
            raise SearchRequestFailed(f"Spotify search failed: {e}") from e

        if not is_success(resp):
            raise SearchRequestFailed(f"Spotify search failed: {describe_failure(resp)}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise SearchMalformedResponse(f"Spotify search response is not valid JSON: {e}") from e

        artists = parse_search_response(payload)
        logger.info(f"Found {len(artists)} artists for '{query}'")
        return artists


class SpotifyClient(BaseClient):
    """Artist search over the Spotify Web API using client-credentials auth."""

    def __init__(
        self,
        *,
        credentials: Optional[Credentials] = None,
        properties_path: Path | str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize Spotify client.

        Args:
            credentials: Client id / secret pair; loaded via
                :func:`load_credentials` when omitted
            properties_path: Credentials file used when ``credentials`` is omitted
            timeout: Seconds to wait for each HTTP call
        """
        self.credentials = credentials or load_credentials(properties_path)
        self.authenticator = SpotifyAuthenticator(self.credentials, timeout=timeout)
        self.search_client = SpotifySearchClient(timeout=timeout)

    # ------------------------------------------------------------------
    # Public API (BaseClient implementation)
    # ------------------------------------------------------------------

    def authenticate(self) -> str:
        return self.authenticator.authenticate()

    def search_artists(self, query: str) -> List[Artist]:
        """Fetch a fresh token, then search. Raises AuthError or SearchError."""
        token = self.authenticate()
        return self.search_client.search_artists(query, token)


def artists_as_dicts(artists: List[Artist]) -> List[Dict[str, Any]]:
    return [a.to_dict() for a in artists]
