"""Spotify API client."""

from .client import (
    SpotifyAuthenticator,
    SpotifyClient,
    SpotifySearchClient,
    build_search_request,
    parse_search_response,
)

__all__ = [
    "SpotifyAuthenticator",
    "SpotifyClient",
    "SpotifySearchClient",
    "build_search_request",
    "parse_search_response",
]
