"""Music catalog client sources."""

from artistexplorer.sources.base import Artist, BaseClient, HttpRequest, artists_to_search_payload
from artistexplorer.sources.oauth2 import ClientCredentialsAuthenticator
from artistexplorer.sources.spotify import SpotifyAuthenticator, SpotifyClient, SpotifySearchClient

__all__ = [
    # Base classes and models
    "BaseClient",
    "Artist",
    "HttpRequest",
    "artists_to_search_payload",
    "ClientCredentialsAuthenticator",
    # Spotify
    "SpotifyAuthenticator",
    "SpotifyClient",
    "SpotifySearchClient",
]
