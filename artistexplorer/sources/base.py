from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional
from dataclasses import asdict, dataclass, field

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="artist-search")


class BaseClient(ABC):
    """
    Base class for catalog API clients.
    """

    @abstractmethod
    def authenticate(self) -> str:
        """
        Obtain a bearer access token.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    @abstractmethod
    def search_artists(self, query: str) -> List[Artist]:
        """
        Search the catalog for artists matching ``query``.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def search_artists_async(self, query: str) -> Future[List[Artist]]:
        """
        Run :meth:`search_artists` on a worker thread.

        The returned future resolves exactly once, with either the artist
        list or the raised exception.
        """
        return _executor.submit(self.search_artists, query)


@dataclass(frozen=True, slots=True)
class Artist:
    """An artist as returned by a catalog search."""

    name: str
    image_url: str = ""  # Empty when the catalog has no picture
    followers: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """A fully built HTTP request, ready to be sent."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


def artists_to_search_payload(artists: List[Artist]) -> Dict[str, Any]:
    """Render artists back into the catalog's search response shape."""
    items = []
    for artist in artists:
        items.append(
            {
                "name": artist.name,
                "images": [{"url": artist.image_url}] if artist.image_url else [],
                "followers": {"total": artist.followers},
            }
        )
    return {"artists": {"items": items}}
