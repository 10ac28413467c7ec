"""Display state for overlapping searches."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import List, Optional

from artistexplorer.exceptions import ArtistExplorerError
from artistexplorer.logger import get_logger
from artistexplorer.sources.base import Artist, BaseClient

logger = get_logger(__name__)


class SearchSession:
    """
    Holds the results currently on display.

    Every :meth:`submit` starts a new search. When several overlap, only the
    most recently submitted one may replace :attr:`artists`; failures are
    logged and leave the previous results untouched.
    """

    def __init__(self, client: BaseClient) -> None:
        self.client = client
        self.artists: List[Artist] = []
        self.query: Optional[str] = None
        self.last_error: Optional[str] = None
        self._generation = 0
        self._lock = threading.Lock()

    def submit(self, query: str) -> Future:
        """
        Start a search for ``query``.

        The returned future resolves once the session state has been updated
        (or the result dropped as stale), with the search's own outcome.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation

        settled: Future = Future()
        search = self.client.search_artists_async(query)
        search.add_done_callback(lambda f: self._on_done(f, query, generation, settled))
        return settled

    def _on_done(self, search: Future, query: str, generation: int, settled: Future) -> None:
        error = search.exception()
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Dropping stale results for '{query}'")
            elif error is None:
                self.artists = search.result()
                self.query = query
                self.last_error = None
            else:
                self.last_error = str(error)

        if error is None:
            settled.set_result(search.result())
            return

        if isinstance(error, ArtistExplorerError):
            logger.error(f"Search for '{query}' failed: {error}")
        else:
            logger.error(f"Unexpected error searching for '{query}'", exc_info=error)
        settled.set_exception(error)
