from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from songyear.errors import UpstreamUnavailable
from songyear.models import Track

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogQuery:
    term: str
    limit: int = 10
    country: Optional[str] = None

    def to_params(self) -> dict:
        params = {'term': self.term, 'entity': 'song', 'limit': int(self.limit)}
        if self.country:
            params['country'] = self.country
        return params


class ItunesCatalog:
    """Client for the iTunes Search API, projected onto ``Track``."""

    def __init__(self, base_url: str = "https://itunes.apple.com", timeout: float = 10,
                 user_agent: str = "songyear/0.1"):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def search(self, query: CatalogQuery) -> list[Track]:
        """Return the tracks for ``query``.

        A successful response with no results is ``[]``. Transport errors,
        non-2xx statuses and unreadable bodies raise UpstreamUnavailable.
        """
        try:
            r = self.session.get(f"{self.base_url}/search", params=query.to_params(), timeout=self.timeout)
        except requests.RequestException as exc:
            log.warning(f"[itunes] term={query.term!r} request failed: {exc}")
            raise UpstreamUnavailable('Failed to fetch from iTunes') from exc

        if not r.ok:
            log.warning(f"[itunes] term={query.term!r} status={r.status_code}")
            raise UpstreamUnavailable('iTunes API returned an error', status=r.status_code)

        try:
            data = r.json()
        except ValueError as exc:
            raise UpstreamUnavailable('iTunes API returned an unreadable response', status=r.status_code) from exc

        results = data.get('results', []) if isinstance(data, dict) else None
        if not isinstance(results, list):
            log.warning(f"[itunes] term={query.term!r} unexpected body shape")
            raise UpstreamUnavailable('iTunes API returned an unreadable response', status=r.status_code)
        tracks = [Track.from_itunes(item) for item in results if isinstance(item, dict)]
        log.info(f"[itunes] term={query.term!r} results={len(tracks)}")
        return tracks
