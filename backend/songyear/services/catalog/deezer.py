from __future__ import annotations

import logging
from typing import Any, Tuple

import requests

from songyear.errors import UpstreamUnavailable

log = logging.getLogger(__name__)


class DeezerCatalog:
    """Pass-through access to Deezer album lookups."""

    def __init__(self, base_url: str = "https://api.deezer.com", timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def album(self, album_id: str) -> Tuple[Any, int]:
        """Return Deezer's JSON body for an album together with its status.

        Error bodies from Deezer are returned as-is so the caller can forward
        them; only transport failures raise.
        """
        try:
            r = self.session.get(f"{self.base_url}/album/{album_id}", timeout=self.timeout)
        except requests.RequestException as exc:
            log.warning(f"[deezer] album={album_id} request failed: {exc}")
            raise UpstreamUnavailable('Failed to fetch from Deezer') from exc

        try:
            payload = r.json()
        except ValueError as exc:
            raise UpstreamUnavailable('Deezer returned an unreadable response', status=r.status_code) from exc
        return payload, r.status_code
