from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional

import requests

from anagrams.config import API_URL, CLIENT_TIMEOUT, DATE_FORMAT

log = logging.getLogger(__name__)


class ApiError(Exception):
    """A 400 answer from the service, carrying its ``{"type", "error"}`` payload."""
    def __init__(self, type: str, message: str, status: int = 400) -> None:
        super().__init__(f"{type}: {message}")
        self.type = type
        self.message = message
        self.status = status


class AnagramClient:
    """Client for the /api/v1 routes. ``session`` may be any object with requests' get/post signature."""

    def __init__(self, base_url: str = API_URL, *, session=None, timeout: float = CLIENT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def similar(self, word: str) -> List[str]:
        r = self.session.get(f"{self.base_url}/api/v1/similar", params={"word": word}, timeout=self.timeout)
        return self._check(r).json()["similar"]

    def add_word(self, word: str) -> str:
        r = self.session.post(f"{self.base_url}/api/v1/add-word", json={"word": word}, timeout=self.timeout)
        return self._check(r).text

    def stats(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> dict:
        params = {}
        if start is not None:
            params["from"] = start.strftime(DATE_FORMAT)
        if end is not None:
            params["to"] = end.strftime(DATE_FORMAT)
        r = self.session.get(f"{self.base_url}/api/v1/stats", params=params, timeout=self.timeout)
        return self._check(r).json()

    def health(self) -> bool:
        try:
            r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        except requests.RequestException as exc:
            log.info("Health check failed: %r", exc)
            return False
        return r.status_code == 200

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _check(r):
        if r.status_code == 400:
            try:
                body = r.json()
            except ValueError:
                body = {}
            raise ApiError(body.get("type", ""), body.get("error", r.text))
        r.raise_for_status()
        return r
