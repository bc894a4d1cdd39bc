"""HTTP client for the dictionaryapi.dev lookup endpoint."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from . import __version__

LOGGER = logging.getLogger(__name__)
DEFAULT_ENDPOINT = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
DEFAULT_TIMEOUT = 10
USER_AGENT = f"txt-ewclassifiers/{__version__} (+https://dictionaryapi.dev)"


def proxy_mapping(http_proxy: Optional[str], https_proxy: Optional[str]) -> Dict[str, str]:
    # A configured HTTPS proxy wins and is used for both schemes.
    chosen = (https_proxy or "").strip() or (http_proxy or "").strip()
    if not chosen:
        return {}
    return {"http": chosen, "https": chosen}


class DictionaryClient:
    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        http_proxy: Optional[str] = None,
        https_proxy: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()
        self.proxies = proxy_mapping(http_proxy, https_proxy)
        self.requests_made = 0

    def fetch(self, word: str) -> Optional[Any]:
        """Return the decoded JSON body for ``word``, or None when the lookup failed."""
        url = self.endpoint.format(word=quote(word.lower()))
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        self.requests_made += 1
        try:
            response = self.session.get(
                url, headers=headers, timeout=self.timeout, proxies=self.proxies
            )
        except requests.RequestException as exc:
            LOGGER.warning("Dictionary request failed for %s: %s", word, exc)
            return None
        if response.status_code != 200:
            LOGGER.info("Dictionary returned %s for %s", response.status_code, word)
            return None
        try:
            return response.json()
        except ValueError as exc:
            LOGGER.warning("Dictionary returned invalid JSON for %s: %s", word, exc)
            return None
