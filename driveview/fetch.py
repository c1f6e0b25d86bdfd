"""HTTP boundary to the store API.

``fetch_resource`` converts every outcome, failures included, into a
``ResourceState`` right after the request so nothing deeper has to inspect raw
responses. Retries and caching are left to the caller.
"""

from __future__ import annotations

import logging

import httpx

from .permalink import api_url, normalize_origin
from .store_model import DirectoryEntry, FetchError, FetchErrorKind, ResourceState, parse_resource

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class FetchFailure(Exception):
    """Raised when raw file content cannot be downloaded."""


def classify_fetch_error(exc: Exception) -> FetchError:
    """Sort a failed request into re-authentication versus generic failures."""
    message = str(exc) or exc.__class__.__name__
    if isinstance(exc, httpx.HTTPStatusError):
        unauthorized = exc.response.status_code == 401
        return FetchError(FetchErrorKind.UNAUTHORIZED if unauthorized else FetchErrorKind.OTHER, message)
    if "401" in message:
        return FetchError(FetchErrorKind.UNAUTHORIZED, message)
    return FetchError(FetchErrorKind.OTHER, message)


class StoreClient:
    """Blocking client for ``GET {origin}/api?path=...``."""

    def __init__(
        self,
        origin: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.origin = normalize_origin(origin)
        self._client = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> StoreClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_resource(self, path: str) -> ResourceState:
        """Fetch ``path`` and return its folder/file state, or a ``FetchError``."""
        url = api_url(self.origin, path)
        logger.debug("Fetching %s", url)
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as exc:
            logger.warning("Fetch failed for %s: %s", path, exc)
            return classify_fetch_error(exc)
        except ValueError as exc:
            logger.warning("Invalid JSON for %s: %s", path, exc)
            return FetchError(FetchErrorKind.OTHER, f"Invalid response for {path}: {exc}")
        return parse_resource(payload)

    def fetch_text(self, entry: DirectoryEntry) -> str:
        """Download the raw content of ``entry`` as text."""
        if not entry.download_url:
            raise FetchFailure(f"no download URL for {entry.name}")
        logger.debug("Downloading %s", entry.name)
        try:
            resp = self._client.get(entry.download_url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchFailure(str(exc)) from exc
        return resp.text


__all__ = [
    "DEFAULT_TIMEOUT",
    "FetchFailure",
    "classify_fetch_error",
    "StoreClient",
]
