"""Fetch raw document bytes from a URL or a local path."""

import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from report_kit.errors import FetchError

from .base import BlobFetcher

logger = logging.getLogger(__name__)


class HttpBlobFetcher(BlobFetcher):
    """Downloads documents over HTTP(S).

    Any non-2xx status or transport failure raises FetchError. `transport`
    exists so tests can plug in an httpx.MockTransport.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, source: str) -> bytes:
        logger.debug("Downloading document from %s", source)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(source)
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to download document: {exc}") from exc

        if response.is_error:
            raise FetchError(
                f"Failed to download document: {response.status_code} "
                f"{response.reason_phrase}"
            )

        logger.info("Downloaded %d bytes from %s", len(response.content), source)
        return response.content


class FileBlobFetcher(BlobFetcher):
    """Reads documents from the local filesystem (plain paths or file:// URLs)."""

    async def fetch(self, source: str) -> bytes:
        parsed = urlparse(source)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise FetchError(f"Failed to read document {path}: {exc}") from exc


class RoutingBlobFetcher(BlobFetcher):
    """Sends http(s) references to HttpBlobFetcher and everything else to disk."""

    def __init__(
        self,
        http: HttpBlobFetcher | None = None,
        files: FileBlobFetcher | None = None,
    ) -> None:
        self._http = http or HttpBlobFetcher()
        self._files = files or FileBlobFetcher()

    async def fetch(self, source: str) -> bytes:
        if urlparse(source).scheme in ("http", "https"):
            return await self._http.fetch(source)
        return await self._files.fetch(source)
