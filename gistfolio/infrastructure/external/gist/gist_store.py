"""GitHub Gist backed document store using the REST v3 API"""
import asyncio
import json
from typing import Any

import httpx
from pydantic import ValidationError

from gistfolio.application.interfaces import PersistAck
from gistfolio.domain.entities import Document
from gistfolio.infrastructure.exceptions import (
    DocumentFormatError,
    DocumentNotFoundError,
    TransportError,
    UnauthorizedError,
)
from gistfolio.shared.telemetry.logging import get_logger
from gistfolio.shared.utils import parse_iso_datetime, utc_now

logger = get_logger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_ACCEPT = "application/vnd.github.v3+json"
DEFAULT_FILE_NAME = "projects-config.json"


class GistDocumentStore:
    """
    Reads and writes the portfolio document stored as one file of a gist.

    The credential is passed to every call rather than held by the store,
    so a single instance can serve both public reads and admin writes.

    Protocol:
    - GET   {api}/gists/{id}  -> {"files": {name: {"content": ...}}, "owner": {"id": ...}}
    - PATCH {api}/gists/{id}  <- {"files": {name: {"content": <json>}}}
    - GET   {api}/user        -> {"id": ...}
    """

    def __init__(
        self,
        gist_id: str,
        file_name: str = DEFAULT_FILE_NAME,
        api_base: str = DEFAULT_API_BASE,
        accept: str = DEFAULT_ACCEPT,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not gist_id:
            raise ValueError("gist_id is required")
        self.gist_id = gist_id
        self.file_name = file_name
        self._api_base = api_base.rstrip("/")
        self._accept = accept
        self._timeout = timeout
        self._transport = transport

    @property
    def gist_url(self) -> str:
        return f"{self._api_base}/gists/{self.gist_id}"

    def _headers(self, token: str | None = None) -> dict[str, str]:
        headers = {"Accept": self._accept}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def verify_permission(self, token: str) -> bool:
        """
        Check that the token's user owns the gist.

        Fails closed: non-2xx responses and unparseable payloads return False.

        Raises:
            TransportError: Network-level failure reaching the API
        """
        if not token:
            return False

        headers = self._headers(token)
        try:
            async with self._client() as client:
                # both requests settle before the client closes
                results = await asyncio.gather(
                    client.get(f"{self._api_base}/user", headers=headers),
                    client.get(self.gist_url, headers=headers),
                    return_exceptions=True,
                )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            user_response, gist_response = results
            user_response.raise_for_status()
            gist_response.raise_for_status()
            user_id = user_response.json()["id"]
            owner_id = gist_response.json()["owner"]["id"]
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Permission check rejected by API (HTTP %s)", e.response.status_code
            )
            return False
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Permission check got malformed payload: {e}")
            return False
        except httpx.TransportError as e:
            raise TransportError(f"Permission check failed: {e}", url=self._api_base) from e

        if user_id != owner_id:
            logger.warning("Token user %s does not own gist %s", user_id, self.gist_id)
            return False
        return True

    async def fetch_document(self, token: str | None = None) -> Document:
        """
        Fetch and parse the document.

        Args:
            token: Optional credential; without it the gist is read anonymously

        Raises:
            TransportError: Network failure or non-2xx response
            DocumentNotFoundError: The gist has no file named ``file_name``
            DocumentFormatError: The file content is not a valid document
        """
        async with self._client() as client:
            data = await self._get_json(client, self.gist_url, self._headers(token))

            files = data.get("files") or {}
            file_entry = files.get(self.file_name)
            if not file_entry:
                raise DocumentNotFoundError(self.gist_id, self.file_name)

            content = file_entry.get("content")
            if file_entry.get("truncated") and file_entry.get("raw_url"):
                logger.debug("Gist file %s truncated, reading raw_url", self.file_name)
                content = await self._get_text(client, file_entry["raw_url"], self._headers(token))

        document = self._parse_content(content)
        logger.info(
            "Fetched document from gist %s (%d entries)", self.gist_id, len(document.entries)
        )
        return document

    async def persist_document(self, document: Document, token: str | None) -> PersistAck:
        """
        Overwrite the gist file with the full serialized document.

        Raises:
            UnauthorizedError: No token given
            TransportError: Network failure or non-2xx response
        """
        if not token:
            raise UnauthorizedError()

        body = {
            "files": {
                self.file_name: {
                    "content": document.to_json(),
                }
            }
        }
        headers = self._headers(token)
        headers["Content-Type"] = "application/json"

        try:
            async with self._client() as client:
                response = await client.patch(self.gist_url, headers=headers, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(
                f"Failed to save data to GitHub (HTTP {status}). "
                f"The token likely lacks the 'gist' write scope.",
                url=self.gist_url,
                status_code=status,
            ) from e
        except httpx.TransportError as e:
            raise TransportError(f"Failed to save data to GitHub: {e}", url=self.gist_url) from e

        try:
            payload: dict[str, Any] = response.json()
        except ValueError:
            payload = {}

        logger.info("Persisted document to gist %s (%d entries)", self.gist_id, len(document.entries))
        return PersistAck(
            gist_id=self.gist_id,
            file_name=self.file_name,
            updated_at=parse_iso_datetime(payload.get("updated_at")) or utc_now(),
            html_url=payload.get("html_url"),
        )

    async def _get_json(
        self, client: httpx.AsyncClient, url: str, headers: dict[str, str]
    ) -> dict[str, Any]:
        response = await self._get(client, url, headers)
        try:
            data = response.json()
        except ValueError as e:
            raise DocumentFormatError(self.file_name, f"API returned non-JSON body: {e}") from e
        if not isinstance(data, dict):
            raise DocumentFormatError(self.file_name, "API returned unexpected payload")
        return data

    async def _get_text(self, client: httpx.AsyncClient, url: str, headers: dict[str, str]) -> str:
        response = await self._get(client, url, headers)
        return response.text

    async def _get(
        self, client: httpx.AsyncClient, url: str, headers: dict[str, str]
    ) -> httpx.Response:
        try:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Gist Error: {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            raise TransportError(f"Gist request failed: {e}", url=url) from e
        return response

    def _parse_content(self, content: str | None) -> Document:
        if not content or not content.strip():
            return Document()
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(self.file_name, str(e)) from e
        if parsed is None:
            return Document()
        try:
            return Document.model_validate(parsed)
        except ValidationError as e:
            raise DocumentFormatError(self.file_name, str(e)) from e
