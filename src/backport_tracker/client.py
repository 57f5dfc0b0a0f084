"""Async client for the external document service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter, ValidationError

from backport_tracker.exceptions import LoadError, SyncError
from backport_tracker.models.contracts import CompletionAck, CompletionRequest
from backport_tracker.models.document import Document
from backport_tracker.models.outcome import SyncFailure

if TYPE_CHECKING:
    from backport_tracker.config import ServiceConfig

logger = logging.getLogger(__name__)

DOCUMENTS_PATH = "/api/documents"
COMPLETE_PATH = "/api/documents/complete"

_documents_adapter = TypeAdapter(list[Document])


class DocumentServiceClient:
    """Wraps an ``httpx.AsyncClient`` bound to the document service.

    Each call is a single attempt; retrying is left to callers.
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the underlying HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> DocumentServiceClient:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def http(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("DocumentServiceClient not initialized — call initialize() first")
        return self._client

    async def fetch_documents(self) -> list[Document]:
        """Fetch every tracked document. Any failure is a :class:`LoadError`."""
        try:
            response = await self.http.get(DOCUMENTS_PATH)
        except httpx.HTTPError as exc:
            raise LoadError(f"Error fetching documents: {exc}") from exc

        if not response.is_success:
            raise LoadError(f"HTTP error: {response.status_code}")

        try:
            documents = _documents_adapter.validate_json(response.content)
        except ValidationError as exc:
            raise LoadError(f"Invalid documents payload: {exc.error_count()} error(s)") from exc

        logger.info("Fetched documents — count=%d", len(documents))
        return documents

    async def update_completion(self, document_id: str, completed: bool) -> CompletionAck:
        """Ask the service to store ``completed`` for ``document_id``.

        Raises :class:`SyncError` on network errors, non-2xx statuses and
        unparseable acknowledgments. A well-formed ``{"success": false}`` is
        returned to the caller as-is.
        """
        body = CompletionRequest(id=document_id, completed=completed)
        try:
            response = await self.http.post(COMPLETE_PATH, json=body.model_dump())
        except httpx.HTTPError as exc:
            raise SyncError(SyncFailure.NETWORK, f"Error updating {document_id}: {exc}") from exc

        if not response.is_success:
            raise SyncError(SyncFailure.HTTP_STATUS, f"HTTP error: {response.status_code}")

        try:
            return CompletionAck.model_validate_json(response.content)
        except ValidationError as exc:
            raise SyncError(
                SyncFailure.MALFORMED_RESPONSE,
                f"Invalid acknowledgment for {document_id}",
            ) from exc
