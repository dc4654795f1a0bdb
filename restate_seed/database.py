"""Appwrite Databases REST client.

Only the four calls the seeder needs: list, delete, create and a local
unique-id generator. One `httpx.AsyncClient` per `AppwriteDatabases`;
use it as an async context manager so the connection pool is closed.
"""

import uuid
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field

from restate_seed.config import Settings


class DatabaseError(Exception):
    """Non-2xx or unreadable response from the Appwrite API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class Document(BaseModel):
    """A stored record: its `$id` plus the user-defined attributes."""

    id: str
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: dict) -> "Document":
        # System attributes ($collectionId, $createdAt, ...) are not needed here
        data = {k: v for k, v in payload.items() if not k.startswith("$")}
        return cls(id=payload["$id"], data=data)


def unique_id() -> str:
    """20 hex chars: a valid custom document id for `documentId`."""
    return uuid.uuid4().hex[:20]


class AppwriteDatabases:
    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.database_id = settings.database_id
        self._client = httpx.AsyncClient(
            base_url=settings.endpoint.rstrip("/") + "/",
            headers={
                "X-Appwrite-Project": settings.project_id,
                "X-Appwrite-Key": settings.api_key,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "AppwriteDatabases":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def _documents_path(self, collection_id: str) -> str:
        return f"databases/{self.database_id}/collections/{collection_id}/documents"

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            raise DatabaseError(response.status_code, _error_message(response))
        return response

    async def list_documents(self, collection_id: str) -> list[Document]:
        """Return the first page of documents in a collection."""
        response = await self._request("GET", self._documents_path(collection_id))
        docs = _payload(response).get("documents", [])
        if not isinstance(docs, list):
            raise DatabaseError(response.status_code, "Malformed document list in response")
        return [_document(response, doc) for doc in docs]

    async def delete_document(self, collection_id: str, document_id: str) -> None:
        await self._request("DELETE", f"{self._documents_path(collection_id)}/{document_id}")

    async def create_document(
        self, collection_id: str, document_id: str, data: dict[str, Any]
    ) -> Document:
        response = await self._request(
            "POST",
            self._documents_path(collection_id),
            json={"documentId": document_id, "data": data},
        )
        return _document(response, _payload(response))


def _payload(response: httpx.Response) -> dict:
    """Decode a successful response body, which must be a JSON object."""
    try:
        body = response.json()
    except ValueError:
        raise DatabaseError(
            response.status_code, f"Expected JSON from {response.url}, got {response.text[:80]!r}"
        ) from None
    if not isinstance(body, dict):
        raise DatabaseError(response.status_code, "Expected a JSON object in response")
    return body


def _document(response: httpx.Response, payload: Any) -> Document:
    if not isinstance(payload, dict) or "$id" not in payload:
        raise DatabaseError(response.status_code, "Document in response has no $id")
    return Document.from_api(payload)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
