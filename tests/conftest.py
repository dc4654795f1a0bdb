import json
import re
from typing import Optional

import httpx
import pytest

from restate_seed.config import Settings
from restate_seed.database import AppwriteDatabases

ENV = {
    "EXPO_PUBLIC_APPWRITE_ENDPOINT": "https://appwrite.test/v1",
    "EXPO_PUBLIC_APPWRITE_PROJECT_ID": "proj-1",
    "EXPO_PUBLIC_APPWRITE_DATABASE_ID": "db-1",
    "EXPO_PUBLIC_APPWRITE_AGENTS_TABLE_ID": "agents",
    "EXPO_PUBLIC_APPWRITE_GALLERIES_TABLE_ID": "galleries",
    "EXPO_PUBLIC_APPWRITE_REVIEWS_TABLE_ID": "reviews",
    "EXPO_PUBLIC_APPWRITE_PROPERTIES_TABLE_ID": "properties",
    "APPWRITE_API_KEY": "secret-key",
}

DOCS_PATH = re.compile(
    r"^/v1/databases/(?P<db>[^/]+)/collections/(?P<col>[^/]+)/documents(?:/(?P<doc>[^/]+))?$"
)


class FakeAppwrite:
    """In-memory stand-in for the Appwrite documents API.

    Stores documents per collection and records every request as
    (method, collection, document_id) so tests can assert on call order.
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self.calls: list[tuple[str, str, Optional[str]]] = []
        self.fail_on: Optional[tuple[str, str]] = None  # (method, collection)

    def add(self, collection: str, doc_id: str, **fields) -> None:
        self.collections.setdefault(collection, {})[doc_id] = {"$id": doc_id, **fields}

    def count(self, collection: str) -> int:
        return len(self.collections.get(collection, {}))

    def docs(self, collection: str) -> list[dict]:
        return list(self.collections.get(collection, {}).values())

    def handler(self, request: httpx.Request) -> httpx.Response:
        match = DOCS_PATH.match(request.url.path)
        if not match:
            return httpx.Response(404, json={"message": "Route not found", "code": 404})
        col, doc_id = match["col"], match["doc"]
        self.calls.append((request.method, col, doc_id))

        if self.fail_on == (request.method, col):
            return httpx.Response(500, json={"message": "Server Error", "code": 500})

        store = self.collections.setdefault(col, {})
        if request.method == "GET":
            docs = list(store.values())
            return httpx.Response(200, json={"total": len(docs), "documents": docs})
        if request.method == "DELETE":
            if store.pop(doc_id, None) is None:
                return httpx.Response(
                    404, json={"message": "Document with the requested ID could not be found."}
                )
            return httpx.Response(204)
        if request.method == "POST":
            body = json.loads(request.content)
            doc = {
                "$id": body["documentId"],
                "$collectionId": col,
                "$databaseId": match["db"],
                **body["data"],
            }
            store[body["documentId"]] = doc
            return httpx.Response(201, json=doc)
        return httpx.Response(405, json={"message": "Method not allowed"})


@pytest.fixture
def env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return ENV


@pytest.fixture
def settings():
    return Settings(_env_file=None, **ENV)


@pytest.fixture
def fake_appwrite():
    return FakeAppwrite()


@pytest.fixture
async def db(settings, fake_appwrite):
    async with AppwriteDatabases(
        settings, transport=httpx.MockTransport(fake_appwrite.handler)
    ) as client:
        yield client
