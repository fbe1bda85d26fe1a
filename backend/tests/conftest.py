"""
RecipeBox Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── fake_db: Empty in-memory async stand-in for a pymongo AsyncDatabase
    ├── seeded_db: fake_db with cuisines and tags loaded
    ├── valid_draft: A create/update body that passes validation
    └── test_client: HTTPX AsyncClient with get_database overridden

The fake implements only what RecipeService and the health check call:
find (with projection and $in), find_one, insert_one, update_one,
delete_one, and command("ping").
"""

import copy
import os
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

# Override settings for testing BEFORE any app imports
os.environ["MONGO_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB_NAME"] = "recipes_test"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# In-memory document store
# ══════════════════════════════════════════════════════════════════════════

def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, condition in query.items():
        value = document.get(key)
        if isinstance(condition, dict) and "$in" in condition:
            if value not in condition["$in"]:
                return False
        elif value != condition:
            return False
    return True


def _project(document: Dict[str, Any], projection: Optional[Dict[str, int]]) -> Dict[str, Any]:
    if not projection:
        return copy.deepcopy(document)
    keep = {key for key, flag in projection.items() if flag}
    keep.add("_id")
    return {key: copy.deepcopy(value) for key, value in document.items() if key in keep}


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def find(self, query: Optional[Dict[str, Any]] = None, projection: Optional[Dict[str, int]] = None):
        query = query or {}
        return FakeCursor(
            [_project(doc, projection) for doc in self.documents if _matches(doc, query)]
        )

    async def find_one(self, query: Optional[Dict[str, Any]] = None):
        for doc in self.documents:
            if _matches(doc, query or {}):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document: Dict[str, Any]):
        # The driver adds the generated _id to the caller's dict
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any], upsert: bool = False):
        for doc in self.documents:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return SimpleNamespace(matched_count=1, modified_count=1, upserted_id=None)
        return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=None)

    async def delete_one(self, query: Dict[str, Any]):
        for index, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def count(self) -> int:
        return len(self.documents)


class FakeDatabase:
    def __init__(self, name: str = "recipes_test"):
        self.name = name
        self.reachable = True
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]

    async def command(self, command: str):
        if not self.reachable:
            raise ServerSelectionTimeoutError("No servers found yet")
        return {"ok": 1.0}


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_db():
    """An empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def seeded_db(fake_db):
    """
    Database with reference data loaded.

    cuisine: Chinese, Italian, Mexican
    tags:    vegan, spicy, quick
    recipes: (empty)
    """
    fake_db["cuisine"].documents.extend(
        {"_id": ObjectId(), "name": name} for name in ("Chinese", "Italian", "Mexican")
    )
    fake_db["tags"].documents.extend(
        {"_id": ObjectId(), "name": name} for name in ("vegan", "spicy", "quick")
    )
    return fake_db


@pytest.fixture
def valid_draft():
    """A recipe body that passes validation against seeded_db."""
    return {
        "name": "Mapo Tofu",
        "cuisine": "Chinese",
        "prepTime": 15,
        "cookTime": 20,
        "servings": 4,
        "ingredients": ["tofu", "doubanjiang", "sichuan pepper"],
        "instructions": ["Fry the paste", "Simmer the tofu"],
        "tags": ["spicy", "quick"],
    }


@pytest_asyncio.fixture
async def test_client(seeded_db):
    """
    Provides an async HTTP test client bound to a fresh app instance.

    The lifespan does not run under ASGITransport, so no real MongoDB client
    is created; get_database is overridden to return seeded_db.
    raise_app_exceptions=False lets the catch-all 500 handler be observed.
    """
    from recipebox.database import get_database
    from recipebox.main import create_app

    app = create_app()
    app.dependency_overrides[get_database] = lambda: seeded_db
    app.state.db = seeded_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        client.app = app
        yield client
