"""
RecipeBox Backend: Document Store Connection Management
=========================================================

What:  Async MongoDB client factory, database accessor, and FastAPI dependency.
How:   One AsyncMongoClient is created during the application lifespan and
       stored on `app.state`. Route handlers receive the database handle
       through `Depends(get_database)` instead of importing a module global,
       so tests can override the dependency with an in-memory fake.
Who:   main.py (lifespan), route handlers, the health check.
When:  Client is created at startup and closed at shutdown; the database
       handle is looked up per request.

Connection Model:
    The driver keeps its own connection pool and is safe for concurrent use
    from many coroutines. The handle is never mutated after startup, so no
    locking is layered on top of it.
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from recipebox.config import settings
from recipebox.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def create_client(uri: str | None = None) -> AsyncMongoClient:
    """
    Build the long-lived async client.

    The driver connects lazily; the first awaited operation (normally the
    startup ping) opens the pool.
    """
    return AsyncMongoClient(
        uri or settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        appname="recipebox",
    )


def get_client_database(client: AsyncMongoClient, name: str | None = None) -> AsyncDatabase:
    """Equivalent of `use <database>` in the mongo shell."""
    return client[name or settings.mongo_db_name]


async def ping_database(db: AsyncDatabase) -> bool:
    """
    Returns True when the server answers a `ping` command.

    Used at startup (log only) and by GET /health.
    """
    try:
        await db.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB ping failed: %s", str(e))
        return False


async def close_client(client: AsyncMongoClient) -> None:
    """
    What:  Closes all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    await client.close()


# ── Request Dependency ────────────────────────────────────────────────────
def get_database(request: Request) -> AsyncDatabase:
    """
    FastAPI dependency that provides the shared database handle.

    Example usage in a route:
        @router.get("/recipes")
        async def list_recipes(db: AsyncDatabase = Depends(get_database)):
            ...

    Raises:
        DatabaseError: The lifespan never attached a database (→ 500)
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise DatabaseError(
            message="The database is not available. Please try again later.",
            context={"reason": "database handle missing from app.state"},
        )
    return db
