"""
RecipeBox Backend: Recipe Service (Business Logic)
====================================================

What:  Validation, reference resolution and CRUD for the recipes collection.
How:   Each operation receives the database handle explicitly, runs its
       checks, and performs at most three sequential store calls
       (cuisine lookup, tag lookup, primary operation).
Who:   Called by the /recipes route handlers.

Write Pipeline (create and full-replace update):
    ┌──────────────┐    ┌────────────────┐    ┌──────────────┐    ┌──────────┐
    │ Presence     │───▶│ Resolve        │───▶│ Resolve      │───▶│ Insert / │
    │ check        │    │ cuisine (1)    │    │ tags (0..n)  │    │ $set     │
    └──────────────┘    └────────────────┘    └──────────────┘    └──────────┘
        400 if a            400 "Invalid          unknown names
        field missing       cuisine"              silently dropped

    Lookups are reads only. If the primary write fails after they succeed,
    the error is reported and nothing is compensated.

Error Handling Strategy:
    Application exceptions (ValidationError, NotFoundError) propagate as-is.
    Driver errors (PyMongoError) are logged and wrapped in DatabaseError so
    the client sees a generic 500 message.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from recipebox.config import settings
from recipebox.exceptions import DatabaseError, NotFoundError, ValidationError
from recipebox.models.recipe import (
    SUMMARY_PROJECTION,
    build_recipe_document,
    missing_required_fields,
    parse_object_id,
)

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Business logic layer for recipe operations.

    Responsibilities:
        - list_recipes(): Projected summaries of every recipe
        - get_recipe(): Full document by id, with not-found handling
        - create_recipe(): Validate, resolve references, insert
        - update_recipe(): Validate, resolve references, full-field replace
        - delete_recipe(): Remove by id, with not-found handling

    The service holds only collection names; the database handle is passed
    into every call.
    """

    def __init__(
        self,
        recipes_collection: Optional[str] = None,
        cuisine_collection: Optional[str] = None,
        tags_collection: Optional[str] = None,
    ):
        self.recipes_collection = recipes_collection or settings.recipes_collection
        self.cuisine_collection = cuisine_collection or settings.cuisine_collection
        self.tags_collection = tags_collection or settings.tags_collection

    # ── Read Operations ───────────────────────────────────────────────────

    async def list_recipes(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        """
        Return every recipe, projected to name, cuisine, tags and prepTime.

        Raises:
            DatabaseError: The find failed (→ 500)
        """
        try:
            cursor = db[self.recipes_collection].find({}, SUMMARY_PROJECTION)
            recipes = await cursor.to_list()
        except PyMongoError as e:
            raise self._store_failure("list_recipes", e)

        logger.debug("Listed %d recipes", len(recipes))
        return recipes

    async def get_recipe(self, db: AsyncDatabase, recipe_id: str) -> Dict[str, Any]:
        """
        Retrieve a single recipe by id.

        Raises:
            InvalidIdentifierError: recipe_id is not an ObjectId (→ 400)
            NotFoundError: No recipe has that id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        oid = parse_object_id(recipe_id)

        try:
            recipe = await db[self.recipes_collection].find_one({"_id": oid})
        except PyMongoError as e:
            raise self._store_failure("get_recipe", e, recipe_id=recipe_id)

        # find_one returns None when nothing matches
        if recipe is None:
            raise NotFoundError(
                message="Sorry, recipe not found",
                resource="recipe",
                resource_id=recipe_id,
            )
        return recipe

    # ── Write Operations ──────────────────────────────────────────────────

    async def create_recipe(self, db: AsyncDatabase, draft: Mapping[str, Any]) -> str:
        """
        Validate a draft, embed its cuisine and tags, and insert it.

        Args:
            db: Database handle (injected by FastAPI)
            draft: Request body as a plain mapping

        Returns:
            The new recipe's id as a hex string

        Raises:
            ValidationError: Missing required fields or unknown cuisine (→ 400)
            DatabaseError: A lookup or the insert failed (→ 500)
        """
        document = await self._prepare_document(db, draft)

        try:
            result = await db[self.recipes_collection].insert_one(document)
        except PyMongoError as e:
            raise self._store_failure("create_recipe", e)

        recipe_id = str(result.inserted_id)
        logger.info(
            "Recipe created: %s (%r, cuisine=%r, %d tags)",
            recipe_id,
            document["name"],
            document["cuisine"].get("name"),
            len(document["tags"]),
        )
        return recipe_id

    async def update_recipe(
        self, db: AsyncDatabase, recipe_id: str, draft: Mapping[str, Any]
    ) -> None:
        """
        Replace every field of an existing recipe with a freshly resolved draft.

        No upsert: an unknown id is reported as not found and nothing is
        created. Optional fields missing from the draft are overwritten with
        null, since this is a replacement and not a merge.

        Raises:
            InvalidIdentifierError: recipe_id is not an ObjectId (→ 400)
            ValidationError: Missing required fields or unknown cuisine (→ 400)
            NotFoundError: No recipe has that id (→ 404)
            DatabaseError: A lookup or the update failed (→ 500)
        """
        oid = parse_object_id(recipe_id)
        document = await self._prepare_document(db, draft)

        try:
            result = await db[self.recipes_collection].update_one(
                {"_id": oid},
                {"$set": document},
            )
        except PyMongoError as e:
            raise self._store_failure("update_recipe", e, recipe_id=recipe_id)

        if result.matched_count == 0:
            raise NotFoundError(
                message="Recipe not found",
                resource="recipe",
                resource_id=recipe_id,
            )
        logger.info("Recipe updated: %s", recipe_id)

    async def delete_recipe(self, db: AsyncDatabase, recipe_id: str) -> None:
        """
        Remove one recipe by id.

        Raises:
            InvalidIdentifierError: recipe_id is not an ObjectId (→ 400)
            NotFoundError: No recipe has that id (→ 404)
            DatabaseError: The delete failed (→ 500)
        """
        oid = parse_object_id(recipe_id)

        try:
            result = await db[self.recipes_collection].delete_one({"_id": oid})
        except PyMongoError as e:
            raise self._store_failure("delete_recipe", e, recipe_id=recipe_id)

        if result.deleted_count == 0:
            raise NotFoundError(
                message="Recipe not found",
                resource="recipe",
                resource_id=recipe_id,
            )
        logger.info("Recipe deleted: %s", recipe_id)

    # ── Validation & Reference Resolution ─────────────────────────────────

    async def _prepare_document(
        self, db: AsyncDatabase, draft: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Presence check, then cuisine and tag resolution, then assembly."""
        self._validate_draft(draft)
        cuisine = await self._resolve_cuisine(db, draft["cuisine"])
        tags = await self._resolve_tags(db, draft["tags"])
        return build_recipe_document(draft, cuisine, tags)

    @staticmethod
    def _validate_draft(draft: Mapping[str, Any]) -> None:
        missing = missing_required_fields(draft)
        if missing:
            raise ValidationError(
                message="Missing fields required",
                context={"missing_fields": missing},
            )

    async def _resolve_cuisine(self, db: AsyncDatabase, name: str) -> Dict[str, Any]:
        """
        Exact name match against the cuisine collection.

        If several cuisines share a name, the first one the store returns wins.
        """
        try:
            cuisine = await db[self.cuisine_collection].find_one({"name": name})
        except PyMongoError as e:
            raise self._store_failure("resolve_cuisine", e)

        if cuisine is None:
            raise ValidationError(
                message="Invalid cuisine",
                field="cuisine",
                context={"cuisine": name},
            )
        return cuisine

    async def _resolve_tags(self, db: AsyncDatabase, names: Any) -> List[Dict[str, Any]]:
        """
        Set-membership match ($in) against the tags collection.

        Returns whichever tag documents exist, possibly fewer than requested
        or none at all.
        """
        if isinstance(names, str):
            names = [names]
        requested = list(names)

        try:
            cursor = db[self.tags_collection].find({"name": {"$in": requested}})
            tags = await cursor.to_list()
        except PyMongoError as e:
            raise self._store_failure("resolve_tags", e)

        if len(tags) < len(set(requested)):
            found = {tag.get("name") for tag in tags}
            logger.debug(
                "Dropping unknown tags: %s",
                sorted(str(n) for n in set(requested) - found),
            )
        return tags

    @staticmethod
    def _store_failure(operation: str, error: PyMongoError, **context: Any) -> DatabaseError:
        logger.error("MongoDB error in %s: %s", operation, str(error), exc_info=True)
        return DatabaseError(
            message="Could not complete the recipe operation. Please try again.",
            context={"operation": operation, "error_type": type(error).__name__, **context},
        )


# ── Singleton Instance ────────────────────────────────────────────────────
# RecipeService holds no per-request state
recipe_service = RecipeService()
