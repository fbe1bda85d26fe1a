"""
RecipeBox Backend: Recipe Route Handlers
==========================================

What:  CRUD endpoints for /recipes.
How:   Extracts path params and bodies, delegates to RecipeService, converts
       BSON documents to JSON-safe dicts, and returns the response models.
Who:   Called by the recipe frontend and API clients.

Route Table:
    GET    /recipes         → 200 {recipes: [...summaries]}
    GET    /recipes/{id}    → 200 {recipes: {...document}}
    POST   /recipes         → 201 {message, recipeId}
    PUT    /recipes/{id}    → 200 {message}
    DELETE /recipes/{id}    → 200 {message}

    Error statuses (400/404/500) come from the global exception handlers in
    main.py; these handlers never set them directly.
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase

from recipebox.database import get_database
from recipebox.models.recipe import to_jsonable
from recipebox.schemas.recipe import (
    ErrorResponse,
    MessageResponse,
    RecipeCreatedResponse,
    RecipeDetailResponse,
    RecipeDraft,
    RecipeListResponse,
)
from recipebox.services.recipe_service import recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get(
    "",
    response_model=RecipeListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List recipes",
    description="Returns every recipe with only name, cuisine, tags and prepTime.",
)
async def list_recipes(db: AsyncDatabase = Depends(get_database)) -> RecipeListResponse:
    recipes = await recipe_service.list_recipes(db)
    return RecipeListResponse(recipes=to_jsonable(recipes))


@router.get(
    "/{recipe_id}",
    response_model=RecipeDetailResponse,
    responses={
        400: {"description": "Malformed recipe id", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a recipe by id",
)
async def get_recipe(
    recipe_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> RecipeDetailResponse:
    """
    Full recipe document, including the embedded cuisine and tag snapshots.

    Args:
        recipe_id: 24-character hex ObjectId. Anything else is a 400.
    """
    recipe = await recipe_service.get_recipe(db, recipe_id)
    return RecipeDetailResponse(recipes=to_jsonable(recipe))


@router.post(
    "",
    status_code=201,
    response_model=RecipeCreatedResponse,
    responses={
        400: {"description": "Missing fields or invalid cuisine", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a recipe",
    description=(
        "Creates a recipe. `cuisine` must name an existing cuisine; `tags` are "
        "matched by name and unknown names are ignored. The matched cuisine and "
        "tag documents are copied into the recipe."
    ),
)
async def create_recipe(
    draft: RecipeDraft,
    db: AsyncDatabase = Depends(get_database),
) -> RecipeCreatedResponse:
    recipe_id = await recipe_service.create_recipe(db, draft.model_dump())
    return RecipeCreatedResponse(message="New recipe has been created", recipeId=recipe_id)


@router.put(
    "/{recipe_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed id, missing fields or invalid cuisine", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace a recipe",
    description="Full replacement: every recipe field is overwritten. Unknown ids are not created.",
)
async def update_recipe(
    recipe_id: str,
    draft: RecipeDraft,
    db: AsyncDatabase = Depends(get_database),
) -> MessageResponse:
    await recipe_service.update_recipe(db, recipe_id, draft.model_dump())
    return MessageResponse(message="Recipe updated")


@router.delete(
    "/{recipe_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed recipe id", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a recipe",
)
async def delete_recipe(
    recipe_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> MessageResponse:
    await recipe_service.delete_recipe(db, recipe_id)
    return MessageResponse(message="Recipe has been deleted successfully")
