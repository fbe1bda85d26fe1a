"""
RecipeBox Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract for the recipe endpoints.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Used by route handlers as body types and return types.

Validation split:
    The draft model only checks that the body is a JSON object with
    sensibly-typed fields. Whether required fields are present (and truthy)
    is a business rule checked by RecipeService, which reports it as a
    400 "Missing fields required" instead of FastAPI's field-level 422.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RecipeDraft(BaseModel):
    """
    What:  Body of POST /recipes and PUT /recipes/{id}.

    Required by the service: name, cuisine, ingredients, instructions, tags.
    Optional: prepTime, cookTime, servings (stored as given, no numeric checks).
    """
    name: Optional[str] = Field(default=None, description="Recipe name")
    cuisine: Optional[str] = Field(
        default=None,
        description="Name of an existing cuisine; its document is embedded in the recipe",
    )
    prepTime: Optional[Any] = Field(default=None, description="Preparation time (free-form)")
    cookTime: Optional[Any] = Field(default=None, description="Cooking time (free-form)")
    servings: Optional[Any] = Field(default=None, description="Number of servings (free-form)")
    ingredients: Optional[Any] = Field(default=None, description="Ingredients (free-form)")
    instructions: Optional[Any] = Field(default=None, description="Instructions (free-form)")
    tags: Optional[Union[List[str], str]] = Field(
        default=None,
        description="Tag names; names without a matching tag document are dropped",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Chicken Rice",
                "cuisine": "Chinese",
                "prepTime": 20,
                "cookTime": 45,
                "servings": 4,
                "ingredients": ["chicken", "rice", "ginger"],
                "instructions": ["Poach the chicken", "Cook rice in the stock"],
                "tags": ["comfort", "gluten-free"],
            }
        }
    }


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RecipeListResponse(BaseModel):
    """
    What:  GET /recipes body. Each item carries only `_id`, name, cuisine,
           tags and prepTime.
    """
    recipes: List[Dict[str, Any]] = Field(description="Projected recipe summaries")


class RecipeDetailResponse(BaseModel):
    """GET /recipes/{id} body: the full recipe document under `recipes`."""
    recipes: Dict[str, Any] = Field(description="Full recipe document")


class RecipeCreatedResponse(BaseModel):
    message: str = Field(default="New recipe has been created")
    recipeId: str = Field(description="Identifier of the new recipe (ObjectId hex)")


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for every non-2xx response.

    Example:
        {
            "error": "not_found",
            "message": "Recipe not found",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Document store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
