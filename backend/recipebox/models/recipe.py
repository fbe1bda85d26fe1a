"""
RecipeBox Backend: Recipe Document Model
==========================================

What:  Shape of the documents stored in the `recipes` collection, plus the
       helpers that build them and turn them into JSON-safe values.
Who:   Used by RecipeService for writes and by route handlers for responses.

Document Layout (recipes collection):
    {
        "_id":          ObjectId,          # store-generated
        "name":         str,
        "cuisine":      {"_id": ObjectId, "name": str, ...},   # embedded copy
        "prepTime":     any scalar,
        "cookTime":     any scalar,
        "servings":     any scalar,
        "ingredients":  any,
        "instructions": any,
        "tags":         [{"_id": ObjectId, "name": str, ...}, ...]  # embedded copies
    }

Denormalization:
    Cuisine and tag documents are copied into the recipe when it is written.
    Renaming a cuisine or tag later does not touch existing recipes; they keep
    the snapshot taken at write time.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Sequence

from bson import Decimal128, ObjectId
from bson.errors import InvalidId

from recipebox.exceptions import InvalidIdentifierError

# Fields a draft must carry with a non-blank value
REQUIRED_FIELDS = ("name", "cuisine", "ingredients", "instructions", "tags")

# Free-form fields copied through as-is (null when absent)
OPTIONAL_FIELDS = ("prepTime", "cookTime", "servings")

# Fields returned by the list endpoint; `_id` is included by MongoDB default
SUMMARY_PROJECTION: Dict[str, int] = {
    "name": 1,
    "cuisine": 1,
    "tags": 1,
    "prepTime": 1,
}


def parse_object_id(value: Any) -> ObjectId:
    """
    Converts a path identifier into an ObjectId.

    Raises:
        InvalidIdentifierError: value is not a 24-char hex string / 12 bytes
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would generate a fresh id instead of failing
    if value is None:
        raise InvalidIdentifierError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(value)


def _is_blank(value: Any) -> bool:
    # Empty lists and objects count as present; only empty scalars are blank
    return value is None or (isinstance(value, (str, int, float)) and not value)


def missing_required_fields(draft: Mapping[str, Any]) -> List[str]:
    """
    Names of required fields that are absent or blank, in declaration order.

    Blank means None, "", 0 or False. An empty `tags` list is valid: it
    resolves to zero tag documents.
    """
    return [field for field in REQUIRED_FIELDS if _is_blank(draft.get(field))]


def build_recipe_document(
    draft: Mapping[str, Any],
    cuisine: Mapping[str, Any],
    tags: Sequence[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Assembles a recipe document from a validated draft and resolved references.

    The result holds every recipe field, so it serves both as an insert
    payload and as a full-replacement `$set` for updates.
    """
    return {
        "name": draft.get("name"),
        "cuisine": dict(cuisine),
        "prepTime": draft.get("prepTime"),
        "cookTime": draft.get("cookTime"),
        "servings": draft.get("servings"),
        "ingredients": draft.get("ingredients"),
        "instructions": draft.get("instructions"),
        "tags": [dict(tag) for tag in tags],
    }


def to_jsonable(value: Any) -> Any:
    """
    Recursively converts BSON values into JSON-serializable ones.

    ObjectId → 24-char hex string, datetime → ISO 8601, Decimal128 (mongo
    shell `NumberDecimal`) → decimal string; dicts and lists are
    walked so embedded cuisine/tag `_id`s are converted too.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, Mapping):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value
