"""
RecipeBox Backend: Application Package Initializer
====================================================

What: Marks the `recipebox` directory as a Python package.
Who:  Used by uvicorn (`recipebox.main:app`), pytest, and the route/service modules.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, reference resolution
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Mongo documents + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async MongoDB client
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls; services raise application
    exceptions; the app factory maps those exceptions to status codes.
"""

__version__ = "1.0.0"
