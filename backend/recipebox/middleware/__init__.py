# Middleware package init
"""
RecipeBox Backend: Middleware Package
=======================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error body can
    include the correlation ID. Starlette applies middleware in reverse order
    of `add_middleware`, so main.py registers them innermost first.
"""
