# Routes package init
"""
RecipeBox Backend: API Routes Package
=======================================

Route Inventory:
    - recipes.py: GET/POST /recipes, GET/PUT/DELETE /recipes/{id}
    - health.py:  GET /  (greeting), GET /health (store connectivity)

Routes stay thin: they pull path params and bodies out of the request,
call RecipeService with the injected database handle, and shape the JSON.
Status codes for failures come from the exception handlers in main.py.
"""
