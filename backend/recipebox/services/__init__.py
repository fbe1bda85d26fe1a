# Services package init
"""
RecipeBox Backend: Services Layer
===================================

Service Inventory:
    - RecipeService: recipe validation, cuisine/tag resolution, and CRUD

Services take the database handle as an argument and raise application
exceptions; they know nothing about HTTP.
"""
