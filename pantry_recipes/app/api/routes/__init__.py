from fastapi import APIRouter

from pantry_recipes.app.api.routes import admin, ai, ingredients, recipes

api_router = APIRouter(prefix="/api")
api_router.include_router(ingredients.router)
api_router.include_router(recipes.router)
api_router.include_router(ai.router)
api_router.include_router(admin.router)
