from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from pantry_recipes.app.api.deps import get_db_session
from pantry_recipes.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeSummary
from pantry_recipes.app.services import recipes_service

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeRead])
def list_recipes(db: Session = Depends(get_db_session)):
    return [recipes_service.to_recipe_read(recipe) for recipe in recipes_service.list_recipes(db)]


# Declared before "/{recipe_id}" so the literal path wins.
@router.get("/can-make", response_model=list[RecipeSummary])
def can_make(
    ingredient_ids: Optional[List[int]] = Query(default=None),
    db: Session = Depends(get_db_session),
):
    return recipes_service.list_makeable_recipes(db, ingredient_ids or [])


@router.get("/{recipe_id}", response_model=RecipeRead)
def get_recipe(recipe_id: int, db: Session = Depends(get_db_session)):
    return recipes_service.to_recipe_read(recipes_service.get_recipe(db, recipe_id))


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate,
    response: Response,
    db: Session = Depends(get_db_session),
):
    recipe = recipes_service.create_recipe(db, payload)
    response.headers["Location"] = f"/api/recipes/{recipe.id}"
    return recipes_service.to_recipe_read(recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: int, db: Session = Depends(get_db_session)):
    recipes_service.delete_recipe(db, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
