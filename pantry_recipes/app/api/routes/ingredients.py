from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from pantry_recipes.app.api.deps import get_db_session
from pantry_recipes.app.db.models import StorageLocation
from pantry_recipes.app.schemas.ingredient import IngredientCreate, IngredientRead, IngredientUpdate
from pantry_recipes.app.services import ingredients_service

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientRead])
def list_ingredients(
    q: Optional[str] = Query(default=None),
    location: Optional[StorageLocation] = Query(default=None),
    db: Session = Depends(get_db_session),
):
    return ingredients_service.list_ingredients(db, q, location)


@router.post("", response_model=IngredientRead, status_code=status.HTTP_201_CREATED)
def create_ingredient(
    payload: IngredientCreate,
    response: Response,
    db: Session = Depends(get_db_session),
):
    ingredient = ingredients_service.create_ingredient(db, payload)
    response.headers["Location"] = f"/api/ingredients/{ingredient.id}"
    return ingredient


@router.patch("/{ingredient_id}", response_model=IngredientRead)
def update_ingredient(
    ingredient_id: int,
    payload: IngredientUpdate,
    db: Session = Depends(get_db_session),
):
    return ingredients_service.update_ingredient(db, ingredient_id, payload)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(
    ingredient_id: int,
    db: Session = Depends(get_db_session),
):
    ingredients_service.delete_ingredient(db, ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
