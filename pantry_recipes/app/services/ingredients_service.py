import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pantry_recipes.app.db import models
from pantry_recipes.app.schemas.ingredient import IngredientCreate, IngredientUpdate
from pantry_recipes.app.services.text_utils import collapse_whitespace, title_case

logger = logging.getLogger(__name__)


def normalize_ingredient_name(raw: Optional[str]) -> str:
    return title_case(collapse_whitespace(raw or ""))


def _required_name(raw: Optional[str]) -> str:
    name = normalize_ingredient_name(raw)
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required.")
    return name


def _commit_or_conflict(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Ingredient already exists.")


def list_ingredients(
    db: Session,
    q: Optional[str] = None,
    location: Optional[models.StorageLocation] = None,
) -> List[models.Ingredient]:
    stmt = select(models.Ingredient)
    if q:
        stmt = stmt.where(models.Ingredient.name.ilike(f"%{q.strip()}%"))
    if location is not None:
        stmt = stmt.where(models.Ingredient.location == location)
    stmt = stmt.order_by(models.Ingredient.name.asc())
    return list(db.scalars(stmt).all())


def get_ingredient(db: Session, ingredient_id: int) -> models.Ingredient:
    ingredient = db.get(models.Ingredient, ingredient_id)
    if not ingredient:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")
    return ingredient


def create_ingredient(db: Session, data: IngredientCreate) -> models.Ingredient:
    ingredient = models.Ingredient(name=_required_name(data.name), location=data.location)
    db.add(ingredient)
    _commit_or_conflict(db)
    db.refresh(ingredient)
    logger.info("Created ingredient %s (%s)", ingredient.id, ingredient.name)
    return ingredient


def update_ingredient(db: Session, ingredient_id: int, data: IngredientUpdate) -> models.Ingredient:
    ingredient = get_ingredient(db, ingredient_id)
    if data.name is not None:
        ingredient.name = _required_name(data.name)
    if data.location is not None:
        ingredient.location = data.location
    _commit_or_conflict(db)
    db.refresh(ingredient)
    return ingredient


def delete_ingredient(db: Session, ingredient_id: int) -> None:
    ingredient = get_ingredient(db, ingredient_id)
    in_use = db.scalar(
        select(exists().where(models.RecipeIngredient.ingredient_id == ingredient.id))
    )
    if in_use:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Ingredient is used by one or more recipes.",
        )
    db.delete(ingredient)
    db.commit()


def normalize_existing_ingredients(db: Session) -> int:
    """Rewrite stored names that differ from their normalized form."""
    changed = 0
    for ingredient in db.scalars(select(models.Ingredient)).all():
        normalized = normalize_ingredient_name(ingredient.name)
        if normalized and normalized != ingredient.name:
            ingredient.name = normalized
            changed += 1
    if changed:
        db.commit()
    return changed
