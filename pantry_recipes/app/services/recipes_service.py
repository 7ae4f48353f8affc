import logging
from typing import Iterable, List

from fastapi import HTTPException, status
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from pantry_recipes.app.db import models
from pantry_recipes.app.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeIngredientRead,
    RecipeRead,
)

logger = logging.getLogger(__name__)


def _blank_to_none(value):
    if value is None:
        return None
    value = value.strip()
    return value or None


def _with_ingredients():
    return selectinload(models.Recipe.recipe_ingredients).selectinload(models.RecipeIngredient.ingredient)


def to_recipe_read(recipe: models.Recipe) -> RecipeRead:
    rows = sorted(recipe.recipe_ingredients, key=lambda ri: ri.ingredient.name)
    return RecipeRead(
        id=recipe.id,
        name=recipe.name,
        instructions=recipe.instructions,
        ingredients=[
            RecipeIngredientRead(
                ingredient_id=ri.ingredient_id,
                name=ri.ingredient.name,
                quantity=ri.quantity,
                unit=ri.unit,
            )
            for ri in rows
        ],
    )


def _unique_requested(ingredients: Iterable[RecipeIngredientCreate]) -> List[RecipeIngredientCreate]:
    seen = set()
    requested = []
    for item in ingredients:
        if item.ingredient_id <= 0 or item.ingredient_id in seen:
            continue
        seen.add(item.ingredient_id)
        requested.append(item)
    return requested


def list_recipes(db: Session) -> List[models.Recipe]:
    stmt = select(models.Recipe).options(_with_ingredients()).order_by(models.Recipe.name.asc())
    return list(db.scalars(stmt).all())


def get_recipe(db: Session, recipe_id: int) -> models.Recipe:
    stmt = select(models.Recipe).options(_with_ingredients()).where(models.Recipe.id == recipe_id)
    recipe = db.scalars(stmt).first()
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


def create_recipe(db: Session, data: RecipeCreate) -> models.Recipe:
    name = (data.name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required.")

    requested = _unique_requested(data.ingredients)
    if not requested:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="At least one ingredient is required.")

    ingredient_ids = [item.ingredient_id for item in requested]
    existing_ids = set(db.scalars(select(models.Ingredient.id).where(models.Ingredient.id.in_(ingredient_ids))).all())
    missing = [ingredient_id for ingredient_id in ingredient_ids if ingredient_id not in existing_ids]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Unknown ingredient IDs.", "missing_ingredient_ids": missing},
        )

    recipe = models.Recipe(name=name, instructions=_blank_to_none(data.instructions))
    for item in requested:
        recipe.recipe_ingredients.append(
            models.RecipeIngredient(
                ingredient_id=item.ingredient_id,
                quantity=item.quantity,
                unit=_blank_to_none(item.unit),
            )
        )

    db.add(recipe)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Recipe already exists.")
    logger.info("Created recipe %s (%s) with %d ingredients", recipe.id, recipe.name, len(requested))
    return get_recipe(db, recipe.id)


def delete_recipe(db: Session, recipe_id: int) -> None:
    recipe = get_recipe(db, recipe_id)
    db.delete(recipe)
    db.commit()


def list_makeable_recipes(db: Session, ingredient_ids: Iterable[int]) -> List[models.Recipe]:
    """Recipes whose every ingredient is among ``ingredient_ids``."""
    have = sorted(set(ingredient_ids))
    if not have:
        return []
    needs_missing = exists().where(
        models.RecipeIngredient.recipe_id == models.Recipe.id,
        models.RecipeIngredient.ingredient_id.notin_(have),
    )
    stmt = select(models.Recipe).where(~needs_missing).order_by(models.Recipe.name.asc())
    return list(db.scalars(stmt).all())
