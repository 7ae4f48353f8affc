import logging
from decimal import Decimal
from typing import Dict

from sqlalchemy import select
from sqlalchemy.orm import Session

from pantry_recipes.app.db import models

logger = logging.getLogger(__name__)

SEED_INGREDIENTS = [
    ("Flour", models.StorageLocation.PANTRY),
    ("Eggs", models.StorageLocation.FRIDGE),
    ("Milk", models.StorageLocation.FRIDGE),
    ("Sugar", models.StorageLocation.PANTRY),
    ("Butter", models.StorageLocation.FRIDGE),
    ("Salt", models.StorageLocation.PANTRY),
    ("Tomato", models.StorageLocation.PANTRY),
    ("Basil", models.StorageLocation.FRIDGE),
    ("Garlic", models.StorageLocation.PANTRY),
    ("Olive Oil", models.StorageLocation.PANTRY),
    ("Pasta", models.StorageLocation.PANTRY),
]

SEED_RECIPES = [
    {
        "name": "Pancakes",
        "instructions": "Mix ingredients, then cook on a lightly buttered skillet until golden.",
        "ingredients": [
            ("Flour", "200", "g"),
            ("Eggs", "2", "pcs"),
            ("Milk", "300", "ml"),
            ("Butter", "30", "g"),
            ("Sugar", "20", "g"),
            ("Salt", "1", "tsp"),
        ],
    },
    {
        "name": "Tomato Basil Pasta",
        "instructions": (
            "Cook pasta. Sauté garlic in olive oil, add tomatoes, toss with pasta, finish with basil and salt."
        ),
        "ingredients": [
            ("Pasta", "200", "g"),
            ("Tomato", "3", "pcs"),
            ("Garlic", "2", "cloves"),
            ("Olive Oil", "2", "tbsp"),
            ("Basil", "10", "leaves"),
            ("Salt", "1", "tsp"),
        ],
    },
]


def seed_demo_data(db: Session) -> Dict[str, int]:
    """Load the demo catalog; does nothing when any ingredient or recipe exists."""
    has_data = db.scalars(select(models.Ingredient.id).limit(1)).first() is not None
    has_data = has_data or db.scalars(select(models.Recipe.id).limit(1)).first() is not None
    if has_data:
        logger.info("Catalog already has data; skipping seed")
        return {"ingredients": 0, "recipes": 0, "skipped": 1}

    by_name = {}
    for name, location in SEED_INGREDIENTS:
        ingredient = models.Ingredient(name=name, location=location)
        db.add(ingredient)
        by_name[name] = ingredient

    for entry in SEED_RECIPES:
        recipe = models.Recipe(name=entry["name"], instructions=entry["instructions"])
        for ingredient_name, quantity, unit in entry["ingredients"]:
            recipe.recipe_ingredients.append(
                models.RecipeIngredient(ingredient=by_name[ingredient_name], quantity=Decimal(quantity), unit=unit)
            )
        db.add(recipe)

    db.commit()
    stats = {"ingredients": len(SEED_INGREDIENTS), "recipes": len(SEED_RECIPES), "skipped": 0}
    logger.info("Seeded %(ingredients)s ingredients and %(recipes)s recipes", stats)
    return stats
