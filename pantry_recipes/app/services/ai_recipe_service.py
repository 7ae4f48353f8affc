import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from pantry_recipes.app.db import models
from pantry_recipes.app.schemas.ai import GenerateAiRecipesRequest, GenerateAiRecipesResponse
from pantry_recipes.app.services.ai_recipe_parser import parse_ai_recipes
from pantry_recipes.app.services.llm_client import OllamaChatClient, build_messages

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECIPES = 5
MAX_RECIPES_LIMIT = 10

SYSTEM_PROMPT = (
    "You are a practical cooking assistant. "
    "Only suggest recipes that can be made using ONLY the provided ingredients plus common pantry staples "
    "(salt, pepper, water, and neutral cooking oil). "
    "Keep steps short and clear. "
    "Return plain text only (no code blocks, no markdown fences, no ASCII art)."
)


def resolve_max_recipes(requested: Optional[int]) -> int:
    if requested is not None and 1 <= requested <= MAX_RECIPES_LIMIT:
        return requested
    return DEFAULT_MAX_RECIPES


def build_user_prompt(ingredient_names: List[str], max_recipes: int, notes: Optional[str] = None) -> str:
    prompt = (
        "Ingredients I have:\n- " + "\n- ".join(ingredient_names) + "\n\n"
        f"Suggest up to {max_recipes} recipes. For each recipe include:\n"
        "1) Name\n2) Ingredients used (subset of my ingredients + pantry staples)\n3) Steps (3-6 steps)\n"
    )
    if notes and notes.strip():
        prompt += f"\nNotes/preferences:\n{notes.strip()}\n"
    return prompt


def _ingredient_names(db: Session, ingredient_ids: List[int]) -> List[str]:
    if not ingredient_ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Provide at least one ingredient_id.")
    unique_ids = sorted(set(ingredient_ids))
    stmt = (
        select(models.Ingredient.name)
        .where(models.Ingredient.id.in_(unique_ids))
        .order_by(models.Ingredient.name.asc())
    )
    names = list(db.scalars(stmt).all())
    if len(names) != len(unique_ids):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="One or more ingredient_ids are invalid.")
    return names


async def generate_recipe_suggestions(
    db: Session,
    request: GenerateAiRecipesRequest,
    client: OllamaChatClient,
) -> GenerateAiRecipesResponse:
    names = _ingredient_names(db, request.ingredient_ids)
    max_recipes = resolve_max_recipes(request.max_recipes)
    messages = build_messages(SYSTEM_PROMPT, build_user_prompt(names, max_recipes, request.notes))

    result = await client.chat(messages)
    recipes = parse_ai_recipes(result.content)
    logger.info(
        "AI suggestions for %d ingredients: model=%s, parsed %d recipes",
        len(names),
        result.model,
        len(recipes),
    )
    return GenerateAiRecipesResponse(model=result.model, content=result.content, recipes=recipes)
