from typing import List, Optional

from pydantic import BaseModel, Field

from pantry_recipes.app.services.ai_recipe_parser import ParsedRecipe


class GenerateAiRecipesRequest(BaseModel):
    ingredient_ids: List[int] = Field(default_factory=list)
    max_recipes: Optional[int] = None
    notes: Optional[str] = None


class GenerateAiRecipesResponse(BaseModel):
    model: str
    content: str
    recipes: List[ParsedRecipe] = Field(default_factory=list)


class ParseAiRecipesRequest(BaseModel):
    content: str = ""
