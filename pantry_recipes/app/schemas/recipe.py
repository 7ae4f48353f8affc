from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeIngredientCreate(BaseModel):
    ingredient_id: int
    quantity: Optional[Decimal] = None
    unit: Optional[str] = Field(default=None, max_length=32)


class RecipeCreate(BaseModel):
    name: str = Field(max_length=200)
    instructions: Optional[str] = None
    ingredients: List[RecipeIngredientCreate] = Field(default_factory=list)


class RecipeIngredientRead(BaseModel):
    ingredient_id: int
    name: str
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None


class RecipeRead(BaseModel):
    id: int
    name: str
    instructions: Optional[str] = None
    ingredients: List[RecipeIngredientRead]


class RecipeSummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
