from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pantry_recipes.app.db.models import StorageLocation


class IngredientCreate(BaseModel):
    name: str = Field(max_length=200)
    location: StorageLocation = StorageLocation.PANTRY


class IngredientUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)
    location: Optional[StorageLocation] = None


class IngredientRead(BaseModel):
    id: int
    name: str
    location: StorageLocation

    model_config = ConfigDict(from_attributes=True)
