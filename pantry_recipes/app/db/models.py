import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from pantry_recipes.app.db.base import Base


class StorageLocation(str, enum.Enum):
    PANTRY = "pantry"
    FRIDGE = "fridge"
    FREEZER = "freezer"


class Ingredient(Base):
    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True, index=True)
    location = Column(
        Enum(StorageLocation, native_enum=False, length=16),
        nullable=False,
        default=StorageLocation.PANTRY,
        server_default=StorageLocation.PANTRY.name,
    )

    recipe_ingredients = relationship("RecipeIngredient", back_populates="ingredient")


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True, index=True)
    instructions = Column(Text)

    recipe_ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
    )


class RecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"

    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id", ondelete="RESTRICT"), primary_key=True, index=True)
    quantity = Column(Numeric(10, 2))
    unit = Column(String(32))

    recipe = relationship("Recipe", back_populates="recipe_ingredients")
    ingredient = relationship("Ingredient", back_populates="recipe_ingredients")
