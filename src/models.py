from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from .db import Base


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, index=True, nullable=False)
    ingredients = Column(Text, nullable=True)  # JSON-encoded groups


class RecipeTranslation(Base):
    __tablename__ = "recipe_translations"
    __table_args__ = (UniqueConstraint("recipe_id", "locale"),)
    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    )
    locale = Column(String(8), nullable=False)
    name = Column(String(200), nullable=True)
    ingredients = Column(Text, nullable=True)  # JSON-encoded groups


class Ingredient(Base):
    __tablename__ = "ingredients"
    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(200), unique=True, index=True, nullable=False)
    name = Column(String(200), nullable=False)
    locale = Column(String(8), nullable=True)  # locale it was first seen in


class RecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"
    __table_args__ = (UniqueConstraint("recipe_id", "ingredient_id"),)
    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"),
        index=True, nullable=False,
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredients.id", ondelete="CASCADE"),
        index=True, nullable=False,
    )
