from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase (matchPercentage), Python attributes stay snake_case
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ParsedIngredientLine(BaseModel):
    quantity: Optional[str] = Field(
        default=None, json_schema_extra={"example": "250"}
    )
    unit: Optional[str] = Field(default=None, json_schema_extra={"example": "g"})
    name: str = Field(..., json_schema_extra={"example": "farine tout usage"})
    note: Optional[str] = Field(default=None, json_schema_extra={"example": "tamisée"})


class IngredientGroup(BaseModel):
    title: Optional[str] = None
    items: List[str] = Field(
        default_factory=list,
        json_schema_extra={"example": ["250 g de farine", "3 œufs"]},
    )


class ParsedIngredientGroup(BaseModel):
    title: Optional[str] = None
    items: List[ParsedIngredientLine] = Field(default_factory=list)


class CanonicalIngredient(CamelModel):
    id: int
    slug: str
    name: str
    locale: Optional[str] = None


class RecipeIngredientLink(CamelModel):
    recipe_id: int
    ingredient_id: int


class MatchResult(CamelModel):
    recipe_id: int
    matching_ingredients: int
    total_ingredients: int
    match_percentage: int


class RecipeMatch(MatchResult):
    name: Optional[str] = None


class MatchRequest(CamelModel):
    ingredient_ids: List[int] = Field(
        default_factory=list, json_schema_extra={"example": [1, 4, 12]}
    )


class DetectRequest(BaseModel):
    text: str = Field(..., json_schema_extra={"example": "2 tomates et du basilic"})
    locale: str = "fr"


class LinkageReport(CamelModel):
    recipe_id: int
    locale: str
    detected: List[str] = Field(default_factory=list)
    ingredients_created: List[str] = Field(default_factory=list)
    links_created: int = 0
    dry_run: bool = False


class LinkageSummary(CamelModel):
    locale: str
    recipes_processed: int = 0
    unique_ingredients: List[str] = Field(default_factory=list)
    ingredients_created: int = 0
    links_created: int = 0
    dry_run: bool = False


class IngredientSearch(CamelModel):
    recipes: List[RecipeMatch] = Field(default_factory=list)
    total: int = 0
    suggestions: Optional[List[str]] = None
