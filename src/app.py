from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import settings
from .db import SessionLocal, init_db
from .linkage import link_recipe
from .logger import logger
from .normalize import detect_known_ingredients, item_names, matches_loosely
from .parser import parse_all_ingredients
from .ranker import rank, rank_by_names
from .vocabulary import normalize_locale


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB once at startup
    init_db()
    yield


app = FastAPI(lifespan=lifespan)

# Allow CORS for API clients (adjust origins for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@app.get("/api/ingredients", response_model=List[schemas.CanonicalIngredient])
def list_ingredients(locale: Optional[str] = None, db: Session = Depends(get_db)):
    return crud.list_ingredients(db, normalize_locale(locale) if locale else None)


@app.get("/api/ingredients/suggest")
def suggest_ingredients(q: str = "", db: Session = Depends(get_db)):
    # too short to be useful as a type-ahead query
    if len(q.strip()) < 2:
        return {"suggestions": []}
    names = {
        i.name for i in crud.list_ingredients(db) if matches_loosely(i.name, q)
    }
    return {"suggestions": sorted(names)[: settings.suggestion_limit]}


@app.post(
    "/api/ingredients/parse",
    response_model=List[schemas.ParsedIngredientGroup],
    response_model_exclude_none=True,
)
def parse_ingredients(groups: List[schemas.IngredientGroup]):
    return parse_all_ingredients([g.model_dump() for g in groups])


@app.post("/api/ingredients/detect")
def detect_ingredients(payload: schemas.DetectRequest):
    locale = normalize_locale(payload.locale)
    found = detect_known_ingredients(payload.text, locale=locale)
    return {"locale": locale, "ingredients": sorted(found)}


@app.post("/api/recipes/by-ingredients", response_model=List[schemas.RecipeMatch])
def recipes_by_ingredients(
    payload: schemas.MatchRequest, db: Session = Depends(get_db)
):
    if not payload.ingredient_ids:
        return []
    links = crud.get_links_for_recipes_matching(db, payload.ingredient_ids)
    results = rank(payload.ingredient_ids, links, limit=settings.match_limit)
    names = crud.get_recipe_names(db, [r.recipe_id for r in results])
    logger.debug(
        "by-ingredients {}: {} recipes", payload.ingredient_ids, len(results)
    )
    return [
        schemas.RecipeMatch(**r.model_dump(), name=names.get(r.recipe_id))
        for r in results
    ]


@app.post("/api/recipes/{recipe_id}/link", response_model=schemas.LinkageReport)
def link_recipe_ingredients(
    recipe_id: int,
    locale: str = Query(default=settings.default_locale),
    dry_run: bool = False,
    db: Session = Depends(get_db),
):
    locale = normalize_locale(locale)
    if not crud.get_recipe(db, recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    groups = crud.get_recipe_ingredient_groups(db, recipe_id, locale)
    if groups is None:
        raise HTTPException(
            status_code=404, detail=f"No '{locale}' ingredients for this recipe"
        )
    return link_recipe(db, recipe_id, groups, locale=locale, dry_run=dry_run)


@app.get(
    "/api/search/ingredients",
    response_model=schemas.IngredientSearch,
    response_model_exclude_none=True,
)
def search_by_ingredient_names(
    ingredients: str = "",
    suggest: str = "",
    locale: str = Query(default=settings.default_locale),
    db: Session = Depends(get_db),
):
    """Free-text counterpart of /api/recipes/by-ingredients.

    ``suggest`` (2+ characters) lists item names used in recipes;
    otherwise ``ingredients`` is a comma-separated list of names matched
    against each recipe's items.
    """
    locale = normalize_locale(locale)
    recipes = [
        (recipe_id, item_names(groups))
        for recipe_id, groups in crud.iter_recipe_ingredient_groups(db, locale)
    ]

    if len(suggest.strip()) >= 2:
        names = {
            n for _, ns in recipes for n in ns
            if len(n) > 1 and matches_loosely(n, suggest)
        }
        return schemas.IngredientSearch(
            suggestions=sorted(names)[: settings.search_limit]
        )

    queries = [q for q in ingredients.split(",") if q.strip()]
    results = rank_by_names(queries, recipes)
    top = results[: settings.search_limit]
    names = crud.get_recipe_names(db, [r.recipe_id for r in top])
    return schemas.IngredientSearch(
        recipes=[
            schemas.RecipeMatch(**r.model_dump(), name=names.get(r.recipe_id))
            for r in top
        ],
        total=len(results),
    )
