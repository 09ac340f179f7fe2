import json
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models
from .logger import logger
from .normalize import slugify
from .vocabulary import DEFAULT_LOCALE


def get_recipe(db: Session, recipe_id: int):
    return db.query(models.Recipe).filter(models.Recipe.id == recipe_id).first()


def get_recipe_by_name(db: Session, name: str):
    return db.query(models.Recipe).filter(models.Recipe.name == name).first()


def create_recipe(
    db: Session, name: str, ingredients: list, translations: Optional[dict] = None
):
    """Store a recipe with its ingredient groups and per-locale translations.

    ``translations`` maps locale -> ingredient groups for that locale.
    """
    db_recipe = models.Recipe(name=name, ingredients=json.dumps(ingredients or []))
    db.add(db_recipe)
    db.flush()
    for locale, groups in (translations or {}).items():
        db.add(
            models.RecipeTranslation(
                recipe_id=db_recipe.id,
                locale=locale,
                ingredients=json.dumps(groups or []),
            )
        )
    db.commit()
    db.refresh(db_recipe)
    return db_recipe


def _load_groups(raw: Optional[str]) -> list:
    try:
        groups = json.loads(raw or "[]")
    except ValueError:
        logger.warning("Unreadable ingredient groups: {!r}", raw[:80])
        return []
    return groups if isinstance(groups, list) else []


def get_recipe_ingredient_groups(
    db: Session, recipe_id: int, locale: str = DEFAULT_LOCALE
) -> Optional[list]:
    """Ingredient groups of a recipe in ``locale``, or None if absent."""
    if locale == DEFAULT_LOCALE:
        r = get_recipe(db, recipe_id)
        return _load_groups(r.ingredients) if r else None
    t = (
        db.query(models.RecipeTranslation)
        .filter(
            models.RecipeTranslation.recipe_id == recipe_id,
            models.RecipeTranslation.locale == locale,
        )
        .first()
    )
    return _load_groups(t.ingredients) if t else None


def iter_recipe_ingredient_groups(db: Session, locale: str = DEFAULT_LOCALE):
    """Yield ``(recipe_id, groups)`` for every recipe with text in ``locale``."""
    if locale == DEFAULT_LOCALE:
        rows = db.query(models.Recipe.id, models.Recipe.ingredients).order_by(
            models.Recipe.id
        )
    else:
        rows = (
            db.query(
                models.RecipeTranslation.recipe_id,
                models.RecipeTranslation.ingredients,
            )
            .filter(models.RecipeTranslation.locale == locale)
            .order_by(models.RecipeTranslation.recipe_id)
        )
    for recipe_id, raw in rows.all():
        yield recipe_id, _load_groups(raw)


def get_ingredient_by_slug(db: Session, slug: str):
    return (
        db.query(models.Ingredient).filter(models.Ingredient.slug == slug).first()
    )


def list_ingredients(db: Session, locale: Optional[str] = None):
    q = db.query(models.Ingredient)
    if locale:
        q = q.filter(models.Ingredient.locale == locale)
    return q.order_by(models.Ingredient.name).all()


def get_or_create_ingredient(db: Session, name: str, locale: Optional[str] = None):
    """Return ``(ingredient, created)`` for ``name``, keyed by its slug."""
    slug = slugify(name)
    existing = get_ingredient_by_slug(db, slug)
    if existing:
        return existing, False
    db_ingredient = models.Ingredient(slug=slug, name=name, locale=locale)
    db.add(db_ingredient)
    try:
        db.commit()
    except IntegrityError:
        # created concurrently under the same slug
        db.rollback()
        existing = get_ingredient_by_slug(db, slug)
        if existing is None:
            # the conflict was not on the slug
            raise
        logger.warning("Ingredient {} already exists, reusing it", slug)
        return existing, False
    db.refresh(db_ingredient)
    return db_ingredient, True


def link_exists(db: Session, recipe_id: int, ingredient_id: int) -> bool:
    return (
        db.query(models.RecipeIngredient.id)
        .filter(
            models.RecipeIngredient.recipe_id == recipe_id,
            models.RecipeIngredient.ingredient_id == ingredient_id,
        )
        .first()
        is not None
    )


def create_link(db: Session, recipe_id: int, ingredient_id: int) -> bool:
    """Link a recipe to an ingredient. Returns False if already linked."""
    if link_exists(db, recipe_id, ingredient_id):
        return False
    db.add(models.RecipeIngredient(recipe_id=recipe_id, ingredient_id=ingredient_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(
            "Link recipe={} ingredient={} already exists", recipe_id, ingredient_id
        )
        return False
    return True


def get_links_for_recipes_matching(
    db: Session, ingredient_ids: Iterable[int]
) -> List[models.RecipeIngredient]:
    """All links of every recipe linked to at least one of ``ingredient_ids``.

    Read in one query so the ranking sees a consistent snapshot.
    """
    ids = list(ingredient_ids)
    if not ids:
        return []
    touched = (
        select(models.RecipeIngredient.recipe_id)
        .where(models.RecipeIngredient.ingredient_id.in_(ids))
        .distinct()
    )
    return (
        db.query(models.RecipeIngredient)
        .filter(models.RecipeIngredient.recipe_id.in_(touched))
        .all()
    )


def get_recipe_names(db: Session, recipe_ids: Iterable[int]) -> dict:
    ids = list(recipe_ids)
    if not ids:
        return {}
    rows = (
        db.query(models.Recipe.id, models.Recipe.name)
        .filter(models.Recipe.id.in_(ids))
        .all()
    )
    return {rid: name for rid, name in rows}
