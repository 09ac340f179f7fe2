"""Batch linkage of recipes to canonical ingredients.

Detected vocabulary terms become ``ingredients`` rows (one per slug) and
``recipe_ingredients`` rows (one per recipe/ingredient pair). Running the
job again over the same text creates nothing new, so it can be retried
after a failure.
"""
from sqlalchemy.orm import Session

from . import crud
from .logger import logger
from .normalize import DedupPolicy, extract_ingredients_from_groups, keep_all, slugify
from .schemas import LinkageReport, LinkageSummary
from .vocabulary import normalize_locale


def link_recipe(
    db: Session,
    recipe_id: int,
    groups: list,
    locale: str = "fr",
    dry_run: bool = False,
    policy: DedupPolicy = keep_all,
) -> LinkageReport:
    locale = normalize_locale(locale)
    detected = extract_ingredients_from_groups(groups, locale=locale, policy=policy)
    report = LinkageReport(
        recipe_id=recipe_id, locale=locale, detected=detected, dry_run=dry_run
    )
    if not detected:
        logger.debug("Recipe {}: no known ingredient", recipe_id)
        return report

    logger.info(
        "Recipe {}: found {} ingredients: {}",
        recipe_id, len(detected), ", ".join(detected),
    )
    if dry_run:
        return report

    linked = set()
    for name in detected:
        ingredient, created = crud.get_or_create_ingredient(db, name, locale=locale)
        if created:
            report.ingredients_created.append(name)
            logger.info("Created new ingredient: {} ({})", name, slugify(name))
        # spelling variants ("oeuf", "œuf") share one slug and one link
        if ingredient.id in linked:
            continue
        linked.add(ingredient.id)
        if crud.create_link(db, recipe_id, ingredient.id):
            report.links_created += 1
    return report


def run_linkage(
    db: Session,
    locale: str = "fr",
    dry_run: bool = False,
    policy: DedupPolicy = keep_all,
) -> LinkageSummary:
    """Link every recipe that has ingredient text in ``locale``."""
    locale = normalize_locale(locale)
    summary = LinkageSummary(locale=locale, dry_run=dry_run)
    found = set()
    for recipe_id, groups in crud.iter_recipe_ingredient_groups(db, locale):
        report = link_recipe(
            db, recipe_id, groups, locale=locale, dry_run=dry_run, policy=policy
        )
        if not report.detected:
            continue
        summary.recipes_processed += 1
        found.update(report.detected)
        summary.ingredients_created += len(report.ingredients_created)
        summary.links_created += report.links_created
    summary.unique_ingredients = sorted(found)
    logger.info(
        "Linkage ({}): {} recipes, {} unique ingredients, {} new links",
        locale, summary.recipes_processed, len(found), summary.links_created,
    )
    return summary
