from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .normalize import names_match
from .schemas import MatchResult


def match_percentage(matching: int, total: int) -> int:
    """Share of ``total`` covered by ``matching``, 0-100, halves round up."""
    return (200 * matching + total) // (2 * total)


def rank(
    selected: Iterable[int], links: Iterable, limit: Optional[int] = None
) -> List[MatchResult]:
    """Rank recipes by the share of their linked ingredients in ``selected``.

    ``links`` is a snapshot of the recipe/ingredient link table: any objects
    with ``recipe_id`` and ``ingredient_id`` attributes (ORM rows or
    ``RecipeIngredientLink``). Recipes sharing no ingredient with the
    selection are left out. Ordering is percentage, then matching count,
    both descending, then recipe id.
    """
    wanted = set(selected)
    if not wanted:
        return []

    by_recipe: Dict[int, Set[int]] = defaultdict(set)
    for link in links:
        by_recipe[link.recipe_id].add(link.ingredient_id)

    results = []
    for recipe_id, linked in by_recipe.items():
        matching = len(linked & wanted)
        if not matching:
            continue
        results.append(
            MatchResult(
                recipe_id=recipe_id,
                matching_ingredients=matching,
                total_ingredients=len(linked),
                match_percentage=match_percentage(matching, len(linked)),
            )
        )

    return order_results(results, limit)


def order_results(
    results: List[MatchResult], limit: Optional[int] = None
) -> List[MatchResult]:
    results.sort(
        key=lambda r: (-r.match_percentage, -r.matching_ingredients, r.recipe_id)
    )
    if limit is not None:
        results = results[:limit]
    return results


def rank_by_names(
    queries: Iterable[str],
    recipes: Iterable[Tuple[int, List[str]]],
    limit: Optional[int] = None,
) -> List[MatchResult]:
    """Rank recipes by free-text ingredient names instead of linked ids.

    ``recipes`` yields ``(recipe_id, item_names)``. A query matches the
    first item whose name contains it, or is contained in it, accents
    ignored. The score is the share of the recipe's items matched.
    """
    wanted = [q.strip() for q in queries if q and q.strip()]
    if not wanted:
        return []

    results = []
    for recipe_id, names in recipes:
        if not names:
            continue
        matched = set()
        for query in wanted:
            found = next((n for n in names if names_match(n, query)), None)
            if found is not None:
                matched.add(found)
        if not matched:
            continue
        results.append(
            MatchResult(
                recipe_id=recipe_id,
                matching_ingredients=len(matched),
                total_ingredients=len(names),
                match_percentage=match_percentage(len(matched), len(names)),
            )
        )
    return order_results(results, limit)
