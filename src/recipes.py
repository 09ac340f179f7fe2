import json
from pathlib import Path

from .logger import logger


def load_recipes(path):
    """Load recipes to import from a JSON file.

    Each entry looks like ``{"name": ..., "ingredients": [groups],
    "translations": {"en": [groups]}}`` where a group is
    ``{"group": title, "items": [lines]}``. Entries without a name are
    dropped.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of recipe dictionaries.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    recipes = [r for r in data if isinstance(r, dict) and r.get("name")]
    if len(recipes) != len(data):
        logger.warning("Skipped {} unnamed recipe(s) in {}", len(data) - len(recipes), p)
    return recipes
