from pathlib import Path

from src.db import init_db, SessionLocal
from src import crud
from src.parser import parse_all_ingredients
from src.recipes import load_recipes


def _structured(groups):
    return [g.model_dump(exclude_none=True) for g in parse_all_ingredients(groups)]


def main():
    init_db()
    p = Path(__file__).resolve().parents[1] / 'data' / 'recipes.json'
    if not p.exists():
        print('data/recipes.json not found')
        return
    data = load_recipes(p)
    db = SessionLocal()
    added = 0
    try:
        for r in data:
            name = r.get('name')
            if not name:
                continue
            if crud.get_recipe_by_name(db, name):
                continue
            translations = {
                locale: _structured(groups)
                for locale, groups in (r.get('translations') or {}).items()
            }
            crud.create_recipe(
                db,
                name=name,
                ingredients=_structured(r.get('ingredients', [])),
                translations=translations,
            )
            added += 1
    finally:
        db.close()
    print(f'Imported {added} recipes')


if __name__ == '__main__':
    main()
