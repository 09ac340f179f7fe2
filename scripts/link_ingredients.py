"""Link recipes to canonical ingredients.

Usage:
    python -m scripts.link_ingredients --locale fr
    python -m scripts.link_ingredients --locale en --dry-run
"""
import argparse

from src.db import init_db, SessionLocal
from src.linkage import run_linkage
from src.normalize import keep_all, prefer_longest
from src.vocabulary import KNOWN_INGREDIENTS, SUPPORTED_LOCALES


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument('--locale', default='fr', choices=SUPPORTED_LOCALES)
    ap.add_argument('--dry-run', action='store_true')
    ap.add_argument(
        '--prefer-longest', action='store_true',
        help='keep only the most specific of overlapping terms',
    )
    args = ap.parse_args(argv)

    init_db()
    print('=' * 50)
    print(f'Mode: {"DRY RUN" if args.dry_run else "LIVE"}')
    print(f'Known {args.locale} ingredients: {len(KNOWN_INGREDIENTS[args.locale])}')

    db = SessionLocal()
    try:
        summary = run_linkage(
            db,
            locale=args.locale,
            dry_run=args.dry_run,
            policy=prefer_longest if args.prefer_longest else keep_all,
        )
    finally:
        db.close()

    print('=' * 50)
    print(f'Recipes processed: {summary.recipes_processed}')
    print(f'Unique ingredients found: {len(summary.unique_ingredients)}')
    if not args.dry_run:
        print(f'New ingredients created: {summary.ingredients_created}')
        print(f'New ingredient links created: {summary.links_created}')
    for name in summary.unique_ingredients:
        print(f'  - {name}')


if __name__ == '__main__':
    main()
