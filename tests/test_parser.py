# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `src` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest

from src.parser import (
    format_ingredient_line,
    parse_all_ingredients,
    parse_ingredient_group,
    parse_ingredient_line,
)


def test_full_line_with_note():
    p = parse_ingredient_line("250 g de farine tout usage (tamisée)")
    assert p.quantity == "250"
    assert p.unit == "g"
    assert p.name == "farine tout usage"
    assert p.note == "tamisée"


def test_quantity_without_unit():
    p = parse_ingredient_line("3 œufs")
    assert p.model_dump() == {"quantity": "3", "unit": None, "name": "œufs", "note": None}


@pytest.mark.parametrize(
    "line, quantity, unit, name",
    [
        ("2 c. à soupe d'huile d'olive", "2", "c. à soupe", "huile d'olive"),
        ("1 1/2 cup sugar", "1 1/2", "cup", "sugar"),
        ("2-3 tomates", "2-3", None, "tomates"),
        ("2 à 3 pommes", "2 à 3", None, "pommes"),
        ("2 to 3 cups flour", "2 to 3", "cups", "flour"),
        ("½ tasse de lait", "½", "tasse", "lait"),
        ("3 tablespoons of olive oil", "3", "tablespoons", "olive oil"),
        ("1,5 kg de pommes de terre", "1,5", "kg", "pommes de terre"),
        ("2 gousses d’ail", "2", "gousses", "ail"),
        ("1 l de lait", "1", "l", "lait"),
        (".5 tasse de lait", ".5", "tasse", "lait"),
        (",5 l de crème", ",5", "l", "crème"),
    ],
)
def test_quantity_unit_name(line, quantity, unit, name):
    p = parse_ingredient_line(line)
    assert (p.quantity, p.unit, p.name) == (quantity, unit, name)


def test_unit_without_quantity():
    p = parse_ingredient_line("Pincée de sel")
    assert p.quantity is None
    assert p.unit == "Pincée"
    assert p.name == "sel"


def test_unit_needs_trailing_space():
    # "l" must not be taken from "lime", nor "to" from "tofu"
    assert parse_ingredient_line("1 lime").unit is None
    assert parse_ingredient_line("1 lime").name == "lime"
    p = parse_ingredient_line("2 tofu")
    assert (p.quantity, p.name) == ("2", "tofu")


def test_partitives_stripped_repeatedly():
    assert parse_ingredient_line("100 g de la farine").name == "farine"
    assert parse_ingredient_line("Des oeufs").name == "oeufs"
    assert parse_ingredient_line("1 verre de l'eau").name == "eau"


def test_note_only_when_trailing():
    p = parse_ingredient_line("1 boîte (400 ml) de tomates")
    assert p.note is None
    assert p.unit == "boîte"
    assert p.name == "(400 ml) de tomates"


@pytest.mark.parametrize("line", ["", "   ", "(tiède", "tiède)", "()", "250 g", "(tiède)"])
def test_parse_never_fails(line):
    p = parse_ingredient_line(line)
    assert p.name is not None
    if line:
        assert p.name


def test_blank_line_keeps_raw_text():
    assert parse_ingredient_line("   ").name == "   "
    assert parse_ingredient_line("").name == ""
    assert parse_ingredient_line(", sel").quantity is None


def test_leftover_falls_back_to_input():
    # nothing left after the quantity: keep the whole trimmed line
    assert parse_ingredient_line("  250  ").name == "250"


@pytest.mark.parametrize(
    "line",
    [
        "250 g de farine tout usage (tamisée)",
        "3 œufs",
        "2 c. à soupe huile d'olive (froide)",
        "1 1/2 cup sugar",
        "sel et poivre",
    ],
)
def test_format_then_parse_is_stable(line):
    first = parse_ingredient_line(line)
    again = parse_ingredient_line(format_ingredient_line(first))
    assert again == first


def test_parse_group_keeps_structured_items():
    g = parse_ingredient_group(
        {
            "group": "Pâte",
            "items": ["250 g de farine", {"name": "beurre", "quantity": "30", "unit": "g"}, "  "],
        }
    )
    assert g.title == "Pâte"
    assert [i.name for i in g.items] == ["farine", "beurre"]
    assert g.items[1].unit == "g"


def test_parse_all_ingredients():
    groups = parse_all_ingredients(
        [{"title": "Sauce", "items": ["1 pincée de sel"]}, {"items": []}]
    )
    assert len(groups) == 2
    assert groups[0].items[0].unit == "pincée"
    assert groups[1].title is None
    assert parse_all_ingredients(None) == []
