# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `src` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest

from src.normalize import (
    detect_known_ingredients,
    extract_ingredients_from_groups,
    fold,
    item_names,
    matches_loosely,
    names_match,
    prefer_longest,
    slugify,
)
from src.vocabulary import KNOWN_INGREDIENTS, get_vocabulary, normalize_locale


def test_fold():
    assert fold("Crème Brûlée") == "creme brulee"
    assert fold("Œufs") == "oeufs"
    assert fold("") == ""


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Crème fraîche", "creme-fraiche"),
        ("  Œuf!! ", "oeuf"),
        ("pomme de terre", "pomme-de-terre"),
        ("chou-fleur", "chou-fleur"),
        ("--", ""),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug


def test_case_and_accents_do_not_matter():
    vocab = ["crème", "pêche", "gruyère"]
    for text in ["CRÈME", "creme", "Crème", "PECHE", "du gruyere rape"]:
        assert detect_known_ingredients(text, vocab)
    assert detect_known_ingredients("une PECHE", vocab) == {"pêche"}


@pytest.mark.parametrize("term", KNOWN_INGREDIENTS["fr"])
def test_every_french_term_matches_unaccented_upper(term):
    text = "2 " + fold(term).upper() + " frais"
    assert term in detect_known_ingredients(text, locale="fr")


def test_word_boundaries():
    vocab = ["pomme"]
    assert detect_known_ingredients("pomme de terre", vocab) == {"pomme"}
    assert detect_known_ingredients("3 pommes", vocab) == {"pomme"}
    assert detect_known_ingredients("jus de pommier", vocab) == set()
    assert detect_known_ingredients("grospomme", vocab) == set()
    assert detect_known_ingredients("pomme_verte", vocab) == {"pomme"}


def test_hyphen_is_a_boundary():
    found = detect_known_ingredients("1 chou-fleur", ["chou", "chou-fleur"])
    assert found == {"chou", "chou-fleur"}


def test_all_matching_terms_are_reported():
    vocab = ["crème", "crème fraîche"]
    found = detect_known_ingredients("200 ml de crème fraîche", vocab)
    assert found == {"crème", "crème fraîche"}


def test_prefer_longest_policy():
    vocab = ["crème", "crème fraîche", "sel"]
    found = detect_known_ingredients(
        "crème fraîche et sel", vocab, policy=prefer_longest
    )
    assert found == {"crème fraîche", "sel"}
    # spelling variants are both kept
    assert prefer_longest({"oeuf", "œuf"}) == {"oeuf", "œuf"}


def test_original_spelling_is_returned():
    found = detect_known_ingredients("3 oeufs", locale="fr")
    assert {"oeuf", "œuf", "oeufs", "œufs"} <= found


def test_empty_or_unknown_text():
    assert detect_known_ingredients("", locale="fr") == set()
    assert detect_known_ingredients("rien du tout", ["farine"]) == set()


def test_locale_vocabulary():
    assert "sel" in detect_known_ingredients("une pincée de sel", locale="fr")
    assert detect_known_ingredients("une pincée de sel", locale="en") == set()
    assert detect_known_ingredients("a pinch of salt", locale="en-CA") == {"salt"}
    # unknown locale falls back to french
    assert detect_known_ingredients("sel", locale="xx") == {"sel"}


def test_get_vocabulary():
    assert get_vocabulary("EN") is KNOWN_INGREDIENTS["en"]
    assert get_vocabulary(None) is KNOWN_INGREDIENTS["fr"]
    assert normalize_locale("en_US") == "en"


def test_extract_from_groups():
    groups = [
        {"group": "Pâte", "items": ["250 g de farine", {"name": "beurre fondu"}]},
        {"items": None},
    ]
    assert extract_ingredients_from_groups(groups) == ["beurre", "farine"]
    assert extract_ingredients_from_groups([]) == []


def test_matches_loosely():
    assert matches_loosely("Crème fraîche", "creme")
    assert matches_loosely("creme", "CRÈ")
    assert not matches_loosely("beurre", "cre")
    assert not matches_loosely("beurre", "  ")


def test_multiword_terms_span_any_whitespace():
    vocab = ["crème fraîche"]
    assert detect_known_ingredients("crème  fraîche", vocab) == {"crème fraîche"}
    assert detect_known_ingredients("crème\nfraîches", vocab) == {"crème fraîche"}
    assert detect_known_ingredients("crèmefraîche", vocab) == set()


def test_names_match_both_ways():
    assert names_match("crème de marron", "Creme de marrons")
    assert names_match("tomates cerises", "TOMATE")
    assert not names_match("beurre", "")
    assert not names_match("sel", "poivre")


def test_item_names():
    groups = [
        {"items": ["3 Œufs", {"name": "Beurre fondu"}, "  "]},
        {"items": None},
    ]
    assert item_names(groups) == ["3 œufs", "beurre fondu"]
