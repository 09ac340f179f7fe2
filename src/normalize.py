import re
import unicodedata
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Pattern, Set, Tuple

from .vocabulary import get_vocabulary

# No fuzzy matching: accent/case folded whole-word matches only

# Ligatures that NFD does not decompose
LIGATURES = {
    "œ": "oe",
    "Œ": "oe",
    "æ": "ae",
    "Æ": "ae",
}

# Unicode alphanumeric (word character minus underscore)
_ALNUM = r"[^\W_]"


def fold(s: str) -> str:
    """Lower-case and strip diacritics so "Crème" and "creme" compare equal."""
    if not s:
        return ""
    w = s.lower()
    for lig, repl in LIGATURES.items():
        w = w.replace(lig, repl)
    w = unicodedata.normalize("NFD", w)
    return "".join(c for c in w if not unicodedata.combining(c))


def slugify(name: str) -> str:
    w = fold(name)
    w = re.sub(r"[^a-z0-9]+", "-", w)
    return w.strip("-")


def phrase_pattern(token: str) -> str:
    # inner spaces accept any run of whitespace
    return r"\s+".join(re.escape(part) for part in token.split())


def _term_pattern(term: str) -> Pattern:
    # optional plural "s", bounded by non-alphanumerics or the string edges
    return re.compile(
        rf"(?<!{_ALNUM}){phrase_pattern(fold(term))}s?(?!{_ALNUM})"
    )


@lru_cache(maxsize=16)
def compile_vocabulary(
    vocabulary: Tuple[str, ...]
) -> Tuple[Tuple[str, Pattern], ...]:
    """Compile one pattern per vocabulary term, keeping the original term."""
    return tuple((term, _term_pattern(term)) for term in vocabulary if term)


def keep_all(matched: Set[str]) -> Set[str]:
    return matched


def prefer_longest(matched: Set[str]) -> Set[str]:
    """Drop terms that occur as a whole word inside another matched term.

    With both "crème" and "crème fraîche" matched only the latter is kept.
    Spelling variants folding to the same form ("oeuf"/"œuf") are kept.
    """
    kept = set()
    for term in matched:
        pattern = _term_pattern(term)
        folded = fold(term)
        covered = any(
            fold(other) != folded and pattern.search(fold(other))
            for other in matched
        )
        if not covered:
            kept.add(term)
    return kept


DedupPolicy = Callable[[Set[str]], Set[str]]


def detect_known_ingredients(
    text: str,
    vocabulary: Optional[Iterable[str]] = None,
    locale: str = "fr",
    policy: DedupPolicy = keep_all,
) -> Set[str]:
    """Return the vocabulary terms found in ``text``.

    Both sides are folded before matching, so case and accents never
    matter. Terms are returned as spelled in the vocabulary. Every matching
    term is reported independently unless ``policy`` says otherwise.
    """
    if not text:
        return set()
    if vocabulary is None:
        vocabulary = get_vocabulary(locale)
    normalized = fold(text)
    found = set()
    for term, pattern in compile_vocabulary(tuple(vocabulary)):
        if pattern.search(normalized):
            found.add(term)
    return policy(found)


def item_text(item) -> str:
    """Text of a stored ingredient item (plain line or structured dict)."""
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return item.get("name") or ""
    return getattr(item, "name", "") or ""


def extract_ingredients_from_groups(
    groups: list,
    locale: str = "fr",
    policy: DedupPolicy = keep_all,
) -> List[str]:
    all_text = " ".join(
        item_text(item)
        for group in groups or []
        for item in (group.get("items") or [])
    )
    return sorted(detect_known_ingredients(all_text, locale=locale, policy=policy))


def matches_loosely(candidate: str, query: str) -> bool:
    """Return True if ``query`` appears in ``candidate``, ignoring accents.

    Used for type-ahead suggestions, so this is a plain substring test.
    """
    q = fold(query).strip()
    if not q:
        return False
    return q in fold(candidate)


def names_match(a: str, b: str) -> bool:
    """True if either name contains the other once both are folded."""
    fa, fb = fold(a).strip(), fold(b).strip()
    if not fa or not fb:
        return False
    return fa in fb or fb in fa


def item_names(groups: list) -> List[str]:
    """Lower-cased names of every item in ``groups``, blanks dropped."""
    names = []
    for group in groups or []:
        for item in group.get("items") or []:
            name = item_text(item).lower().strip()
            if name:
                names.append(name)
    return names
