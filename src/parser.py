"""Free-text ingredient line parsing.

"250 g de farine tout usage (tamisée)" becomes
``{quantity: "250", unit: "g", name: "farine tout usage", note: "tamisée"}``.

Stages run in a fixed order (note, quantity, unit, partitives) and each one
only looks at the head or the tail of what the previous stage left over.
Anything a stage cannot recognise stays in the name; parsing never fails.
"""
import re
from typing import List

from .normalize import phrase_pattern
from .schemas import ParsedIngredientGroup, ParsedIngredientLine
from .vocabulary import PARTITIVES, UNITS

_FRACTIONS = "½⅓⅔¼¾⅕⅛"

NOTE_RE = re.compile(r"\(([^)]+)\)\s*$")

_NUMBER = rf"(?:\d+\s+\d+/\d+|(?:[\d{_FRACTIONS}]|[.,]\d)[\d.,/{_FRACTIONS}]*)"
QUANTITY_RE = re.compile(
    rf"^({_NUMBER}(?:\s*(?:-|à|to\b)\s*{_NUMBER})?)\s*",
    re.IGNORECASE,
)


UNIT_RE = re.compile(
    r"^(%s)\s+"
    % "|".join(phrase_pattern(u) for u in sorted(UNITS, key=len, reverse=True)),
    re.IGNORECASE,
)

PARTITIVE_RE = re.compile(
    r"^(?:%s)+"
    % "|".join(
        phrase_pattern(p) + (r"\s+" if p.endswith(" ") else "") for p in PARTITIVES
    ),
    re.IGNORECASE,
)


def parse_ingredient_line(line: str) -> ParsedIngredientLine:
    """Split one ingredient line into quantity, unit, name and note.

    The name is never empty unless the input is: a blank line keeps its
    raw text as the name.
    """
    original = (line or "").strip()
    s = original
    note = None

    m = NOTE_RE.search(s)
    if m:
        note = m.group(1).strip() or None
        s = s[: m.start()].strip()

    quantity = None
    m = QUANTITY_RE.match(s)
    if m:
        quantity = m.group(1).strip()
        s = s[m.end():].strip()

    unit = None
    m = UNIT_RE.match(s)
    if m:
        unit = m.group(1).strip()
        s = s[m.end():].strip()

    s = PARTITIVE_RE.sub("", s).strip()

    return ParsedIngredientLine(
        quantity=quantity,
        unit=unit,
        name=s or original or (line or ""),
        note=note,
    )


def format_ingredient_line(parsed: ParsedIngredientLine) -> str:
    parts = [p for p in (parsed.quantity, parsed.unit, parsed.name) if p]
    text = " ".join(parts)
    if parsed.note:
        text = f"{text} ({parsed.note})"
    return text


def parse_ingredient_group(group: dict) -> ParsedIngredientGroup:
    """Parse every item of a ``{group|title, items}`` ingredient group.

    Items that are already structured (dicts with a name) are kept as is.
    """
    items = []
    for item in group.get("items") or []:
        if isinstance(item, dict):
            if item.get("name"):
                items.append(ParsedIngredientLine.model_validate(item))
        elif item and str(item).strip():
            items.append(parse_ingredient_line(str(item)))
    return ParsedIngredientGroup(
        title=group.get("title") or group.get("group"),
        items=items,
    )


def parse_all_ingredients(groups: list) -> List[ParsedIngredientGroup]:
    return [parse_ingredient_group(g) for g in groups or []]
