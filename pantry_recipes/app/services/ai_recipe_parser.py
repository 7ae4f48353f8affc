"""Turn a chat model's free-text recipe suggestions into structured records.

The model is asked for plain text, so replies look roughly like::

    Recipe 1: Pancakes
    Ingredients: Flour, Eggs, Milk
    1. Whisk everything together.
    2. Cook on a hot pan.

but nothing about the layout is guaranteed. Parsing is line based and never
fails: text that cannot be attributed to a title, an ingredient or a step is
kept verbatim in ``fallback_text``.
"""

import enum
import re
from typing import List

from pydantic import BaseModel, Field

from pantry_recipes.app.services.text_utils import split_list_items, split_sentences, title_case

_RECIPE_HEADER_RE = re.compile(r"^recipe\b", re.I)
_TITLE_RE = re.compile(r"^(?:recipe|name)(?![a-z])\s*#?\s*\d*\s*[:.)\-]?\s*(.*)$", re.I)
_INLINE_INGREDIENTS_RE = re.compile(r"^ingredients?(?:\s+used)?\s*:\s*(.+)$", re.I)
_INLINE_STEPS_RE = re.compile(r"^(?:procedure|steps?|method)\s*:\s*(.+)$", re.I)
_INGREDIENTS_HEADER_RE = re.compile(r"^ingredients?\b", re.I)
_STEPS_HEADER_RE = re.compile(r"^(?:procedure|steps?|method)\b", re.I)
_LABELLED_STEP_RE = re.compile(r"^step\s*\d+\s*[:.)\-]\s*(.+)$", re.I)
# A numbered item needs whitespace after the dot ("1.5 cups" stays an ingredient).
_NUMBERED_ITEM_RE = re.compile(r"^\d+\.\s+(.+)$")
_STEP_NUMBER_RE = re.compile(r"^\d+\.\s*(.+)$")
_BULLET_RE = re.compile(r"^[-*]\s+")


class Section(str, enum.Enum):
    NONE = "none"
    INGREDIENTS = "ingredients"
    STEPS = "steps"


class ParsedRecipe(BaseModel):
    """One recipe recovered from a model reply."""

    title: str
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    fallback_text: str = ""


def _split_blocks(lines: List[str]) -> List[List[str]]:
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if _RECIPE_HEADER_RE.match(line) and current:
            blocks.append(current)
            current = [line]
        else:
            current.append(line)
    if current:
        blocks.append(current)
    return blocks or [lines]


def _parse_title(line: str, idx: int) -> str:
    match = _TITLE_RE.match(line)
    title = match.group(1).strip() if match else line.strip()
    return title or f"Recipe {idx + 1}"


def _normalize_items(items: List[str]) -> List[str]:
    normalized = (title_case(item) for item in items)
    return [item for item in normalized if item]


def _ingredient_entries(line: str) -> List[str]:
    has_bullet = _BULLET_RE.match(line) is not None
    cleaned = _BULLET_RE.sub("", line).strip()
    if "," in cleaned and not has_bullet:
        return _normalize_items(split_list_items(cleaned))
    return _normalize_items([cleaned])


def _listed_ingredient_entries(line: str) -> List[str]:
    numbered = _NUMBERED_ITEM_RE.match(line)
    if numbered:
        return _normalize_items([numbered.group(1)])
    return _ingredient_entries(line)


def _step_entry(line: str) -> str:
    numbered = _STEP_NUMBER_RE.match(line)
    if numbered:
        return numbered.group(1).strip()
    return _BULLET_RE.sub("", line).strip()


def parse_block(lines: List[str], idx: int) -> ParsedRecipe:
    """Parse one recipe block; ``idx`` is its 0-based position in the reply."""
    remaining = list(lines)
    title_line = remaining.pop(0) if remaining else ""
    title = _parse_title(title_line, idx)

    ingredients: List[str] = []
    steps: List[str] = []
    rest: List[str] = []
    section = Section.NONE
    # True while the ingredients came from an inline "Ingredients: a, b" line
    # rather than a list under a bare header.
    inline_list = False

    for line in remaining:
        inline_ingredients = _INLINE_INGREDIENTS_RE.match(line)
        if inline_ingredients:
            ingredients = _normalize_items(split_list_items(inline_ingredients.group(1)))
            section = Section.INGREDIENTS
            inline_list = True
            continue

        inline_steps = _INLINE_STEPS_RE.match(line)
        if inline_steps:
            steps = split_sentences(inline_steps.group(1))
            section = Section.STEPS
            continue

        labelled_step = _LABELLED_STEP_RE.match(line)
        if labelled_step:
            steps.append(labelled_step.group(1).strip())
            section = Section.STEPS
            continue

        if _INGREDIENTS_HEADER_RE.match(line):
            section = Section.INGREDIENTS
            inline_list = False
            continue

        if _STEPS_HEADER_RE.match(line):
            section = Section.STEPS
            continue

        if section == Section.NONE or (section == Section.INGREDIENTS and inline_list):
            numbered = _NUMBERED_ITEM_RE.match(line)
            if numbered:
                steps.append(numbered.group(1).strip())
                section = Section.STEPS
                continue

        if section == Section.INGREDIENTS:
            ingredients.extend(_listed_ingredient_entries(line))
        elif section == Section.STEPS:
            step = _step_entry(line)
            if step:
                steps.append(step)
        else:
            rest.append(line)

    if not steps and rest:
        steps = split_sentences(" ".join(rest))

    return ParsedRecipe(
        title=title,
        ingredients=ingredients,
        steps=steps,
        fallback_text="\n".join(rest),
    )


def parse_ai_recipes(text: str) -> List[ParsedRecipe]:
    """Parse a model reply into zero or more recipes.

    Returns an empty list only when ``text`` is empty or whitespace. The same
    input always produces the same output.
    """
    if not text or not text.strip():
        return []
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return [parse_block(block, idx) for idx, block in enumerate(_split_blocks(lines))]


def fallback_paragraphs(recipe: ParsedRecipe) -> List[str]:
    """Paragraphs to display when a recipe has neither ingredients nor steps."""
    if recipe.ingredients or recipe.steps:
        return []
    return [line.strip() for line in recipe.fallback_text.split("\n") if line.strip()]


def render_recipe_text(recipe: ParsedRecipe) -> str:
    """Plain-text rendering: title, ingredients, numbered steps, else raw paragraphs."""
    parts = [recipe.title]
    if recipe.ingredients:
        parts.append("Ingredients:")
        parts.extend(f"- {item}" for item in recipe.ingredients)
    if recipe.steps:
        parts.append("Steps:")
        parts.extend(f"{number}. {step}" for number, step in enumerate(recipe.steps, start=1))
    parts.extend(fallback_paragraphs(recipe))
    return "\n".join(parts)
