from __future__ import annotations

from readability_lint.models import SENTENCE, Node
from readability_lint.tokenization import parse_english
from readability_lint.treeutils import select_all

OBERON = "\n".join(
    [
        "Oberon, also designated Uranus IV, is the outermost ",
        "major moon of the planet Uranus and quite large",
        "and massive for a Uranian moon.",
        "",
    ]
)

SECOND_LARGEST = "\n".join(
    [
        "Oberon, also designated Uranus IV, is the outermost ",
        "major moon of the planet Uranus and the second-largest ",
        "and second most massive of the Uranian moons.",
        "",
    ]
)

SOLAR_SYSTEM = "\n".join(
    [
        "Oberon, also designated Uranus IV, is the outermost ",
        "major moon of the planet Uranus and the second-largest ",
        "and second most massive of the Uranian moons, and the ",
        "ninth most massive moon in the Solar System.",
        "",
    ]
)

EASY = "The cat sat on the mat"

LONG_WORD = "Honorificabilitudinitatibus."


def sentences(text: str) -> list[Node]:
    """Parse text and return its sentence nodes in order."""
    return [node for node, _ in select_all(parse_english(text), SENTENCE)]


def vowel_groups(word: str) -> int:
    """Crude syllable stand-in so counting tests do not depend on a dictionary."""
    count = 0
    previous = False
    for char in word.lower():
        is_vowel = char in "aeiouy"
        if is_vowel and not previous:
            count += 1
        previous = is_vowel
    return count
