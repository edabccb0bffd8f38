from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Callable, FrozenSet

import textstat

LOGGER = logging.getLogger(__name__)

SyllableCounter = Callable[[str], int]

SPACHE_RESOURCE = "spache.txt"


def count_syllables(word: str) -> int:
    """
    Count English syllables in a single word.

    textstat looks words up in the CMU pronouncing dictionary and falls back
    to hyphenation rules for unknown words. The dictionary is NLTK data
    (`cmudict`) that textstat downloads on first use; offline machines need it
    installed beforehand, e.g. `python -m nltk.downloader cmudict`, or the
    first call raises LookupError.
    """
    return int(textstat.syllable_count(word))


def load_word_list(path: str | Path) -> FrozenSet[str]:
    """
    Load a newline-delimited word list.

    Blank lines and ``#`` comments are ignored; entries are lowercased so
    lookups can use the caseless form of a word.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found at {path}.")
    with path.open("r", encoding="utf-8") as handle:
        return _parse_word_list(handle.read())


@lru_cache(maxsize=1)
def spache_familiar_words() -> FrozenSet[str]:
    """Words the revised Spache formula treats as familiar."""
    data = resources.files("readability_lint") / "data" / SPACHE_RESOURCE
    words = _parse_word_list(data.read_text(encoding="utf-8"))
    LOGGER.debug("Loaded %d Spache familiar words.", len(words))
    return words


@lru_cache(maxsize=1)
def dale_chall_easy_words() -> FrozenSet[str]:
    """The Dale-Chall list of words easily understood by fourth graders."""
    data = resources.files("textstat") / "resources" / "en" / "easy_words.txt"
    if not data.is_file():
        raise FileNotFoundError(
            "The Dale-Chall word list bundled with textstat could not be found. "
            "Install a textstat release that ships resources/en/easy_words.txt."
        )
    words = _parse_word_list(data.read_text(encoding="utf-8"))
    LOGGER.debug("Loaded %d Dale-Chall easy words.", len(words))
    return words


def _parse_word_list(contents: str) -> FrozenSet[str]:
    words = set()
    for line in contents.splitlines():
        entry = line.split("#", 1)[0].strip()
        if entry:
            words.add(entry.lower())
    return frozenset(words)
