from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_AGE = 16
DEFAULT_THRESHOLD = 4 / 7
DEFAULT_MIN_WORDS = 5

# Option names accepted from dict/YAML input, mapped to dataclass fields.
_KEY_ALIASES = {"minWords": "min_words"}


@dataclass(frozen=True, slots=True)
class ReadabilityConfig:
    """Resolved options for the readability check."""

    age: float = DEFAULT_AGE
    threshold: float = DEFAULT_THRESHOLD
    min_words: int = DEFAULT_MIN_WORDS

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age!r}.")
        if not 0 <= self.threshold <= 1:
            raise ValueError(
                f"threshold must be a fraction between 0 and 1, got {self.threshold!r}."
            )
        if isinstance(self.min_words, bool) or not isinstance(self.min_words, int):
            raise ValueError(f"min_words must be an integer, got {self.min_words!r}.")
        if self.min_words < 0:
            raise ValueError(f"min_words must be non-negative, got {self.min_words!r}.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def resolve_config(
    age: float | None = None,
    threshold: float | None = None,
    min_words: int | None = None,
) -> ReadabilityConfig:
    """
    Resolve user options into a ReadabilityConfig.

    ``age`` and ``threshold`` fall back to their defaults for any falsy value,
    so an explicit ``0`` means "use the default". ``min_words`` only falls back
    when unset; ``0`` is kept and disables the minimum sentence length.
    """
    return ReadabilityConfig(
        age=age or DEFAULT_AGE,
        threshold=threshold or DEFAULT_THRESHOLD,
        min_words=DEFAULT_MIN_WORDS if min_words is None else min_words,
    )


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    allowed = {field.name for field in fields(ReadabilityConfig)}
    kwargs: dict[str, Any] = {}
    for key in data:
        name = _KEY_ALIASES.get(key, key)
        if name in allowed:
            kwargs[name] = data[key]
    return resolve_config(**kwargs)


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
