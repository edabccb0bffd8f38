"""
readability_lint package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import (
    ReadabilityConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    resolve_config,
)
from .diagnostics import Diagnostic, DiagnosticsFile
from .pipeline import ReadabilityAnalyzer, check_text, process_corpus, process_document
from .tokenization import parse_english

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "resolve_config",
    "Diagnostic",
    "DiagnosticsFile",
    "ReadabilityAnalyzer",
    "check_text",
    "parse_english",
    "process_corpus",
    "process_document",
]

__version__ = "0.1.0"
