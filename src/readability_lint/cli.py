from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Dict, List

import typer
import yaml

from .config import ReadabilityConfig, load_config, resolve_config
from .diagnostics import DiagnosticsFile
from .models import Document
from .pipeline import process_corpus

app = typer.Typer(help="Readability lint CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".markdown", ".text"}


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    age: float | None = typer.Option(
        None, "--age", help="Target reader age (default: 16)."
    ),
    threshold: float | None = typer.Option(
        None,
        "--threshold",
        help="Share of the 7 formulas that must agree a sentence is too hard (default: 4/7).",
    ),
    min_words: int | None = typer.Option(
        None,
        "--min-words",
        help="Only check sentences with at least this many words (default: 5).",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit warnings as JSON instead of text lines."
    ),
    frail: bool = typer.Option(
        False, "--frail", help="Exit with status 1 when any warning is emitted."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Check files for sentences that are too hard to read."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = _apply_overrides(load_config(config), age, threshold, min_words)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    documents = _load_documents(input_path)
    results = process_corpus(documents, cfg)

    if json_output:
        typer.echo(json.dumps({"files": _build_summary(results)}, indent=2))
    else:
        for doc_id, file in sorted(results.items()):
            for message in file.messages:
                typer.echo(
                    f"{doc_id}:{message} [confidence: {message.confidence_label}]"
                )

    warning_count = sum(len(file.messages) for file in results.values())
    if not json_output:
        typer.echo(f"{warning_count} warning(s)", err=True)
    if frail and warning_count:
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config(config: Path | None = typer.Option(None, "--config", "-c")) -> None:
    """Print the effective configuration as YAML."""
    cfg = load_config(config)
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ReadabilityConfig,
    age: float | None,
    threshold: float | None,
    min_words: int | None,
) -> ReadabilityConfig:
    """Apply CLI overrides on top of the loaded config, resolved the same way."""
    overrides = resolve_config(age=age, threshold=threshold, min_words=min_words)
    if age is not None:
        config = dc_replace(config, age=overrides.age)
    if threshold is not None:
        config = dc_replace(config, threshold=overrides.threshold)
    if min_words is not None:
        config = dc_replace(config, min_words=overrides.min_words)
    return config


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    # Single-file input: just wrap it in a Document.
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    # Directory input: gather supported files, sorted so output order is stable.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    # Undecodable or unreadable files surface as a CLI parameter error.
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, DiagnosticsFile]) -> List[dict]:
    """Create a JSON-serializable summary for each checked document."""
    return [
        {"path": doc_id, "messages": [m.to_dict() for m in file.messages]}
        for doc_id, file in sorted(results.items())
    ]


if __name__ == "__main__":
    main()
