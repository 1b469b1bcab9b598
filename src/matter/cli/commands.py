"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from matter.config import Settings, load_config
from matter.core.extract import EmptyInputError, Extractor
from matter.core.files import discover_files, read_document, resolve_path
from matter.util.logging import configure_logging


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _documents(path: str) -> list[Path]:
    """Resolve path against the working directory and list the documents it names."""
    target = resolve_path(path)
    if not target.exists():
        _fail(f"No such file or directory: {path}")
    files = discover_files(target)
    logger.debug("Discovered %d document(s) under %s", len(files), target)
    if not files:
        typer.echo("No documents found.")
        raise typer.Exit(1)
    return files


def _read(path: Path) -> str:
    try:
        return read_document(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Could not read {path}", e)


def _disabled(flag: bool) -> Optional[bool]:
    """Map a --no-* switch to a config override (None leaves config untouched)."""
    return False if flag else None


def extract_cmd(
    path: Annotated[str, typer.Argument(help="Input file or directory, relative to the working directory")],
    as_json: Annotated[bool, typer.Option("--json", help="Emit one JSON object per document")] = False,
    no_toml: Annotated[bool, typer.Option("--no-toml", help="Do not recognize +++ frontmatter")] = False,
    no_yaml_alt: Annotated[bool, typer.Option("--no-yaml-alternate", help="Do not recognize ... frontmatter")] = False,
    strict: Annotated[bool, typer.Option("--require-trailing-newline", help="Closing delimiter must end with a newline")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="debug, info, warning or error")] = None,
    ):
    """Print the frontmatter and content of each document."""
    settings = _settings(overrides={
        "toml": _disabled(no_toml),
        "yaml_alternate": _disabled(no_yaml_alt),
        "require_trailing_newline": True if strict else None,
        "output_format": "json" if as_json else None,
        "log_level": log_level,
    })
    extractor = Extractor(settings.extractor_config())

    for doc in _documents(path):
        try:
            result = extractor.match(_read(doc))
        except EmptyInputError as e:
            _fail(f"{doc} is empty", e)

        if settings.output_format == "json":
            delimiter, extraction = result if result else (None, None)
            typer.echo(json.dumps({
                "path": str(doc),
                "delimiter": delimiter.value if delimiter else None,
                "frontmatter": extraction.frontmatter if extraction else None,
                "content": extraction.content if extraction else None,
            }, ensure_ascii=False))
        elif result:
            _, (frontmatter, content) = result
            typer.echo(f"{json.dumps(frontmatter, ensure_ascii=False)} {json.dumps(content, ensure_ascii=False)}")
        else:
            logger.info("No frontmatter in %s", doc)


def detect_cmd(
    path: Annotated[str, typer.Argument(help="Input file or directory, relative to the working directory")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="debug, info, warning or error")] = None,
    ):
    """Print which delimiter convention opens each document, or 'none'."""
    settings = _settings(overrides={"log_level": log_level})
    extractor = Extractor(settings.extractor_config())

    files = _documents(path)
    for doc in files:
        try:
            delimiter = extractor.detect(_read(doc))
        except EmptyInputError as e:
            _fail(f"{doc} is empty", e)
        name = delimiter.value if delimiter else "none"
        typer.echo(f"{doc}: {name}" if len(files) > 1 else name)
