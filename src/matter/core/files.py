"""File discovery and reading for documents passed on the command line"""

from pathlib import Path
from typing import Optional

from matter.core.extract import Extractor, default_extractor
from matter.core.models import Extraction


DOC_EXTENSIONS = {'.md', '.mdx', '.markdown', '.txt', '.html'}


def resolve_path(path: Path | str, cwd: Optional[Path] = None) -> Path:
    """Resolve path against cwd (the process working directory by default)."""
    return (cwd or Path.cwd()) / Path(path)


def read_document(path: Path | str, cwd: Optional[Path] = None) -> str:
    """Read the full UTF-8 contents of a document."""
    return resolve_path(path, cwd).read_text(encoding='utf-8')


def discover_files(path: Path) -> list[Path]:
    """Return [path] for a file, or sorted documents found under a directory."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in DOC_EXTENSIONS)


def extract_file(path: Path | str, extractor: Optional[Extractor] = None) -> Optional[Extraction]:
    """Read path and split it into (frontmatter, content)."""
    return (extractor or default_extractor()).extract(read_document(path))
