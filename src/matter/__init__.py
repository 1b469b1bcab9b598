"""Matter: split TOML/YAML frontmatter from document content"""

from matter.core.extract import EmptyInputError, Extractor, extract
from matter.core.models import Delimiter, Extraction, ExtractorConfig


__all__ = [
    "Delimiter",
    "EmptyInputError",
    "Extraction",
    "Extractor",
    "ExtractorConfig",
    "extract",
]
