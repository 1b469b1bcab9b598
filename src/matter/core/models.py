"""Data models shared by the pattern set and the extractor"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class Delimiter(str, Enum):
    """Supported frontmatter delimiter conventions, in match order."""
    default = "default"                 # --- (YAML)
    yaml_alternate = "yaml_alternate"   # ...
    toml = "toml"                       # +++


class Extraction(NamedTuple):
    """Trimmed (frontmatter, content) pair split from a document."""
    frontmatter: str
    content: str


class ExtractorConfig(BaseModel):
    """Which optional conventions are enabled and how the closing line ends."""
    model_config = ConfigDict(frozen=True)

    toml:                     bool = True
    yaml_alternate:           bool = True
    require_trailing_newline: bool = False   # closing marker at EOF is accepted when False
