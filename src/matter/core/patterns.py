"""Delimiter patterns and their lazily compiled regular expressions"""

import re
from dataclasses import dataclass
from functools import lru_cache

from matter.core.models import Delimiter, ExtractorConfig


# ASCII whitespace only, matching [[:space:]]
_LEADING_WS = r"[ \t\n\r\f\v]*"


@dataclass(frozen=True)
class DelimiterPattern:
    """An (opening, closing) marker pair and the convention it belongs to."""
    delimiter: Delimiter
    opening:   str
    closing:   str

    def compile(self, require_trailing_newline: bool = False) -> re.Pattern:
        """Return the anchored regex for this pair; compiled once per process."""
        return _compile(self.opening, self.closing, require_trailing_newline)


DEFAULT = DelimiterPattern(Delimiter.default, "---", "---")
YAML_ALTERNATE = DelimiterPattern(Delimiter.yaml_alternate, "...", "...")
TOML = DelimiterPattern(Delimiter.toml, "+++", "+++")


@lru_cache(maxsize=None)
def _compile(opening: str, closing: str, require_trailing_newline: bool) -> re.Pattern:
    """Build the whole-input regex for one marker pair.

    Group 1 is the frontmatter body (non-greedy, so the first standalone
    closing line ends it); group 2 is everything after the closing line.
    The closing marker only counts at the start of a line and when nothing
    but an optional CR follows it on that line.
    """
    line_end = r"\r?\n" if require_trailing_newline else r"(?:\r?\n|\Z)"
    return re.compile(
        r"\A" + _LEADING_WS + re.escape(opening) + r"\r?\n"
        r"(.*?)"
        r"^" + re.escape(closing) + line_end +
        r"(.*)\Z",
        re.DOTALL | re.MULTILINE,
    )


def pattern_set(config: ExtractorConfig) -> tuple[DelimiterPattern, ...]:
    """Ordered patterns for config: the default first, then enabled optionals."""
    patterns = [DEFAULT]
    if config.yaml_alternate:
        patterns.append(YAML_ALTERNATE)
    if config.toml:
        patterns.append(TOML)
    return tuple(patterns)
