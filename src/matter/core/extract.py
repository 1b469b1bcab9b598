"""Frontmatter extraction: ordered delimiter matching, then trim and split"""

import logging
from functools import lru_cache
from typing import Optional

from matter.core.models import Delimiter, Extraction, ExtractorConfig
from matter.core.patterns import DelimiterPattern, pattern_set


logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when extraction is attempted on a zero-length string."""

    def __init__(self) -> None:
        super().__init__("Cannot extract frontmatter from empty input")


class Extractor:
    """Splits documents into frontmatter and content using a fixed pattern order.

    The pattern set is resolved and compiled once at construction and never
    changes afterwards, so one instance can be shared freely between callers.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()
        self._patterns = pattern_set(self.config)
        self._compiled = tuple(
            (p.delimiter, p.compile(self.config.require_trailing_newline))
            for p in self._patterns
        )

    @property
    def patterns(self) -> tuple[DelimiterPattern, ...]:
        return self._patterns

    def match(self, text: str) -> Optional[tuple[Delimiter, Extraction]]:
        """Return (delimiter, extraction) for the first matching pattern, or None.

        Raises EmptyInputError for "" and TypeError for non-str input.
        Whitespace-only input is not empty and simply has no frontmatter.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str input, got {type(text).__name__}")
        if not text:
            raise EmptyInputError()

        for delimiter, regex in self._compiled:
            m = regex.match(text)
            if m:
                logger.debug("Matched %s frontmatter delimiters", delimiter.value)
                return delimiter, Extraction(m.group(1).strip(), m.group(2).strip())

        logger.debug("No frontmatter found (%d patterns tried)", len(self._compiled))
        return None

    def extract(self, text: str) -> Optional[Extraction]:
        """Return the trimmed (frontmatter, content) pair, or None if absent."""
        result = self.match(text)
        return result[1] if result else None

    def detect(self, text: str) -> Optional[Delimiter]:
        """Return the delimiter convention that opens text, or None."""
        result = self.match(text)
        return result[0] if result else None


@lru_cache(maxsize=1)
def default_extractor() -> Extractor:
    """Shared Extractor with every convention enabled, built on first use."""
    return Extractor()


def extract(text: str, config: Optional[ExtractorConfig] = None) -> Optional[Extraction]:
    """Split text into (frontmatter, content), or return None without frontmatter."""
    extractor = Extractor(config) if config is not None else default_extractor()
    return extractor.extract(text)
