"""Shared fixtures for core unit tests"""

import pytest

from matter.core.extract import Extractor
from matter.core.models import ExtractorConfig


@pytest.fixture(name="extractor")
def extractor_fixture():
    return Extractor()


@pytest.fixture(name="default_only")
def default_only_fixture():
    """Extractor with only the --- convention enabled."""
    return Extractor(ExtractorConfig(toml=False, yaml_alternate=False))


@pytest.fixture(name="strict")
def strict_fixture():
    """Extractor that requires a newline after the closing delimiter."""
    return Extractor(ExtractorConfig(require_trailing_newline=True))
