"""Root test configuration — isolate tests from ambient matter settings"""

import pytest

from matter.config import Settings


@pytest.fixture(autouse=True)
def clear_matter_env(monkeypatch, tmp_path):
    """Drop MATTER_<FIELD> env vars and run from an empty directory (no matter.yaml)."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MATTER_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)
