import os
from pathlib import Path

import pytest

from src.adapters.sqlite.metadata_repo import SQLiteMetadataSource
from src.rules.loader import load_rules


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def project_rules():
    """
    Load the REAL rules file from project root.
    Assuming tests run from project root.
    """
    rules_path = Path("rules.yaml").resolve()
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def sqlite_source(test_data_dir):
    """Metadata source backed by a temporary SQLite DB."""
    source = SQLiteMetadataSource(os.path.join(test_data_dir, "seo_meta.db"))
    source.ensure_schema()
    return source
