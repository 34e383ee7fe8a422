import pytest

from src.adapters.sqlite.metadata_repo import SQLiteMetadataSource
from src.components.seo_meta import MetadataRecord


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test_seo_meta.db")

@pytest.fixture
def source(db_path):
    source = SQLiteMetadataSource(db_path)
    source.ensure_schema()
    return source

def test_missing_row_is_absent(source):
    record = source.lookup("en/page/about", "en")
    assert record.present is False
    assert record.meta_title is None

def test_save_and_lookup(source):
    source.save(
        "en/page/about",
        "en",
        MetadataRecord(
            meta_title="About",
            meta_description="Who we are",
            og_title="About the team",
            no_index=True,
        ),
    )

    record = source.lookup("en/page/about", "en")
    assert record.present is True
    assert record.meta_title == "About"
    assert record.meta_description == "Who we are"
    assert record.og_title == "About the team"
    assert record.og_description is None
    assert record.no_index is True
    assert record.no_follow is False

def test_rows_are_per_locale(source):
    source.save("page", "en", MetadataRecord(meta_title="Hello"))
    source.save("page", "cs", MetadataRecord(meta_title="Ahoj"))

    assert source.lookup("page", "en").meta_title == "Hello"
    assert source.lookup("page", "cs").meta_title == "Ahoj"
    assert source.lookup("page", "de").present is False

def test_save_replaces_row(source):
    source.save("page", "en", MetadataRecord(meta_title="Old", no_follow=True))
    source.save("page", "en", MetadataRecord(meta_title="New"))

    record = source.lookup("page", "en")
    assert record.meta_title == "New"
    assert record.no_follow is False

def test_delete(source):
    source.save("page", "en", MetadataRecord(meta_title="Gone"))
    source.delete("page", "en")
    assert source.lookup("page", "en").present is False

def test_ensure_schema_is_idempotent(db_path, source):
    source.save("page", "en", MetadataRecord(meta_title="Kept"))
    SQLiteMetadataSource(db_path).ensure_schema()
    assert source.lookup("page", "en").meta_title == "Kept"
