"""
SQLite metadata source.

Implements MetadataSourcePort over the seo_meta table, one row per
(path, locale).
"""

from __future__ import annotations

import sqlite3
from typing import Any

from src.components.seo_meta import MetadataRecord

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS seo_meta (
        path TEXT NOT NULL,
        locale TEXT NOT NULL,
        meta_title TEXT,
        meta_description TEXT,
        og_title TEXT,
        og_description TEXT,
        no_index INTEGER NOT NULL DEFAULT 0,
        no_follow INTEGER NOT NULL DEFAULT 0,
        PRIMARY KEY (path, locale)
    );
"""


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteMetadataSource:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(_SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def save(self, path: str, locale: str, record: MetadataRecord) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT OR REPLACE INTO seo_meta (
                    path, locale, meta_title, meta_description,
                    og_title, og_description, no_index, no_follow
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    path,
                    locale,
                    record.meta_title,
                    record.meta_description,
                    record.og_title,
                    record.og_description,
                    int(record.no_index),
                    int(record.no_follow),
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, path: str, locale: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM seo_meta WHERE path = ? AND locale = ?", (path, locale))
            conn.commit()
        finally:
            conn.close()

    def lookup(self, path: str, locale: str) -> MetadataRecord:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM seo_meta WHERE path = ? AND locale = ?", (path, locale)
            ).fetchone()
            if not row:
                return MetadataRecord.absent()
            return MetadataRecord(
                present=True,
                meta_title=row["meta_title"],
                meta_description=row["meta_description"],
                og_title=row["og_title"],
                og_description=row["og_description"],
                no_index=bool(row["no_index"]),
                no_follow=bool(row["no_follow"]),
            )
        finally:
            conn.close()
