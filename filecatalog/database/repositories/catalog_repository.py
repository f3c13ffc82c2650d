from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from filecatalog.catalog.exceptions import PersistError
from filecatalog.catalog.models import CatalogRecord, RecordStatus
from filecatalog.introspection.models import ImageDimensions

COLUMNS = (
    "file_id",
    "s3_bucket",
    "s3_object_key",
    "extracted_at",
    "status",
    "file_size",
    "file_type",
    "file_extension",
    "number_of_pages",
    "image_dimensions",
    "text_content_length",
    "word_count",
    "document_type",
    "archive_type",
    "original_filename",
    "author_name",
    "upload_date",
    "expiration_date",
    "object_metadata",
)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS {table} (
    file_id TEXT PRIMARY KEY,
    s3_bucket TEXT NOT NULL,
    s3_object_key TEXT NOT NULL,
    extracted_at TIMESTAMPTZ NOT NULL,
    status TEXT NOT NULL,
    file_size BIGINT NOT NULL,
    file_type TEXT NOT NULL,
    file_extension TEXT NOT NULL,
    number_of_pages INTEGER,
    image_dimensions JSONB,
    text_content_length INTEGER,
    word_count INTEGER,
    document_type TEXT,
    archive_type TEXT,
    original_filename TEXT,
    author_name TEXT,
    upload_date TEXT,
    expiration_date TEXT,
    object_metadata JSONB NOT NULL DEFAULT '{{}}'::jsonb
)
"""


class CatalogRepository:
    """Database operations for the catalog table, keyed by file_id."""

    def __init__(self, pool: ConnectionPool, table: str = "file_metadata") -> None:
        self._pool = pool
        self._table = sql.Identifier(table)

    def create_table(self) -> None:
        with self._pool.connection() as conn:
            conn.execute(sql.SQL(CREATE_TABLE).format(table=self._table))
            conn.commit()

    def upsert(self, record: CatalogRecord) -> None:
        """Insert the record, or overwrite every column if file_id exists.

        Raises:
            PersistError: if the write fails.
        """
        query = sql.SQL(
            "INSERT INTO {table} ({columns}) VALUES ({values}) "
            "ON CONFLICT (file_id) DO UPDATE SET {updates}"
        ).format(
            table=self._table,
            columns=sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(COLUMNS)),
            updates=sql.SQL(", ").join(
                sql.SQL("{col} = EXCLUDED.{col}").format(col=sql.Identifier(col))
                for col in COLUMNS
                if col != "file_id"
            ),
        )
        try:
            with self._pool.connection() as conn:
                conn.execute(query, self._to_params(record))
                conn.commit()
        except psycopg.Error as exc:
            raise PersistError(f"Failed to persist record {record.file_id}: {exc}") from exc

    def find_by_id(self, file_id: str) -> CatalogRecord | None:
        query = sql.SQL("SELECT {columns} FROM {table} WHERE file_id = %s").format(
            columns=sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
            table=self._table,
        )
        with self._pool.connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (file_id,))
                row = cur.fetchone()

        if row is None:
            return None
        return self._from_row(row)

    def _to_params(self, record: CatalogRecord) -> tuple[Any, ...]:
        dimensions = record.image_dimensions
        return (
            record.file_id,
            record.s3_bucket,
            record.s3_object_key,
            record.extracted_at,
            record.status.value,
            record.file_size,
            record.file_type,
            record.file_extension,
            record.number_of_pages,
            Jsonb({"width": dimensions.width, "height": dimensions.height})
            if dimensions is not None
            else None,
            record.text_content_length,
            record.word_count,
            record.document_type,
            record.archive_type,
            record.original_filename,
            record.author_name,
            record.upload_date,
            record.expiration_date,
            Jsonb(record.object_metadata),
        )

    def _from_row(self, row: dict[str, Any]) -> CatalogRecord:
        dimensions = row["image_dimensions"]
        return CatalogRecord(
            file_id=row["file_id"],
            s3_bucket=row["s3_bucket"],
            s3_object_key=row["s3_object_key"],
            extracted_at=row["extracted_at"],
            status=RecordStatus(row["status"]),
            file_size=row["file_size"],
            file_type=row["file_type"],
            file_extension=row["file_extension"],
            number_of_pages=row["number_of_pages"],
            image_dimensions=ImageDimensions(**dimensions) if dimensions else None,
            text_content_length=row["text_content_length"],
            word_count=row["word_count"],
            document_type=row["document_type"],
            archive_type=row["archive_type"],
            original_filename=row["original_filename"],
            author_name=row["author_name"],
            upload_date=row["upload_date"],
            expiration_date=row["expiration_date"],
            object_metadata=row["object_metadata"] or {},
        )
