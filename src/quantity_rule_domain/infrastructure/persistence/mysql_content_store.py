# src/quantity_rule_domain/infrastructure/persistence/mysql_content_store.py
"""MySQL implementation of the content store."""

import logging
from typing import Any, Optional

from mysql.connector import Error

from src.common.dtos.quantity_dtos import ContentRecordDTO
from src.common.exceptions.custom_exceptions import DatabaseError
from src.quantity_rule_domain.domain.repositories.content_store import IContentStore
from src.quantity_rule_domain.infrastructure.persistence.mysql_connection import MySQLStoreBase

logger = logging.getLogger(__name__)


class MySQLContentStore(MySQLStoreBase, IContentStore):
    """Records (products, quantity rules) and their meta fields, stored in 'ipq_' tables."""

    def create_tables(self) -> None:
        """Creates the record and record meta tables if they do not exist."""
        create_records_table_query = """
        CREATE TABLE IF NOT EXISTS ipq_records (
            id BIGINT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            kind VARCHAR(64) NOT NULL,
            status VARCHAR(32) NOT NULL DEFAULT 'publish',
            title VARCHAR(255),
            date_modified DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_kind_status (kind, status)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        create_meta_table_query = """
        CREATE TABLE IF NOT EXISTS ipq_record_meta (
            record_id BIGINT UNSIGNED NOT NULL,
            meta_key VARCHAR(255) NOT NULL,
            meta_value LONGTEXT,
            UNIQUE KEY uk_record_meta (record_id, meta_key),
            INDEX idx_meta_key (meta_key)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_records_table_query, "ipq_records")
        self._execute_ddl(create_meta_table_query, "ipq_record_meta")
        logger.info("IPQ content tables checked/created.")

    def fetch_published_records(self, kind: str) -> list[ContentRecordDTO]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT id, kind, status, title
            FROM ipq_records
            WHERE kind = %s AND status = 'publish'
            ORDER BY id
            """
            cursor.execute(query, (kind,))
            return [
                ContentRecordDTO(id=row["id"], kind=row["kind"], status=row["status"], title=row["title"])
                for row in cursor.fetchall()
            ]
        except Error as e:
            raise DatabaseError(f"Error fetching published '{kind}' records: {e}", original_exception=e, table="ipq_records")
        finally:
            cursor.close()

    def get_record(self, record_id: int) -> Optional[ContentRecordDTO]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT id, kind, status, title
            FROM ipq_records
            WHERE id = %s
            LIMIT 1
            """
            cursor.execute(query, (record_id,))
            row = cursor.fetchone()
            if not row:
                return None
            return ContentRecordDTO(id=row["id"], kind=row["kind"], status=row["status"], title=row["title"])
        except Error as e:
            raise DatabaseError(f"Error fetching record {record_id}: {e}", original_exception=e, table="ipq_records")
        finally:
            cursor.close()

    def get_field(self, record_id: int, field_name: str) -> Any:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT meta_value
            FROM ipq_record_meta
            WHERE record_id = %s AND meta_key = %s
            LIMIT 1
            """
            cursor.execute(query, (record_id, field_name))
            row = cursor.fetchone()
            return self._decode(row["meta_value"]) if row else None
        except Error as e:
            raise DatabaseError(
                f"Error fetching field {field_name} of record {record_id}: {e}",
                original_exception=e,
                table="ipq_record_meta",
            )
        finally:
            cursor.close()

    def set_field(self, record_id: int, field_name: str, value: Any) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        insert_query = """
        INSERT INTO ipq_record_meta (record_id, meta_key, meta_value)
        VALUES (%s, %s, %s)
        ON DUPLICATE KEY UPDATE meta_value = VALUES(meta_value)
        """
        try:
            cursor.execute(insert_query, (record_id, field_name, self._encode(value)))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(
                f"Error saving field {field_name} of record {record_id}: {e}",
                original_exception=e,
                table="ipq_record_meta",
            )
        finally:
            cursor.close()
