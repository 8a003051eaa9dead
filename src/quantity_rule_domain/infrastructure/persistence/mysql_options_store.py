# src/quantity_rule_domain/infrastructure/persistence/mysql_options_store.py
"""MySQL implementation of the options store."""

import logging
from typing import Any, Optional

from mysql.connector import Error

from src.common.exceptions.custom_exceptions import DatabaseError
from src.quantity_rule_domain.domain.repositories.options_store import IOptionsStore
from src.quantity_rule_domain.infrastructure.persistence.mysql_connection import MySQLStoreBase

logger = logging.getLogger(__name__)


class MySQLOptionsStore(MySQLStoreBase, IOptionsStore):
    """Named option records stored as JSON in the 'ipq_options' table."""

    def create_tables(self) -> None:
        create_options_table_query = """
        CREATE TABLE IF NOT EXISTS ipq_options (
            option_name VARCHAR(191) PRIMARY KEY,
            option_value LONGTEXT,
            date_modified DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_options_table_query, "ipq_options")
        logger.info("IPQ options table checked/created.")

    def get(self, key: str) -> Optional[dict[str, Any]]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT option_value FROM ipq_options WHERE option_name = %s LIMIT 1", (key,))
            row = cursor.fetchone()
            if not row:
                return None
            record = self._decode(row["option_value"])
            return record if isinstance(record, dict) else None
        except Error as e:
            raise DatabaseError(f"Error fetching option {key}: {e}", original_exception=e, table="ipq_options")
        finally:
            cursor.close()

    def set(self, key: str, record: dict[str, Any]) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        insert_query = """
        INSERT INTO ipq_options (option_name, option_value)
        VALUES (%s, %s)
        ON DUPLICATE KEY UPDATE option_value = VALUES(option_value)
        """
        try:
            cursor.execute(insert_query, (key, self._encode(record)))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error saving option {key}: {e}", original_exception=e, table="ipq_options")
        finally:
            cursor.close()
