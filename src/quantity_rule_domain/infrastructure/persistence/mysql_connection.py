# src/quantity_rule_domain/infrastructure/persistence/mysql_connection.py
"""Shared MySQL connection handling for the content and options stores."""

import json
from typing import Any

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite JSON constant: {name}")


class MySQLStoreBase:
    """Lazily opens one connection per store and closes it when the store goes away."""

    def __init__(self) -> None:
        self._connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def _execute_ddl(self, query: str, table: str) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query)
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating table: {e}", original_exception=e, table=table)
        finally:
            cursor.close()

    @staticmethod
    def _encode(value: Any) -> str:
        return json.dumps(value)

    @staticmethod
    def _decode(raw: Any) -> Any:
        """Values written by other tools may be plain strings rather than JSON; NaN and Infinity stay text."""
        if raw is None:
            return None
        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, TypeError):
            return raw

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
