# tests/test_quantity_rule_domain/test_infrastructure/test_mysql_stores.py
"""Tests for the MySQL content and options stores."""

from unittest.mock import Mock

import pytest
from mysql.connector import Error

from src.common.dtos.quantity_dtos import ContentRecordDTO
from src.common.exceptions.custom_exceptions import DatabaseError
from src.quantity_rule_domain.infrastructure.persistence.mysql_content_store import MySQLContentStore
from src.quantity_rule_domain.infrastructure.persistence.mysql_options_store import MySQLOptionsStore
from src.quantity_rule_domain.infrastructure.persistence.store_quantity_settings_repository import (
    StoreQuantitySettingsRepository,
)


@pytest.fixture
def mock_connection(mocker) -> Mock:
    return mocker.patch("mysql.connector.connect")


@pytest.fixture
def mock_cursor(mock_connection) -> Mock:
    cursor = Mock()
    mock_connection.return_value.cursor.return_value = cursor
    return cursor


def test_content_store_create_tables(mock_connection, mock_cursor) -> None:
    store = MySQLContentStore()

    store.create_tables()

    mock_connection.assert_called_once()
    assert mock_cursor.execute.call_count == 2
    assert "CREATE TABLE IF NOT EXISTS ipq_records" in mock_cursor.execute.call_args_list[0][0][0]
    assert "CREATE TABLE IF NOT EXISTS ipq_record_meta" in mock_cursor.execute.call_args_list[1][0][0]
    assert mock_connection.return_value.commit.call_count == 2
    assert mock_cursor.close.call_count == 2


def test_content_store_fetch_published_records(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchall.return_value = [
        {"id": 3, "kind": "quantity-rule", "status": "publish", "title": "Bulk screws"},
        {"id": 8, "kind": "quantity-rule", "status": "publish", "title": None},
    ]
    store = MySQLContentStore()

    records = store.fetch_published_records("quantity-rule")

    assert records == [
        ContentRecordDTO(id=3, kind="quantity-rule", status="publish", title="Bulk screws"),
        ContentRecordDTO(id=8, kind="quantity-rule", status="publish", title=None),
    ]
    assert mock_cursor.execute.call_args[0][0].strip().startswith("SELECT id, kind, status, title")
    assert mock_cursor.execute.call_args[0][1] == ("quantity-rule",)
    mock_cursor.close.assert_called_once()


def test_content_store_get_field_decodes_json(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"meta_value": "[5, 6]"}
    store = MySQLContentStore()

    assert store.get_field(3, "_cats") == [5, 6]
    assert mock_cursor.execute.call_args[0][1] == (3, "_cats")


def test_content_store_get_field_keeps_plain_strings(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"meta_value": "on"}

    assert MySQLContentStore().get_field(3, "_wpbo_override") == "on"


def test_content_store_get_missing_field(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = None

    assert MySQLContentStore().get_field(3, "_min") is None


def test_content_store_set_field_upserts_json(mock_connection, mock_cursor) -> None:
    store = MySQLContentStore()

    store.set_field(3, "_roles", ["customer", "guest"])

    query, params = mock_cursor.execute.call_args[0]
    assert query.strip().startswith("INSERT INTO ipq_record_meta")
    assert "ON DUPLICATE KEY UPDATE" in query
    assert params == (3, "_roles", '["customer", "guest"]')
    mock_connection.return_value.commit.assert_called_once()


def test_content_store_set_field_error_rolls_back(mock_connection, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("Lock wait timeout")
    store = MySQLContentStore()

    with pytest.raises(DatabaseError) as exc_info:
        store.set_field(3, "_roles", [])

    assert exc_info.value.table == "ipq_record_meta"
    mock_connection.return_value.rollback.assert_called_once()
    mock_cursor.close.assert_called_once()


def test_content_store_fetch_error_is_wrapped(mock_connection, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("Table doesn't exist")

    with pytest.raises(DatabaseError, match="Error fetching published 'quantity-rule' records"):
        MySQLContentStore().fetch_published_records("quantity-rule")


def test_connection_failure_raises_database_error(mock_connection) -> None:
    mock_connection.side_effect = Error("Access denied")

    with pytest.raises(DatabaseError, match="Failed to connect to MySQL"):
        MySQLContentStore().get_field(1, "_min")


def test_options_store_get_and_set(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"option_value": '{"ipq_site_rule_active": "on"}'}
    store = MySQLOptionsStore()

    assert store.get("ipq_options") == {"ipq_site_rule_active": "on"}

    store.set("ipq_options", {"ipq_site_min": "2"})
    query, params = mock_cursor.execute.call_args[0]
    assert query.strip().startswith("INSERT INTO ipq_options")
    assert params == ("ipq_options", '{"ipq_site_min": "2"}')


def test_options_store_missing_or_malformed_record(mock_connection, mock_cursor) -> None:
    store = MySQLOptionsStore()

    mock_cursor.fetchone.return_value = None
    assert store.get("ipq_options") is None

    mock_cursor.fetchone.return_value = {"option_value": "not json"}
    assert store.get("ipq_options") is None


def test_options_store_create_tables(mock_connection, mock_cursor) -> None:
    MySQLOptionsStore().create_tables()

    assert "CREATE TABLE IF NOT EXISTS ipq_options" in mock_cursor.execute.call_args[0][0]
    mock_connection.return_value.commit.assert_called_once()


@pytest.mark.parametrize("stored", ["Infinity", "-Infinity", "NaN"])
def test_content_store_keeps_non_finite_constants_as_text(mock_connection, mock_cursor, stored) -> None:
    mock_cursor.fetchone.return_value = {"meta_value": stored}

    assert MySQLContentStore().get_field(3, "_wpbo_minimum") == stored


def test_product_settings_survive_non_finite_stored_values(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"meta_value": "1e400"}
    settings_repository = StoreQuantitySettingsRepository(MySQLContentStore(), MySQLOptionsStore())

    product_settings = settings_repository.get_product_settings(3)

    assert product_settings.min is None
    assert product_settings.max_oos is None


def test_content_store_get_record(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"id": 3, "kind": "quantity-rule", "status": "draft", "title": "Pallets"}
    store = MySQLContentStore()

    assert store.get_record(3) == ContentRecordDTO(id=3, kind="quantity-rule", status="draft", title="Pallets")
    assert "WHERE id = %s" in mock_cursor.execute.call_args[0][0]
    assert mock_cursor.execute.call_args[0][1] == (3,)

    mock_cursor.fetchone.return_value = None
    assert store.get_record(4) is None
