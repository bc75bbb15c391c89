"""Sample catalogs used by the demo and interactive CLI."""

from .catalog import ColumnCatalog

SAMPLE_SOURCE_COLUMNS = [
    {"id": "src_1", "name": "customer_id", "type": "INTEGER"},
    {"id": "src_2", "name": "first_name", "type": "VARCHAR"},
    {"id": "src_3", "name": "last_name", "type": "VARCHAR"},
    {"id": "src_4", "name": "email_address", "type": "VARCHAR"},
    {"id": "src_5", "name": "phone_number", "type": "VARCHAR"},
    {"id": "src_6", "name": "created_date", "type": "TIMESTAMP"},
    {"id": "src_7", "name": "status", "type": "VARCHAR"},
    {"id": "src_8", "name": "country_code", "type": "VARCHAR"},
]

SAMPLE_TARGET_COLUMNS = [
    {"id": "tgt_1", "name": "id", "type": "INTEGER"},
    {"id": "tgt_2", "name": "full_name", "type": "VARCHAR"},
    {"id": "tgt_3", "name": "email", "type": "VARCHAR"},
    {"id": "tgt_4", "name": "phone", "type": "VARCHAR"},
    {"id": "tgt_5", "name": "registration_date", "type": "TIMESTAMP"},
    {"id": "tgt_6", "name": "account_status", "type": "VARCHAR"},
    {"id": "tgt_7", "name": "region", "type": "VARCHAR"},
    {"id": "tgt_8", "name": "user_type", "type": "VARCHAR"},
]


def sample_source_catalog() -> ColumnCatalog:
    return ColumnCatalog.from_records(SAMPLE_SOURCE_COLUMNS)


def sample_target_catalog() -> ColumnCatalog:
    return ColumnCatalog.from_records(SAMPLE_TARGET_COLUMNS)
