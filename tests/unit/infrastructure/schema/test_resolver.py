"""
Unit tests for schema resolution.
"""

import pytest

from sql_crud.infrastructure.schema.core import ColumnType, FieldDef, RecordDef
from sql_crud.infrastructure.schema.exceptions import (
    InvalidIdentifierError,
    SchemaDefinitionError,
    SoftDeleteExpressionError,
    UnsupportedDialectError,
)
from sql_crud.infrastructure.schema.resolver import resolve_schema, validate_deleted_with
from sql_crud.infrastructure.sql.dialects.base import Dialect


def _resolve(fields, name="Record", **kwargs):
    return resolve_schema(name, RecordDef(fields, **kwargs))


class TestIdentity:
    def test_flagged_identity(self):
        schema = _resolve([FieldDef("name"), FieldDef("code", identity=True)])
        assert schema.identity.name == "code"

    def test_defaults_to_first_field(self):
        schema = _resolve([FieldDef("record_id"), FieldDef("name")])
        assert schema.identity.name == "record_id"
        assert not schema.auto_increment

    def test_empty_field_list(self):
        with pytest.raises(SchemaDefinitionError, match="declares no fields"):
            _resolve([])

    def test_two_identity_fields(self):
        with pytest.raises(SchemaDefinitionError, match="more than one identity"):
            _resolve([FieldDef("a", identity=True), FieldDef("b", identity=True)])

    def test_auto_increment_on_non_identity(self):
        with pytest.raises(SchemaDefinitionError, match="auto_increment"):
            _resolve([FieldDef("id"), FieldDef("seq", auto_increment=True)])

    def test_auto_increment_on_default_identity(self):
        schema = _resolve([FieldDef("id", auto_increment=True), FieldDef("name")])
        assert schema.identity.name == "id"
        assert schema.auto_increment


class TestFieldSets:
    def test_auto_increment_identity_not_inserted(self):
        schema = _resolve(
            [FieldDef("id", identity=True, auto_increment=True), FieldDef("name")]
        )
        assert schema.insert_columns == ("name",)

    def test_auto_increment_wins_over_other_annotations(self):
        schema = _resolve(
            [
                FieldDef("id", identity=True, auto_increment=True, ignore_on_update=True),
                FieldDef("name"),
            ]
        )
        assert "id" not in schema.insert_columns

    def test_explicit_identity_inserted_once(self):
        schema = _resolve([FieldDef("id", identity=True), FieldDef("name")])
        assert schema.insert_columns == ("id", "name")

    def test_update_set_never_contains_identity(self):
        schema = _resolve([FieldDef("id", identity=True), FieldDef("name")])
        assert schema.update_columns == ("name",)

    def test_ignore_annotations_preserve_order(self):
        schema = _resolve(
            [
                FieldDef("id", identity=True),
                FieldDef("a"),
                FieldDef("b", ignore_on_insert=True),
                FieldDef("c", ignore_on_update=True),
                FieldDef("d"),
                FieldDef("e", ignore_on_insert=True, ignore_on_update=True),
            ]
        )
        assert schema.columns == ("id", "a", "b", "c", "d", "e")
        assert schema.insert_columns == ("id", "a", "c", "d")
        assert schema.update_columns == ("a", "b", "d")

    def test_auto_increment_only_has_empty_insert_set(self):
        schema = _resolve(
            [
                FieldDef("id", identity=True, auto_increment=True),
                FieldDef("stamp", ignore_on_insert=True),
            ]
        )
        assert schema.insert_fields == ()
        assert schema.update_columns == ("stamp",)

    def test_identity_only_has_empty_update_set(self):
        schema = _resolve([FieldDef("name", identity=True)])
        assert schema.identity.name == "name"
        assert schema.insert_columns == ("name",)
        assert schema.update_fields == ()

    def test_duplicate_field(self):
        with pytest.raises(SchemaDefinitionError, match="declares field 'name' twice"):
            _resolve([FieldDef("id"), FieldDef("name"), FieldDef("name")])

    def test_non_fielddef_entry(self):
        with pytest.raises(SchemaDefinitionError, match="expected a FieldDef"):
            _resolve([FieldDef("id"), "name"])


class TestSoftDelete:
    def test_resolved(self):
        schema = _resolve(
            [
                FieldDef("id", identity=True),
                FieldDef("deleted_at", ColumnType.DATETIME, deleted_with="NOW()"),
                FieldDef("name"),
            ]
        )
        assert schema.soft_delete.name == "deleted_at"
        assert schema.soft_delete.deleted_with == "NOW()"

    def test_absent(self):
        assert _resolve([FieldDef("id"), FieldDef("name")]).soft_delete is None

    def test_two_soft_delete_fields(self):
        with pytest.raises(SchemaDefinitionError, match="more than one deleted_with"):
            _resolve(
                [
                    FieldDef("id"),
                    FieldDef("name"),
                    FieldDef("deleted_at", deleted_with="NOW()"),
                    FieldDef("removed_at", deleted_with="NOW()"),
                ]
            )

    def test_identity_cannot_be_soft_delete(self):
        with pytest.raises(SchemaDefinitionError, match="cannot be the soft-delete"):
            _resolve([FieldDef("id", deleted_with="NOW()"), FieldDef("name")])

    def test_malformed_expression(self):
        with pytest.raises(SoftDeleteExpressionError):
            _resolve(
                [FieldDef("id"), FieldDef("name"), FieldDef("deleted_at", deleted_with="NOW(")]
            )


class TestValidateDeletedWith:
    @pytest.mark.parametrize(
        "expression",
        [
            "NOW()",
            "CURRENT_TIMESTAMP",
            "datetime('now')",
            "COALESCE(NULL, 'it''s')",
            "1",
        ],
    )
    def test_accepted(self, expression):
        assert validate_deleted_with(expression) == expression

    @pytest.mark.parametrize(
        "expression",
        [
            "",
            "   ",
            "NOW(); DROP TABLE items",
            "NOW() -- comment",
            "/* x */ NOW()",
            "NOW(",
            "NOW())",
            ")(",
            "'unterminated",
        ],
    )
    def test_rejected(self, expression):
        with pytest.raises(SoftDeleteExpressionError):
            validate_deleted_with(expression, "deleted_at")


class TestNamesAndDialect:
    def test_default_table_name(self):
        assert _resolve([FieldDef("id"), FieldDef("x")], name="TimedField").table_name == (
            "timed_fields"
        )

    def test_explicit_table_name(self):
        schema = _resolve([FieldDef("id"), FieldDef("x")], table_name="legacy_records")
        assert schema.table_name == "legacy_records"

    @pytest.mark.parametrize("table_name", ['bad"name', "bad`name", " padded"])
    def test_unquotable_table_name(self, table_name):
        with pytest.raises(InvalidIdentifierError):
            _resolve([FieldDef("id"), FieldDef("x")], table_name=table_name)

    @pytest.mark.parametrize("field_name", ['na"me', "na`me", "two words", ""])
    def test_invalid_field_name(self, field_name):
        with pytest.raises(InvalidIdentifierError):
            _resolve([FieldDef("id"), FieldDef(field_name)])

    def test_default_dialect(self):
        schema = resolve_schema("Record", RecordDef([FieldDef("id"), FieldDef("x")]))
        assert schema.dialect is Dialect.SQLITE

    def test_explicit_default_dialect(self):
        schema = resolve_schema(
            "Record", RecordDef([FieldDef("id"), FieldDef("x")]), default_dialect="mysql"
        )
        assert schema.dialect is Dialect.MYSQL

    def test_declared_dialect_wins(self):
        schema = resolve_schema(
            "Record",
            RecordDef([FieldDef("id"), FieldDef("x")], dialect="postgres"),
            default_dialect="mysql",
        )
        assert schema.dialect is Dialect.POSTGRES

    def test_unknown_dialect(self):
        with pytest.raises(UnsupportedDialectError):
            _resolve([FieldDef("id"), FieldDef("x")], dialect="oracle")


class TestImmutability:
    def test_schema_is_frozen(self):
        schema = _resolve([FieldDef("id"), FieldDef("x")])
        with pytest.raises(AttributeError):
            schema.table_name = "other"

    def test_fields_stored_as_tuple(self):
        record_def = RecordDef([FieldDef("id"), FieldDef("x")])
        assert isinstance(record_def.fields, tuple)
