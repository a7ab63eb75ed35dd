"""
Tests for GraphQL schema composition
"""

from unittest.mock import patch

import pytest

from bookshelf.graphql.schema import SchemaValidationError, build_schema, validate_schema


@pytest.mark.unit
class TestSchemaComposition:
    def test_schema_validates(self, schema):
        validate_schema(schema)

    def test_only_query_and_mutation_roots(self, schema):
        graphql_schema = schema._schema

        assert graphql_schema.query_type.name == "Query"
        assert graphql_schema.mutation_type.name == "Mutation"
        assert graphql_schema.subscription_type is None

    def test_root_operation_names(self, schema):
        graphql_schema = schema._schema

        assert set(graphql_schema.query_type.fields) == {"book", "books", "user", "users", "content"}
        assert set(graphql_schema.mutation_type.fields) == {"addUser", "addBook", "addContent"}

    def test_mutation_arguments_are_required(self, schema):
        fields = schema._schema.mutation_type.fields

        assert str(fields["addUser"].args["email"].type) == "String!"
        assert str(fields["addBook"].args["pages"].type) == "Int!"
        assert str(fields["addBook"].args["userId"].type) == "ID!"
        assert set(fields["addContent"].args) == {
            "contentTypeId",
            "data",
            "createdByUserId",
            "lastUpdatedByUserId",
        }

    def test_query_id_arguments_are_optional(self, schema):
        fields = schema._schema.query_type.fields

        for name in ("book", "user", "content"):
            assert str(fields[name].args["id"].type) == "ID"

    def test_entity_fields(self, schema):
        type_map = schema._schema.type_map

        assert set(type_map["User"].fields) == {"id", "email", "book"}
        assert set(type_map["Book"].fields) == {"id", "name", "pages", "user"}
        assert set(type_map["Content"].fields) == {
            "id",
            "contentTypeId",
            "data",
            "createdByUserId",
            "lastUpdatedByUserId",
            "createdOn",
            "updatedOn",
        }
        assert str(type_map["User"].fields["book"].type) == "[Book!]"
        assert str(schema._schema.query_type.fields["books"].type) == "[Book!]"
        assert str(schema._schema.query_type.fields["users"].type) == "[User!]"
        assert str(type_map["Book"].fields["user"].type) == "User"
        assert str(type_map["Content"].fields["createdByUserId"].type) == "User"

    def test_build_schema_returns_independent_instances(self):
        assert build_schema() is not build_schema()

    def test_validation_failure_is_raised(self, schema):
        with patch("bookshelf.graphql.schema.gql_validate_schema", return_value=["broken"]):
            with pytest.raises(SchemaValidationError, match="broken"):
                validate_schema(schema)
