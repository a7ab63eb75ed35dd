"""
Tests for request logging helpers
"""

import pytest

from bookshelf.logging import (
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from bookshelf.middleware import operation_name_from_payload, sanitize_query_params


@pytest.mark.unit
class TestOperationName:
    def test_explicit_operation_name_wins(self):
        assert operation_name_from_payload({"operationName": "GetUser", "query": "{ users { id } }"}) == "GetUser"

    def test_named_query(self):
        assert operation_name_from_payload({"query": "query Shelf { books { id } }"}) == "Shelf"

    def test_named_mutation(self):
        payload = {"query": 'mutation AddUser { addUser(email: "a@x.com") { id } }'}
        assert operation_name_from_payload(payload) == "mutation:AddUser"

    def test_anonymous_operations(self):
        assert operation_name_from_payload({"query": "{ books { id } }"}) == "unnamed_operation"
        assert (
            operation_name_from_payload({"query": 'mutation { addUser(email: "x") { id } }'})
            == "mutation:unnamed_operation"
        )

    def test_introspection(self):
        assert operation_name_from_payload({"query": "{ __schema { types { name } } }"}) == "__introspection"

    def test_no_query(self):
        assert operation_name_from_payload({}) is None


@pytest.mark.unit
class TestLoggingHelpers:
    def test_sanitize_query_params(self):
        sanitized = sanitize_query_params({"api_token": "abc", "query": "{ users { id } }"})

        assert sanitized == {"api_token": "[REDACTED]", "query": "{ users { id } }"}

    def test_request_context_round_trip(self):
        request_id = set_request_context()
        try:
            assert get_request_id() == request_id
        finally:
            clear_request_context()

        assert get_request_id() is None

    def test_request_ids_are_unique(self):
        assert generate_request_id() != generate_request_id()
