"""
Tests for the bookshelf CLI
"""

import asyncio
import json

import pytest
from click.testing import CliRunner

from bookshelf.cli import cli
from bookshelf.database.connection import create_engine, create_tables


@pytest.fixture
def migrated_database_url(database_url):
    async def setup():
        engine = create_engine(database_url)
        await create_tables(engine)
        await engine.dispose()

    asyncio.run(setup())
    return database_url


@pytest.mark.integration
class TestQueryCommand:
    def test_mutation_prints_result(self, migrated_database_url):
        runner = CliRunner()

        result = runner.invoke(
            cli,
            [
                "query",
                "mutation($email: String!) { addUser(email: $email) { email } }",
                "--variables",
                json.dumps({"email": "cli@x.com"}),
                "--database-url",
                migrated_database_url,
            ],
        )

        assert result.exit_code == 0, result.output
        assert '"email": "cli@x.com"' in result.output

    def test_errors_exit_non_zero(self, migrated_database_url):
        runner = CliRunner()

        result = runner.invoke(
            cli,
            ["query", "mutation { addUser { id } }", "--database-url", migrated_database_url],
        )

        assert result.exit_code == 1
        assert '"errors"' in result.output

    def test_invalid_variables_json(self, migrated_database_url):
        runner = CliRunner()

        result = runner.invoke(
            cli,
            ["query", "{ users { id } }", "--variables", "{oops", "--database-url", migrated_database_url],
        )

        assert result.exit_code == 2
