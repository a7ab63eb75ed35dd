"""
`bookshelf-migrate`: apply and inspect the Alembic migrations for the store.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from bookshelf import __version__
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config(database_url: str | None = None) -> Config:
    """Build the Alembic config, pointing env.py at ``database_url`` when given."""
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini), stdout=sys.stdout)
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    # structlog is already configured; env.py must not reload logging from the ini
    config.attributes["configure_logger"] = False
    if database_url:
        config.attributes["database_url"] = database_url
    return config


def run_alembic(ctx: click.Context, action: str, fn: Callable[[Config], None]) -> None:
    database_url = ctx.obj.get("database_url")
    try:
        fn(get_alembic_config(database_url))
    except Exception as e:
        logger.error("Migration command failed", action=action, error=str(e))
        sys.exit(1)


@click.group()
@click.option(
    "--database-url",
    envvar="BOOKSHELF_DATABASE_URL",
    default=None,
    help="Database to migrate (default: configured database_url)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="bookshelf-migrate")
@click.pass_context
def main(ctx: click.Context, database_url: str | None, log_level: str) -> None:
    """Bookshelf database migration management."""
    configure_logging(debug=(log_level == "debug"), stream=sys.stderr)
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url


@main.command()
@click.argument("revision", default="head")
@click.pass_context
def upgrade(ctx: click.Context, revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    logger.info("Upgrading database", revision=revision)
    run_alembic(ctx, "upgrade", lambda config: command.upgrade(config, revision))
    logger.info("Database upgraded", revision=revision)


@main.command()
@click.argument("revision", default="-1")
@click.pass_context
def downgrade(ctx: click.Context, revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    logger.info("Downgrading database", revision=revision)
    run_alembic(ctx, "downgrade", lambda config: command.downgrade(config, revision))
    logger.info("Database downgraded", revision=revision)


@main.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Show current database revision."""
    run_alembic(ctx, "current", command.current)


if __name__ == "__main__":
    main()
