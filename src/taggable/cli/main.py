"""taggable CLI main entry point."""

import asyncio
import logging
import sys

import click
import structlog

from taggable.config import settings
from taggable.domain import TaggableDocument, filter_tags, string_to_array
from taggable.domain.normalizer import array_to_slugs
from taggable.domain.stop_words import STOP_WORDS
from taggable.infrastructure.database import DatabasePool
from taggable.infrastructure.schema import ensure_document_table, table_exists
from taggable.startup_check import run_startup_checks

# Configure logging for CLI
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer(colors=True),
    ],
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@click.group()
@click.pass_context
def cli(ctx):
    """taggable - tags with context for storage-backed documents.

    Inspect how free text is turned into tags and manage tag tables.
    """
    ctx.ensure_object(dict)
    # Library modules log through the standard logging module
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="filter")
@click.argument("text")
@click.option("--separator", "-s", default=",", show_default=True, help="Join tags with this")
def filter_command(text: str, separator: str):
    """Print the cleaned tag string for TEXT."""
    click.echo(filter_tags(text, separator))


@cli.command()
@click.argument("text")
def slugs(text: str):
    """Print one slug per cleaned tag of TEXT."""
    tags = string_to_array(filter_tags(text), ",")
    for tag, slug in zip(tags, array_to_slugs(tags), strict=True):
        click.echo(f"{tag}\t{slug}")


@cli.command(name="stop-words")
@click.option("--check", "word", help="Only report whether WORD is a stop word")
def stop_words(word: str | None):
    """List the stop words, or check a single word."""
    if word is None:
        for stop_word in sorted(STOP_WORDS):
            click.echo(stop_word)
        return

    if word.lower() in STOP_WORDS:
        click.echo(f"'{word}' is a stop word")
    else:
        click.echo(f"'{word}' is not a stop word")
        sys.exit(1)


@cli.command()
@click.option("--skip-database", is_flag=True, help="Do not try to reach PostgreSQL")
def check(skip_database: bool):
    """Run startup checks."""
    if not asyncio.run(run_startup_checks(database=not skip_database)):
        sys.exit(1)


@cli.group()
@click.pass_context
def schema(ctx):
    """Manage document tables."""
    pass


@schema.command(name="init")
@click.argument("table")
@click.option(
    "--field", "-f", "fields", multiple=True, default=("tags",), show_default=True,
    help="Tag field to create columns for (repeatable)",
)
@click.option("--separator", default=" ", show_default=True, help="Tag separator")
@click.pass_context
def schema_init(ctx, table: str, fields: tuple[str, ...], separator: str):
    """Create TABLE with columns and indexes for tag fields."""
    document_class = type(table.title().replace("_", ""), (TaggableDocument,), {})
    for field in fields:
        document_class.taggable(field, separator=separator)

    async def _init():
        pool = DatabasePool()
        try:
            await pool.initialize()
            async with pool.acquire() as conn:
                existed = await table_exists(conn, table)
                await ensure_document_table(conn, table, document_class.tag_registry)
            logger.info("document_table_ready", table=table, fields=list(fields))
            verb = "Updated" if existed else "Created"
            click.echo(f"✓ {verb} table: {table} ({', '.join(fields)})")
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        finally:
            await pool.close()

    asyncio.run(_init())


if __name__ == "__main__":
    cli()
