"""Startup configuration checks."""

import sys

import asyncpg
import structlog

from taggable.services.text import SpacyTextUtilities, TextUtilitiesError

logger = structlog.get_logger()


async def check_database() -> bool:
    """Check PostgreSQL connectivity and table creation permissions."""
    from taggable.config import settings

    print("  Checking PostgreSQL...", flush=True)

    try:
        conn = await asyncpg.connect(settings.database_url)

        try:
            await conn.execute("CREATE TEMPORARY TABLE _taggable_startup_test_ (tags TEXT[])")
            await conn.execute("DROP TABLE _taggable_startup_test_")
            print("    ✓ Database connection established", flush=True)
            print("    ✓ Table creation permissions verified", flush=True)
        except asyncpg.PostgresError as e:
            print(f"    ✗ Insufficient database permissions: {e}", flush=True)
            print("      User needs CREATE privilege", flush=True)
            return False
        finally:
            await conn.close()

        return True

    except asyncpg.InvalidCatalogNameError:
        print("    ✗ Database does not exist", flush=True)
        print(f"      Create it with: createdb {settings.database_url.split('/')[-1]}", flush=True)
        return False
    except (OSError, asyncpg.PostgresError) as e:
        print(f"    ✗ Cannot connect to PostgreSQL: {e}", flush=True)
        print("      Check TAGGABLE_DATABASE_URL environment variable", flush=True)
        return False


def check_text_utilities() -> bool:
    """Check the configured text utilities can be loaded."""
    from taggable.config import settings

    print(f"  Checking text utilities ({settings.text_utilities})...", flush=True)

    if settings.text_utilities != "spacy":
        print(f"    ✓ {settings.text_utilities} provider needs no model", flush=True)
        return True

    provider = SpacyTextUtilities(settings.spacy_model)
    try:
        provider.singularize("tags")
    except TextUtilitiesError as e:
        print(f"    ✗ {e}", flush=True)
        return False
    print(f"    ✓ spaCy model '{settings.spacy_model}' loaded", flush=True)
    return True


def check_aggregation() -> bool:
    """Report whether tag aggregation is configured."""
    from taggable.config import settings

    if settings.aggregation_strategy is None:
        logger.warning(
            "aggregation_not_configured",
            help="Set TAGGABLE_AGGREGATION_STRATEGY=postgres to enable tag counts",
        )
        return False

    print(f"  Aggregation strategy: {settings.aggregation_strategy}", flush=True)
    return True


async def run_startup_checks(database: bool = True) -> bool:
    """Run all vital sign checks and return success status."""
    print("\nChecking taggable configuration...\n", flush=True)
    sys.stdout.flush()

    # Check in order of dependency
    if database and not await check_database():
        return False
    if not check_text_utilities():
        return False

    # Aggregation is optional; a missing strategy is only reported
    check_aggregation()

    print("\n✓ All checks passed\n", flush=True)
    sys.stdout.flush()
    return True
