"""Factory for the configured aggregation strategy."""

from taggable.config import settings

from .base import AggregationStrategy, AggregationStrategyMissing


def get_aggregation_strategy() -> AggregationStrategy:
    """Get the aggregation strategy named by settings.

    Uses TAGGABLE_AGGREGATION_STRATEGY to determine which strategy to
    instantiate.

    Returns:
        Configured aggregation strategy instance

    Raises:
        AggregationStrategyMissing: If TAGGABLE_AGGREGATION_STRATEGY is not set
    """
    if settings.aggregation_strategy is None:
        raise AggregationStrategyMissing()

    # Settings already validates the strategy name
    if settings.aggregation_strategy == "postgres":
        from taggable.infrastructure.database import get_db_pool

        from .postgres import PostgresAggregation

        return PostgresAggregation(get_db_pool())
    else:
        raise ValueError(
            f"Unknown aggregation strategy: {settings.aggregation_strategy}. "
            f"Valid options: postgres"
        )
