"""Pluggable tag aggregation strategies."""

from .base import AggregationStrategy, AggregationStrategyMissing
from .factory import get_aggregation_strategy
from .memory import InMemoryAggregation

__all__ = [
    "AggregationStrategy",
    "AggregationStrategyMissing",
    "InMemoryAggregation",
    "get_aggregation_strategy",
]
