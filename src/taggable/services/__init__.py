"""External collaborators: text utilities and aggregation strategies."""
