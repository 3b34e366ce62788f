"""Internal helpers: logging and value predicates."""
