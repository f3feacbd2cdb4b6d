"""Repository adapters for the catalog context (in-memory and SQL)."""
