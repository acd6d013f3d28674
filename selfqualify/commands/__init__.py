"""Self qualifier rewrite commands."""
