"""Model catalog service."""
