"""Core configuration, errors, messages and observability."""
