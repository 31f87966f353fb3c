"""Shared infrastructure: configuration, connection, errors, logging, types."""
