"""Shared helpers: logging, I/O, schema validation and hashing."""
