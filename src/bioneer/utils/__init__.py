"""Shared helpers: spans, typed errors and logging."""
