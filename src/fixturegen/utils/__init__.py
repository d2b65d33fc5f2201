"""Shared helpers: constants, typed errors and logging."""
