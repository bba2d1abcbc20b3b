"""Shared helpers: logging setup, id generation, UTC time."""
