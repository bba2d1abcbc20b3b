"""Persistence: async SQLAlchemy engine, ORM models, repositories."""
