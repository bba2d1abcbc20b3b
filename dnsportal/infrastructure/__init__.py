"""Infrastructure: persistence, security primitives, external services."""
