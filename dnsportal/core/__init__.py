"""Core wiring: settings, rate limiter, lifespan, exception handlers."""
