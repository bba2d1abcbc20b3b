"""External services reached over HTTP."""
