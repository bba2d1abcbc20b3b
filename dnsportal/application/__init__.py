"""Application layer: use-case services, DTOs and ports (no HTTP, no ORM)."""
