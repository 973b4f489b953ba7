"""Infrastructure Layer — database sessions, persistence gateway and logging setup."""
