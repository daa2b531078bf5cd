"""Database package — declarative Base and standalone session factory."""
