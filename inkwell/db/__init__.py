"""Database package — declarative Base shared by all ORM models."""
