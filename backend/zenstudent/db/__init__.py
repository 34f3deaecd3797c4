"""Database Metadata - SQLAlchemy declarative base shared by all ORM models."""
