"""Adapters – concrete dataset sources and file savers."""
