"""Pydantic schemas for books, reviews and users."""
