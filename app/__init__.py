"""Baco API application package."""
