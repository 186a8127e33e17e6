"""Concrete port implementations."""
