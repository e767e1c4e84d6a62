"""Geometry, data model and errors."""
