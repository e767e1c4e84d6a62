"""Placement algorithms."""
