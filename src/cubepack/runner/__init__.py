"""Cube-set building, request schemas and the challenge CLI."""
