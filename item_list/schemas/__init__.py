"""Schemas — Pydantic models validating values at construction boundaries."""
