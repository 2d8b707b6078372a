"""Pydantic request/response schemas and domain value objects."""
