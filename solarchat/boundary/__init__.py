"""Boundary adapters: relational persistence and the hosted language model."""
