"""Application layer: use-case services coordinating store, retrieval and completion."""
