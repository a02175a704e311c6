"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and field error values.
- The domain knows nothing about files, CLI or clusters.
"""
