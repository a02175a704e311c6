"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- The Core depends on abstractions, not on where objects are stored.
"""
