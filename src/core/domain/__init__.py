"""Domain types of the playground.

Why:
- This is where the pure data structures live (linked list, ID records).
- The domain knows nothing about the CLI or settings: only the concepts.
"""
