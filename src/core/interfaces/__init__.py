"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that the concrete domain types implement.
- Default method bodies live on the protocol, so conforming types only
  write what is specific to them.
"""
