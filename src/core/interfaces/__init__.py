"""Core interfaces.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the services depend on abstractions, so tests can
  substitute a scripted console or a fake credential provider.
"""
