"""Infrastructure layer - Adapters.

This layer contains implementations of domain protocols (ports):
- logging/: structlog console adapter implementing LoggerProtocol

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
