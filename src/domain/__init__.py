"""Domain layer - Ports.

Holds the protocols (ports) the inner layers depend on. Infrastructure
adapters implement them structurally, without inheritance.
"""
