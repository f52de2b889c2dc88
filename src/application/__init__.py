"""Application layer - Use case orchestration.

This layer carries the CQRS plumbing:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- HandlerRegistry: links each request to its handler and dispatches it

Handlers return Result values from src.core; the application layer never
turns expected failures into exceptions.
"""
