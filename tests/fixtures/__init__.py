"""Shared test fixtures (sample requests and handlers)."""
