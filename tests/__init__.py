"""Test suite for the Arbitrar result/validation kernel and CQRS registry."""
