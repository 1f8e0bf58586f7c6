"""Intensive property tests, run with: pytest -m fuzz."""
