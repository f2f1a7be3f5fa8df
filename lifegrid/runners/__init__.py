"""Runners that drive the life engine."""
