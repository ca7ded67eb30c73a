"""Adapters – storage-specific implementations of the reverse search."""
