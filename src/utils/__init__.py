"""Shared signal helpers."""
