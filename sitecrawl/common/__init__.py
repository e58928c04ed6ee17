"""Shared helpers for the crawler bootstrap."""
