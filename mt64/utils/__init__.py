"""Logging setup and output recording."""
