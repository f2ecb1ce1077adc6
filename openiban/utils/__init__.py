"""Shared helpers: configuration, logging and string handling."""
