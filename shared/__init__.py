"""Shared helpers for command-line tools."""
