"""Shared helpers for the CLI."""
