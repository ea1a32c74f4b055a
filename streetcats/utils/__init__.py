"""Shared helpers with no application dependencies."""
