"""Builtin slash commands."""
