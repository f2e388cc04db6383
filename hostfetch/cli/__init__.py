"""Command-line interface for hostfetch."""
