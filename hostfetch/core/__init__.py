"""Core collection functionality for hostfetch."""
