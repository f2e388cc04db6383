"""Utility functions for hostfetch."""
