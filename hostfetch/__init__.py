"""Hostfetch - Terminal system information banner."""

__version__ = "0.1.0"

from .core.snapshot import HostSnapshot, collect_snapshot

__all__ = ["HostSnapshot", "collect_snapshot"]
