"""Formatting utilities for hostfetch."""

import typer

from ..core.snapshot import HostSnapshot

SEPARATOR = "------------"

# (label, snapshot field) in display order
FIELDS = [
    ("OS:", "os_name"),
    ("Kernel:", "kernel"),
    ("Uptime:", "uptime"),
    ("Shell:", "shell"),
    ("CPU:", "cpu"),
    ("RAM:", "ram"),
    ("GPU:", "gpu"),
    ("Arch:", "system_arch"),
    ("Disk:", "disk_usage"),
]

LABEL_WIDTH = 8


class Palette:
    """Header and label styling; every style is the identity when disabled."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def header(self, text: str) -> str:
        if not self.enabled:
            return text
        return typer.style(text, fg=typer.colors.BRIGHT_MAGENTA)

    def label(self, text: str) -> str:
        if not self.enabled:
            return text
        return typer.style(text, fg=typer.colors.CYAN)


def render_snapshot(snapshot: HostSnapshot, palette: Palette) -> list[str]:
    """Format a snapshot as banner lines.

    Args:
        snapshot: Collected host facts
        palette: Styling to apply to the header and labels

    Returns:
        Lines to print, without trailing newlines

    Examples:
        With color disabled, a snapshot whose os_name is "linux" renders its
        third line as "OS:      linux".
    """
    lines = [palette.header(snapshot.userhost), SEPARATOR]
    for label, field in FIELDS:
        value = getattr(snapshot, field)
        lines.append(f"{palette.label(label.ljust(LABEL_WIDTH))} {value}")
    return lines
