"""Per-platform fact collectors for hostfetch.

Each platform family gets one strategy class. Fact methods are named after
the HostSnapshot field they fill, return a display string, and raise
CollectorError when the fact cannot be determined. Turning those errors into
empty fields is the coordinator's job, not the collector's.
"""

import logging
import os
import platform
from collections.abc import Callable, Mapping
from typing import Optional

from . import parsers
from .commands import CollectorError, UnsupportedPlatformError, run_command
from .platforms import Platform, detect_platform

logger = logging.getLogger(__name__)

# Snapshot fields in collection order
FACTS = (
    "userhost",
    "os_name",
    "kernel",
    "uptime",
    "shell",
    "cpu",
    "ram",
    "gpu",
    "system_arch",
    "disk_usage",
)

CommandRunner = Callable[[list[str]], str]


class BaseCollectors:
    """
    Facts that are gathered the same way on every platform.

    Platform-specific facts raise UnsupportedPlatformError here and are
    overridden by the subclasses that know which native command to run.
    """

    family = Platform.OTHER

    def __init__(
        self,
        run: Optional[CommandRunner] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize collectors.

        Args:
            run: Command runner (default: run_command)
            environ: Environment mapping (default: os.environ)
        """
        self.run = run or run_command
        self.environ = environ if environ is not None else os.environ

    def _unsupported(self, fact: str) -> UnsupportedPlatformError:
        return UnsupportedPlatformError(
            f"{fact} retrieval not implemented for {platform.system() or 'this platform'}"
        )

    def userhost(self) -> str:
        return f"{self.environ.get('USER', '')}@{platform.node()}"

    def os_name(self) -> str:
        return platform.system().lower()

    def kernel(self) -> str:
        raise self._unsupported("Kernel version")

    def uptime(self) -> str:
        raise self._unsupported("Uptime")

    def shell(self) -> str:
        return parsers.shell_name(self.environ.get("SHELL", ""))

    def cpu(self) -> str:
        # Reports the machine type, not the CPU model
        return platform.machine()

    def ram(self) -> str:
        raise self._unsupported("Memory")

    def gpu(self) -> str:
        raise self._unsupported("GPU information")

    def system_arch(self) -> str:
        arch = platform.machine()
        if not arch:
            raise CollectorError("Unable to determine system architecture")
        return arch

    def disk_usage(self) -> str:
        raise self._unsupported("Disk usage")


class UnixCollectors(BaseCollectors):
    """Shared behaviour of Linux, macOS and the BSDs."""

    def kernel(self) -> str:
        return self.run(["uname", "-r"]).strip()

    def uptime(self) -> str:
        return parsers.extract_uptime(self.run(["uptime"]))


class LinuxCollectors(UnixCollectors):
    family = Platform.LINUX

    def ram(self) -> str:
        return parsers.parse_free_total(self.run(["free", "-m"]))

    def gpu(self) -> str:
        return parsers.parse_lspci_gpu(self.run(["lspci", "-vnn"]))

    def disk_usage(self) -> str:
        return parsers.parse_df_totals(self.run(["df", "-h", "--total"]))


class DarwinCollectors(UnixCollectors):
    family = Platform.DARWIN

    def ram(self) -> str:
        return parsers.bytes_to_megabytes(self.run(["sysctl", "-n", "hw.memsize"]))

    def gpu(self) -> str:
        return parsers.parse_darwin_gpu(
            self.run(["system_profiler", "SPDisplaysDataType"])
        )

    def disk_usage(self) -> str:
        return parsers.parse_darwin_df(self.run(["df", "-h"]))


class BSDCollectors(UnixCollectors):
    family = Platform.BSD

    def kernel(self) -> str:
        return self.run(["sysctl", "-n", "kern.version"]).strip()

    def ram(self) -> str:
        return parsers.bytes_to_megabytes(self.run(["sysctl", "-n", "hw.physmem"]))

    def disk_usage(self) -> str:
        # -c appends a grand total row
        return parsers.parse_df_totals(self.run(["df", "-h", "-c"]))


class WindowsCollectors(BaseCollectors):
    family = Platform.WINDOWS

    def userhost(self) -> str:
        user = self.environ.get("USER") or self.environ.get("USERNAME", "")
        return f"{user}@{platform.node()}"

    def kernel(self) -> str:
        # ver is a cmd.exe builtin, not an executable
        return self.run(["cmd", "/c", "ver"]).strip()

    def uptime(self) -> str:
        return parsers.extract_windows_uptime(self.run(["net", "stats", "srv"]))

    def ram(self) -> str:
        return parsers.parse_wmic_memory(
            self.run(["wmic", "OS", "get", "TotalVisibleMemorySize"])
        )

    def gpu(self) -> str:
        return parsers.parse_windows_gpu(
            self.run(["wmic", "path", "win32_VideoController", "get", "name"])
        )

    def disk_usage(self) -> str:
        return parsers.parse_windows_disk(
            self.run(
                ["wmic", "logicaldisk", "where", "drivetype=3", "get", "size,freespace"]
            )
        )


class OtherCollectors(BaseCollectors):
    family = Platform.OTHER

    def ram(self) -> str:
        """Report this process's peak resident memory.

        There is no portable system memory query for unknown platforms, so
        this is the interpreter's own usage and not the host's RAM.
        """
        try:
            import resource
        except ImportError as e:
            raise self._unsupported("Memory") from e

        peak_kb = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        return f"{peak_kb // 1024}MB"


COLLECTORS: dict[Platform, type[BaseCollectors]] = {
    Platform.LINUX: LinuxCollectors,
    Platform.DARWIN: DarwinCollectors,
    Platform.WINDOWS: WindowsCollectors,
    Platform.BSD: BSDCollectors,
    Platform.OTHER: OtherCollectors,
}


def collectors_for(
    host_platform: Optional[Platform] = None,
    run: Optional[CommandRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BaseCollectors:
    """Select the collector strategy for a platform.

    Args:
        host_platform: Platform family (default: detected from the host)
        run: Command runner override (used by tests)
        environ: Environment override (used by tests)

    Returns:
        Collector instance for the platform
    """
    if host_platform is None:
        host_platform = detect_platform()
    logger.debug("Using %s collectors", host_platform.value)
    return COLLECTORS[host_platform](run=run, environ=environ)
