"""Pytest configuration and shared fixtures for hostfetch tests."""

import pytest

from hostfetch.core.commands import CommandNotFoundError
from hostfetch.core.snapshot import HostSnapshot

LINUX_UPTIME = " 10:01:02 up 3 days,  4:05,  2 users,  load average: 0.10, 0.20, 0.30\n"

LINUX_FREE = """\
               total        used        free      shared  buff/cache   available
Mem:           15890        4210        8120         512        3560       10980
Swap:           2047           0        2047
"""

LINUX_LSPCI = """\
00:00.0 Host bridge [0600]: Intel Corporation Device [8086:9b61] (rev 0c)
\tSubsystem: Lenovo Device [17aa:5097]
00:02.0 VGA compatible controller [0300]: Intel Corporation UHD Graphics [8086:9b41] (rev 02)
\tSubsystem: Lenovo Device [17aa:5097]
"""

LINUX_DF = """\
Filesystem      Size  Used Avail Use% Mounted on
/dev/nvme0n1p2  468G  180G  265G  41% /
/dev/nvme0n1p1  511M  6.1M  505M   2% /boot/efi
total           500G  200G  300G  40% -
"""

DARWIN_DF = """\
Filesystem       Size   Used  Avail Capacity iused      ifree %iused  Mounted on
/dev/disk3s1s1  460Gi  9.6Gi  200Gi     5%  404k 2.1G    0%   /
devfs          200Ki  200Ki    0Bi   100%     692          0  100%   /dev
/dev/disk3s6   460Gi  3.0Gi  200Gi     2%       3 2.1G    0%   /System/Volumes/VM
"""

DARWIN_PROFILER = """\
Graphics/Displays:

    Apple M1:

      Chipset Model: Apple M1
      Type: GPU
      Bus: Built-In
"""

WINDOWS_NET_STATS = (
    "Server Statistics for \\\\DESKTOP\r\n\r\n\r\n"
    "Statistics since 5/1/2024 10:00:00 AM\r\n\r\n\r\n"
    "Sessions accepted                  1\r\n"
)

WINDOWS_GPU = "Name                     \r\nNVIDIA GeForce RTX 3070  \r\n\r\n"

WINDOWS_MEMORY = "TotalVisibleMemorySize  \r\n16645432                \r\n\r\n"

WINDOWS_DISK = (
    "FreeSpace     Size          \r\n"
    "107374182400  536870912000  \r\n"
    "53687091200   107374182400  \r\n\r\n"
)


class FakeRunner:
    """Command runner returning canned output keyed by command line."""

    def __init__(self, outputs: dict[str, str]):
        self.outputs = outputs
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str]) -> str:
        self.calls.append(args)
        key = " ".join(args)
        if key not in self.outputs:
            raise CommandNotFoundError(f"{args[0]} not found")
        return self.outputs[key]


@pytest.fixture
def linux_runner():
    """Runner with typical Linux command output."""
    return FakeRunner(
        {
            "uname -r": "6.5.0-35-generic\n",
            "uptime": LINUX_UPTIME,
            "free -m": LINUX_FREE,
            "lspci -vnn": LINUX_LSPCI,
            "df -h --total": LINUX_DF,
        }
    )


@pytest.fixture
def darwin_runner():
    """Runner with typical macOS command output."""
    return FakeRunner(
        {
            "uname -r": "23.4.0\n",
            "uptime": "10:01  up 12 days, 3:04, 2 users, load averages: 1.2 1.3 1.4\n",
            "sysctl -n hw.memsize": "17179869184\n",
            "system_profiler SPDisplaysDataType": DARWIN_PROFILER,
            "df -h": DARWIN_DF,
        }
    )


@pytest.fixture
def windows_runner():
    """Runner with typical Windows command output."""
    return FakeRunner(
        {
            "cmd /c ver": "\r\nMicrosoft Windows [Version 10.0.19045.4291]\r\n",
            "net stats srv": WINDOWS_NET_STATS,
            "wmic OS get TotalVisibleMemorySize": WINDOWS_MEMORY,
            "wmic path win32_VideoController get name": WINDOWS_GPU,
            "wmic logicaldisk where drivetype=3 get size,freespace": WINDOWS_DISK,
        }
    )


@pytest.fixture
def sample_snapshot():
    """A fully populated snapshot for rendering tests."""
    return HostSnapshot(
        userhost="alice@workstation",
        os_name="linux",
        kernel="6.5.0-35-generic",
        uptime="3 days",
        shell="zsh",
        cpu="x86_64",
        ram="15890MB",
        gpu="Intel Corporation UHD Graphics",
        system_arch="x86_64",
        disk_usage="Total: 500G, Free: 300G, Used: 200G",
    )


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner
