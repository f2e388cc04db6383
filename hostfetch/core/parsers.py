"""Text parsing for native command output.

Each function takes the raw standard output of one command and returns the
display string for one fact, raising ParseError when the output does not
look as expected. They are pure so they can be tested against canned output.
"""

from .commands import ParseError

UPTIME_MARKER = "up "
WINDOWS_UPTIME_MARKER = "Statistics since "

BYTES_PER_MB = 1024 * 1024
BYTES_PER_GB = 1024 * 1024 * 1024


def extract_uptime(output: str) -> str:
    """Extract the uptime between ``up `` and the next comma.

    Examples:
        >>> extract_uptime(" 10:01:02 up 3 days, 2 users, load average: 0.00")
        '3 days'
    """
    start = output.find(UPTIME_MARKER)
    if start == -1:
        raise ParseError("uptime marker 'up ' not found")
    start += len(UPTIME_MARKER)

    end = output.find(",", start)
    if end == -1:
        raise ParseError("uptime delimiter ',' not found")

    return output[start:end]


def extract_windows_uptime(output: str) -> str:
    """Extract the boot timestamp from ``net stats srv`` output.

    Examples:
        >>> extract_windows_uptime("Statistics since 5/1/2024 10:00:00 AM\\r\\n")
        '5/1/2024 10:00:00 AM'
    """
    start = output.find(WINDOWS_UPTIME_MARKER)
    if start == -1:
        raise ParseError("uptime marker 'Statistics since ' not found")
    start += len(WINDOWS_UPTIME_MARKER)

    end = output.find("\r\n", start)
    if end == -1:
        end = output.find("\n", start)
    if end == -1:
        raise ParseError("uptime line ending not found")

    return output[start:end]


def shell_name(shell_path: str) -> str:
    """Return the last path segment of a shell path, or "Unknown".

    Examples:
        >>> shell_name("/usr/bin/zsh")
        'zsh'
        >>> shell_name("")
        'Unknown'
    """
    if not shell_path:
        return "Unknown"
    return shell_path.split("/")[-1]


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ParseError(f"Invalid {what}: {value.strip()!r}") from e


def bytes_to_megabytes(value: str) -> str:
    """Convert a byte count (as printed by sysctl) to whole megabytes.

    Examples:
        >>> bytes_to_megabytes("17179869184\\n")
        '16384MB'
    """
    return f"{_parse_int(value, 'memory size') // BYTES_PER_MB}MB"


def kilobytes_to_megabytes(value: str) -> str:
    """Convert a kilobyte count to whole megabytes."""
    return f"{_parse_int(value, 'memory size') // 1024}MB"


def parse_free_total(output: str) -> str:
    """Read total memory from the ``Mem:`` row of ``free -m``.

    Examples:
        >>> parse_free_total("       total  used\\nMem:   15890  4210\\n")
        '15890MB'
    """
    index = output.find("Mem:")
    if index == -1:
        raise ParseError("'Mem:' row not found in free output")

    fields = output[index:].split("\n")[0].split()
    if len(fields) < 2:
        raise ParseError("'Mem:' row has no total column")

    return f"{_parse_int(fields[1], 'memory size')}MB"


def parse_wmic_memory(output: str) -> str:
    """Read TotalVisibleMemorySize (kilobytes) from wmic output."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ParseError("No value below TotalVisibleMemorySize header")
    return kilobytes_to_megabytes(lines[-1])


def parse_windows_gpu(output: str) -> str:
    """Join every video controller name below the wmic header."""
    lines = output.strip().splitlines()[1:]
    name = " ".join(line.strip() for line in lines if line.strip())
    if not name:
        raise ParseError("No video controller below wmic Name header")
    return name


def parse_darwin_gpu(output: str) -> str:
    """Return the first ``Chipset Model:`` value from system_profiler."""
    for line in output.strip().split("\n"):
        if "Chipset Model:" in line:
            fields = line.split(":")
            if len(fields) >= 2:
                return fields[1].strip()
    raise ParseError("'Chipset Model:' not found in system_profiler output")


def parse_lspci_gpu(output: str) -> str:
    """Return the first VGA controller line from lspci, minus two tokens.

    Examples:
        >>> parse_lspci_gpu("00:02.0 VGA compatible controller [0300]: Intel UHD")
        'compatible controller [0300]: Intel UHD'
    """
    for line in output.strip().split("\n"):
        if "VGA compatible controller" in line:
            fields = line.split()
            if len(fields) > 2:
                return " ".join(fields[2:])
    raise ParseError("'VGA compatible controller' not found in lspci output")


def parse_windows_disk(output: str) -> str:
    """Sum free/size columns of wmic logicaldisk output across fixed drives."""
    total_size = 0
    total_free = 0
    drives = 0

    # wmic sorts columns alphabetically: FreeSpace, Size
    for line in output.strip().splitlines()[1:]:
        fields = line.split()
        if len(fields) != 2:
            continue
        try:
            free, size = int(fields[0]), int(fields[1])
        except ValueError:
            continue
        total_free += free
        total_size += size
        drives += 1

    if not drives:
        raise ParseError("No fixed drive rows in wmic logicaldisk output")

    return (
        f"Total: {total_size // BYTES_PER_GB} GB, "
        f"Free: {total_free // BYTES_PER_GB} GB"
    )


def _parse_df_size(value: str) -> float:
    try:
        return float(value.rstrip("BGMi"))
    except ValueError as e:
        raise ParseError(f"Invalid df size: {value!r}") from e


def parse_darwin_df(output: str) -> str:
    """Find the root device row of macOS ``df -h`` and report its usage.

    macOS prints nine columns (Filesystem, Size, Used, Avail, Capacity,
    iused, ifree, %iused, Mounted on).
    """
    for line in output.strip().split("\n"):
        fields = line.split()
        if len(fields) >= 9 and "/dev/" in fields[0] and fields[8] == "/":
            size = _parse_df_size(fields[1])
            avail = _parse_df_size(fields[3])
            used = size - avail
            return f"Total: {size:.1f}G, Free: {avail:.1f}G, Used: {used:.1f}G"
    raise ParseError("Root filesystem row not found in df output")


def parse_df_totals(output: str) -> str:
    """Report the totals row of ``df --total`` style output.

    The totals row is the last line (the second-to-last element of the raw
    output split on newlines) and must start with ``total``.

    Examples:
        >>> parse_df_totals("Filesystem Size Used Avail Use% Mounted on\\n"
        ...                 "total   500G  200G  300G  40%  -\\n")
        'Total: 500G, Free: 300G, Used: 200G'
    """
    row = output.rstrip("\n").split("\n")[-1]
    fields = row.split()
    if len(fields) < 5 or fields[0] != "total":
        raise ParseError(f"Unexpected df totals row: {row!r}")

    return f"Total: {fields[1]}, Free: {fields[3]}, Used: {fields[2]}"
