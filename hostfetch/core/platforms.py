"""Host platform detection."""

import platform
from enum import Enum
from typing import Optional

BSD_SYSTEMS = {"freebsd", "openbsd", "netbsd", "dragonfly"}


class Platform(str, Enum):
    """Platform families that share native commands and parsing rules."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"
    BSD = "bsd"
    OTHER = "other"


def detect_platform(system: Optional[str] = None) -> Platform:
    """Map an OS name onto a platform family.

    Args:
        system: OS name as reported by ``platform.system()`` (default: the
            running host)

    Returns:
        The matching Platform, or Platform.OTHER when unrecognized

    Examples:
        >>> detect_platform("Linux")
        <Platform.LINUX: 'linux'>
        >>> detect_platform("FreeBSD")
        <Platform.BSD: 'bsd'>
        >>> detect_platform("SunOS")
        <Platform.OTHER: 'other'>
    """
    name = (system if system is not None else platform.system()).lower()

    if name == "linux":
        return Platform.LINUX
    if name == "darwin":
        return Platform.DARWIN
    if name == "windows":
        return Platform.WINDOWS
    if name in BSD_SYSTEMS:
        return Platform.BSD
    return Platform.OTHER
