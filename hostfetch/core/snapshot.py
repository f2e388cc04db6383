"""Host snapshot model and collection coordinator."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .collectors import FACTS, BaseCollectors, collectors_for
from .commands import CollectorError
from .platforms import Platform

logger = logging.getLogger(__name__)


class HostSnapshot(BaseModel):
    """Collected facts about the host, formatted for display."""

    model_config = ConfigDict(frozen=True)

    userhost: str = Field(..., description="User name and host name (user@host)")
    os_name: str = Field(..., description="Operating system name")
    kernel: str = Field(..., description="Kernel version")
    uptime: str = Field(..., description="Time since boot")
    shell: str = Field(..., description="Login shell name")
    cpu: str = Field(..., description="CPU label (machine type)")
    ram: str = Field(..., description="Total memory in megabytes")
    gpu: str = Field(..., description="GPU name")
    system_arch: str = Field(..., description="System architecture")
    disk_usage: str = Field(..., description="Disk usage summary")


def _safe_collect(collectors: BaseCollectors, fact: str) -> str:
    """Run one fact method, turning any failure into an empty value."""
    try:
        return getattr(collectors, fact)()
    except (CollectorError, OSError, ValueError) as e:
        logger.warning("Failed to collect %s: %s", fact, e)
        return ""


def collect_snapshot(
    host_platform: Optional[Platform] = None,
    collectors: Optional[BaseCollectors] = None,
    max_workers: Optional[int] = None,
) -> HostSnapshot:
    """Collect every fact concurrently and build a snapshot.

    Facts are independent, so each runs on its own worker. The snapshot is
    only constructed after every worker has returned.

    Args:
        host_platform: Platform family (default: detected from the host)
        collectors: Collector strategy (default: chosen for host_platform)
        max_workers: Thread pool size (default: one per fact)

    Returns:
        Fully populated HostSnapshot
    """
    collectors = collectors or collectors_for(host_platform)

    with ThreadPoolExecutor(
        max_workers=max_workers or len(FACTS),
        thread_name_prefix="hostfetch-collect",
    ) as pool:
        futures: dict[str, Future] = {
            fact: pool.submit(_safe_collect, collectors, fact) for fact in FACTS
        }
        values = {fact: future.result() for fact, future in futures.items()}

    return HostSnapshot(**values)


def collect_snapshot_serial(
    host_platform: Optional[Platform] = None,
    collectors: Optional[BaseCollectors] = None,
) -> HostSnapshot:
    """Collect every fact one after another on the calling thread."""
    collectors = collectors or collectors_for(host_platform)
    return HostSnapshot(**{fact: _safe_collect(collectors, fact) for fact in FACTS})
