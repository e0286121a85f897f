"""
Health, version and runtime metrics.

These reports are consumed by deployment pipelines: ``/health`` gates
rollouts, ``/version`` confirms which build is live and ``/metrics``
feeds monitoring.  Build metadata comes from ``Settings``; uptime is
measured from the moment the service is constructed.
"""

import os
import sys
import time
from typing import Callable, Dict, Optional

from ..core.config import Settings
from ..core.errors import utc_timestamp
from ..core.store import InMemoryStore
from ..schemas.system import CpuUsage, DatabaseCounts, HealthRead, MetricsRead, RequestCounts, VersionRead

try:
    import resource
except ImportError:  # Windows
    resource = None


def format_uptime(ms: int) -> str:
    """Format a duration in milliseconds as ``"{h}h {m}m {s}s"``."""
    seconds = int(ms) // 1000
    minutes = seconds // 60
    hours = minutes // 60
    return f"{hours}h {minutes % 60}m {seconds % 60}s"


def memory_usage() -> Dict[str, int]:
    """Return process memory figures in bytes / blocks."""
    usage: Dict[str, int] = {"allocatedBlocks": sys.getallocatedblocks()}
    if resource is not None:
        max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # Linux reports kilobytes, macOS bytes.
        usage["maxRss"] = max_rss if sys.platform == "darwin" else max_rss * 1024
    return usage


def cpu_usage() -> CpuUsage:
    times = os.times()
    return CpuUsage(user=int(times.user * 1_000_000), system=int(times.system * 1_000_000))


class SystemService:
    """Builds the health, version and metrics reports."""

    def __init__(
        self,
        store: InMemoryStore,
        settings: Settings,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self._clock = clock or time.monotonic
        self.started_at = self._clock()

    def uptime_ms(self) -> int:
        return int((self._clock() - self.started_at) * 1000)

    def health(self) -> HealthRead:
        with self.store.lock:
            counts = DatabaseCounts(users=self.store.count_users(), posts=self.store.count_posts())
        return HealthRead(
            status="healthy",
            timestamp=utc_timestamp(),
            uptime=format_uptime(self.uptime_ms()),
            version=self.settings.app_version,
            environment=self.settings.environment,
            database=counts,
        )

    def version(self) -> VersionRead:
        return VersionRead(
            version=self.settings.app_version,
            build_time=self.settings.build_time or utc_timestamp(),
            git_commit=self.settings.git_commit,
            environment=self.settings.environment,
        )

    def metrics(self) -> MetricsRead:
        """Runtime metrics.

        ``requests`` mirrors the collection sizes; it is not a count of
        served HTTP requests.
        """
        uptime = self.uptime_ms()
        with self.store.lock:
            users = self.store.count_users()
            posts = self.store.count_posts()
        return MetricsRead(
            uptime=format_uptime(uptime),
            uptime_ms=uptime,
            memory=memory_usage(),
            cpu=cpu_usage(),
            requests=RequestCounts(total=users + posts, users=users, posts=posts),
            timestamp=utc_timestamp(),
        )
