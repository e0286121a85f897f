"""
Pydantic models for the system endpoints.

``/health``, ``/version`` and ``/metrics`` are polled by deployment
pipelines and monitoring, so they use a flat shape without the
``success``/``data`` envelope.
"""

from typing import Dict

from .common import CamelModel


class DatabaseCounts(CamelModel):
    users: int
    posts: int


class HealthRead(CamelModel):
    status: str
    timestamp: str
    uptime: str
    version: str
    environment: str
    database: DatabaseCounts


class VersionRead(CamelModel):
    version: str
    build_time: str
    git_commit: str
    environment: str


class CpuUsage(CamelModel):
    """CPU time consumed by the process, in microseconds."""

    user: int
    system: int


class RequestCounts(CamelModel):
    total: int
    users: int
    posts: int


class MetricsRead(CamelModel):
    uptime: str
    uptime_ms: int
    memory: Dict[str, int]
    cpu: CpuUsage
    requests: RequestCounts
    timestamp: str
