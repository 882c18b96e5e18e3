"""Worker nodes and their heartbeat settings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

LAST_HEARTBEAT_TIMEOUT = timedelta(minutes=5)
HEARTBEAT_RATE = timedelta(seconds=30)


class NodeStatus(str, Enum):
    """Health status of a node."""

    UP = "UP"
    DOWN = "DOWN"
    OFFLINE = "OFFLINE"


@dataclass
class Node:
    """A worker node as reported by its heartbeats."""

    id: str = ""
    name: str = ""
    started_at: datetime | None = None
    cpu_percent: float = 0.0
    last_heartbeat_at: datetime | None = None
    queue: str = ""
    status: str = ""
    hostname: str = ""
    port: int = 0
    task_count: int = 0
    version: str = ""

    def clone(self) -> Node:
        """Return a copy of this node."""
        return Node(
            id=self.id,
            name=self.name,
            started_at=self.started_at,
            cpu_percent=self.cpu_percent,
            last_heartbeat_at=self.last_heartbeat_at,
            queue=self.queue,
            status=self.status,
            hostname=self.hostname,
            port=self.port,
            task_count=self.task_count,
            version=self.version,
        )