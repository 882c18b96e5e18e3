"""Mounts attached to task containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MountType(str, Enum):
    """Kind of mount."""

    VOLUME = "volume"
    BIND = "bind"
    TMPFS = "tmpfs"


@dataclass
class Mount:
    """A mount of a volume, bind path or tmpfs into a task."""

    id: str = ""
    type: str = ""
    source: str = ""
    target: str = ""