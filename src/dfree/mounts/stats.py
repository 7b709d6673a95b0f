import logging
import os
from typing import List

import psutil

from dfree.mounts.models import Mount, MountStat

logger = logging.getLogger(__name__)


def stat_mount(directory: str, inodes: bool = False) -> MountStat:
    """
    Returns capacity and free units for the filesystem mounted at directory.
    Bytes mode counts the space available to unprivileged users as free,
    like df(1). Raises OSError if the filesystem cannot be queried.
    """
    if inodes:
        st = os.statvfs(directory)
        raw = {
            "files": st.f_files,
            "files_free": st.f_ffree,
            "files_available": st.f_favail,
            "block_size": st.f_frsize,
        }
        return MountStat(capacity=st.f_files, free=st.f_ffree, raw=raw)

    usage = psutil.disk_usage(directory)
    return MountStat(capacity=usage.total, free=usage.free, raw=usage._asdict())


def enrich_mount(mount: Mount, inodes: bool = False) -> Mount:
    """Returns a copy of mount carrying its usage counts."""
    try:
        stat = stat_mount(mount.dir, inodes)
    except OSError as e:
        logger.debug(f"Could not stat {mount.dir}: {e}")
        stat = MountStat()

    return mount.model_copy(update={
        "capacity": stat.capacity,
        "free": stat.free,
        "used": max(stat.capacity - stat.free, 0),
        "stat": stat.raw,
    })


def enrich_mounts(mounts: List[Mount], inodes: bool = False) -> List[Mount]:
    return [enrich_mount(m, inodes) for m in mounts]
