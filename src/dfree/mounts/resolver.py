import logging
import os
from typing import Iterable, List, Optional, Tuple

from dfree.mounts.models import Mount

logger = logging.getLogger(__name__)


def canonicalize(path: str) -> str:
    """Absolute path with symlinks resolved. Raises OSError if it does not exist."""
    return os.path.realpath(path, strict=True)


def is_path_prefix(directory: str, path: str) -> bool:
    """True if directory is path or one of its ancestors, compared by component."""
    if path == directory:
        return True
    return path.startswith(directory.rstrip("/") + "/")


def match_score(path: str, mount: Mount) -> int:
    if is_path_prefix(mount.dir, path):
        return len(mount.dir)
    return 0


def best_mount_match(path: str, mounts: Iterable[Mount]) -> Optional[Mount]:
    """
    Returns the mount with the longest directory containing path.
    Equal-length directories keep the first one seen.
    """
    best = None
    best_score = 0
    for mount in mounts:
        score = match_score(path, mount)
        if score > best_score:
            best, best_score = mount, score
    return best


def resolve_paths(paths: Iterable[str], mounts: List[Mount]) -> Tuple[List[Mount], List[Tuple[str, str]]]:
    """
    Maps each query path to its mount, in query order.
    Returns the matched mounts and the (path, reason) pairs that could not be
    canonicalized. Paths without a covering mount are left out.
    """
    resolved = []
    failures = []
    for path in paths:
        try:
            real_path = canonicalize(path)
        except OSError as e:
            logger.debug(f"Cannot resolve {path}: {e}")
            failures.append((path, e.strerror or str(e)))
            continue

        mount = best_mount_match(real_path, mounts)
        if mount is None:
            logger.debug(f"No mount found for {real_path}")
            continue
        resolved.append(mount.model_copy())
    return resolved, failures


def capacity_and_dir_key(mount: Mount) -> Tuple[int, str]:
    # Mounts without capacity go last
    return (0 if mount.capacity else 1, mount.dir)


def sort_mounts(mounts: List[Mount]) -> List[Mount]:
    return sorted(mounts, key=capacity_and_dir_key)
