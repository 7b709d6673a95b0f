import enum
from typing import List, Tuple

from dfree.mounts.models import Mount


class DisplayFilter(enum.Enum):
    """How much of the mount table to show."""
    MINIMAL = "minimal"
    MORE = "more"
    ALL = "all"

    @classmethod
    def from_count(cls, count: int) -> "DisplayFilter":
        if count <= 0:
            return cls.MINIMAL
        if count == 1:
            return cls.MORE
        return cls.ALL

    @classmethod
    def from_flags(cls, count: int = 0, more: bool = False, all_: bool = False) -> "DisplayFilter":
        """Explicit --all/--more win over the -a occurrence count."""
        if all_:
            return cls.ALL
        if more:
            return cls.MORE
        return cls.from_count(count)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return FSNAME_PATTERNS[self]

    def accepts(self, fsname: str) -> bool:
        return any(fsname_matches(fsname, pattern) for pattern in self.patterns)


FSNAME_PATTERNS = {
    DisplayFilter.MINIMAL: ("/dev*", "storage"),
    DisplayFilter.MORE: ("dev", "run", "tmpfs", "/dev*", "storage"),
    DisplayFilter.ALL: ("*",),
}


def fsname_matches(fsname: str, pattern: str) -> bool:
    """A trailing * matches any suffix, anything else must match exactly."""
    if pattern.endswith("*"):
        return fsname.startswith(pattern[:-1])
    return fsname == pattern


def filter_mounts(mounts: List[Mount], display_filter: DisplayFilter) -> List[Mount]:
    return [m for m in mounts if display_filter.accepts(m.fsname)]


def filter_local(mounts: List[Mount]) -> List[Mount]:
    return [m for m in mounts if m.is_local()]
