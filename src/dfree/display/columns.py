import enum
from typing import Iterable, List


class ColumnType(enum.Enum):
    FILESYSTEM = "filesystem"
    TYPE = "type"
    BAR = "bar"
    USED = "used"
    USED_PERCENTAGE = "used_percentage"
    AVAILABLE = "available"
    AVAILABLE_PERCENTAGE = "available_percentage"
    CAPACITY = "capacity"
    MOUNTED_ON = "mounted_on"

    def label(self, inodes_mode: bool = False) -> str:
        if self is ColumnType.CAPACITY:
            return "Inodes" if inodes_mode else "Size"
        return LABELS[self]

    @property
    def right_aligned(self) -> bool:
        return self in RIGHT_ALIGNED


LABELS = {
    ColumnType.FILESYSTEM: "Filesystem",
    ColumnType.TYPE: "Type",
    ColumnType.BAR: "",
    ColumnType.USED: "Used",
    ColumnType.USED_PERCENTAGE: "Used%",
    ColumnType.AVAILABLE: "Avail",
    ColumnType.AVAILABLE_PERCENTAGE: "Avail%",
    ColumnType.CAPACITY: "Size",
    ColumnType.MOUNTED_ON: "Mounted on",
}

RIGHT_ALIGNED = frozenset({
    ColumnType.USED,
    ColumnType.USED_PERCENTAGE,
    ColumnType.AVAILABLE,
    ColumnType.AVAILABLE_PERCENTAGE,
    ColumnType.CAPACITY,
})

DEFAULT_COLUMNS = [
    ColumnType.FILESYSTEM,
    ColumnType.TYPE,
    ColumnType.BAR,
    ColumnType.USED_PERCENTAGE,
    ColumnType.AVAILABLE,
    ColumnType.USED,
    ColumnType.CAPACITY,
    ColumnType.MOUNTED_ON,
]


def parse_columns(names: Iterable[str]) -> List[ColumnType]:
    """Column names to ColumnType, raising ValueError on an unknown name."""
    return [ColumnType(name.strip()) for name in names if name.strip()]
