import logging
import re
from typing import Iterable, List

from dfree.errors import MountParseError, MountTableError
from dfree.mounts.models import Mount

logger = logging.getLogger(__name__)

# fstab(5) field order
MOUNT_FIELDS = ("fsname", "dir", "type", "options", "freq", "passno")

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_int32(token: str, field: str) -> int:
    """Plain ASCII decimal that fits a C int, as fstab(5) numbers do."""
    if not _DECIMAL.fullmatch(token):
        raise MountParseError(f"Invalid number for {field}: '{token}'")
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MountParseError(f"Invalid number for {field}: '{token}' out of range")
    return value


def parse_mount_line(line: str) -> Mount:
    """Parse one line of a mount table (fsname dir type options freq passno)."""
    parts = line.split()
    if len(parts) < len(MOUNT_FIELDS):
        raise MountParseError(f"Missing value {MOUNT_FIELDS[len(parts)]}")

    fsname, directory, fstype, options, freq, passno = parts[:len(MOUNT_FIELDS)]
    freq = parse_int32(freq, "freq")
    passno = parse_int32(passno, "passno")

    return Mount(
        fsname=fsname,
        dir=directory,
        type=fstype,
        options=options,
        freq=freq,
        passno=passno,
    )


def parse_mounts(lines: Iterable[str]) -> List[Mount]:
    """
    Parses every line of a mount table, keeping file order.
    Stops at the first malformed line.
    """
    mounts = []
    for line_number, line in enumerate(lines, start=1):
        try:
            mounts.append(parse_mount_line(line))
        except MountParseError as e:
            raise MountParseError(str(e), line_number=line_number, line=line.rstrip("\n")) from e
    return mounts


def read_mounts(path: str) -> List[Mount]:
    """Reads and parses the mount table at path."""
    logger.debug(f"Reading mount table from {path}")
    try:
        with open(path, "r") as f:
            return parse_mounts(f)
    except OSError as e:
        raise MountTableError(f"Cannot read mount table {path}: {e.strerror or e}") from e
