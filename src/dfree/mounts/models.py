from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from dfree.mounts.aliases import lvm_alias

REMOTE_FILESYSTEM_TYPES = (
    "afs",
    "cifs",
    "coda",
    "ftpfs",
    "fuse.sshfs",
    "mfs",
    "ncpfs",
    "nfs",
    "nfs4",
    "smbfs",
    "sshfs",
)


class Mount(BaseModel):
    """One entry of the mount table plus its usage counts.

    capacity, free and used are bytes or inodes depending on how the mount was
    enriched. A capacity of 0 means usage is unknown.
    """
    model_config = ConfigDict(frozen=True)

    fsname: str
    dir: str
    type: str
    options: str
    freq: int
    passno: int
    capacity: int = 0
    free: int = 0
    used: int = 0
    stat: Optional[Dict[str, Any]] = None

    @classmethod
    def named(cls, name: str) -> "Mount":
        return cls(fsname=name, dir="-", type="-", options="", freq=0, passno=0)

    def fsname_aliased(self) -> str:
        return lvm_alias(self.fsname) or self.fsname

    def used_percentage(self) -> Optional[float]:
        if self.capacity == 0:
            return None
        return 100.0 - self.free * 100.0 / self.capacity

    def free_percentage(self) -> Optional[float]:
        if self.capacity == 0:
            return None
        return self.free * 100.0 / self.capacity

    def is_remote(self) -> bool:
        return self.type in REMOTE_FILESYSTEM_TYPES

    def is_local(self) -> bool:
        return not self.is_remote()


class MountStat(BaseModel):
    capacity: int = 0
    free: int = 0
    raw: Optional[Dict[str, Any]] = None
