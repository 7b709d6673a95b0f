from typing import List

from dfree.mounts.models import Mount

TOTAL_NAME = "total"


def calc_total(mounts: List[Mount]) -> Mount:
    """Sums capacity, free and used over mounts into a synthetic "total" mount."""
    return Mount.named(TOTAL_NAME).model_copy(update={
        "capacity": sum(m.capacity for m in mounts),
        "free": sum(m.free for m in mounts),
        "used": sum(m.used for m in mounts),
    })
