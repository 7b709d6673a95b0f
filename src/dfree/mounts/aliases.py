from typing import Optional

MAPPER_PREFIX = "/dev/mapper/"

# Stands in for an escaped "--" while splitting on the first real dash
_ESCAPED_DASH = "$$"


def lvm_alias(device: str) -> Optional[str]:
    """
    Translate a device-mapper path into its LVM volume group/logical volume name.

    /dev/mapper/vg-lv becomes /dev/vg/lv. Device mapper escapes a dash that is
    part of a name by doubling it, so /dev/mapper/my--vg-root is /dev/my-vg/root.
    Returns None when the device is not an LVM mapper device.
    """
    if not device.startswith(MAPPER_PREFIX):
        return None

    name = device[len(MAPPER_PREFIX):].replace("--", _ESCAPED_DASH)
    if "-" not in name:
        return None

    vg, lv = name.split("-", 1)
    return f"/dev/{vg}/{lv}".replace(_ESCAPED_DASH, "-")
