import enum
import math

UNITS = ["B", "k", "M", "G", "T", "P", "E", "Z", "Y"]


class NumberFormat(enum.Enum):
    BASE10 = "base10"
    BASE2 = "base2"

    @property
    def powers_of(self) -> int:
        return 1000 if self is NumberFormat.BASE10 else 1024


def _plain_number(num: float) -> str:
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return repr(num)


def format_count(num: float, base: float) -> str:
    """
    Human readable count with one decimal, e.g. 12693000 -> "12.1M" in base 1024.

    Values below 1 are returned as plain numbers without a unit. Values past the
    largest unit keep growing the mantissa ("2097152.0Y").
    """
    if num < 1:
        return _plain_number(num)

    exponent = math.floor(math.log(num, base))
    # log() may land on either side of an exact power of the base
    while base ** (exponent + 1) <= num:
        exponent += 1
    while exponent > 0 and base ** exponent > num:
        exponent -= 1
    exponent = min(exponent, len(UNITS) - 1)
    return f"{num / base ** exponent:.1f}{UNITS[exponent]}"
